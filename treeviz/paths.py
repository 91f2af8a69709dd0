"""Target-path resolution and validation for the CLI front door."""

from __future__ import annotations

from pathlib import Path


class TargetPathError(ValueError):
    """Raised when a requested root cannot be rendered."""


def is_within(path: Path, root: Path) -> bool:
    """Return whether ``path`` is at or under ``root``."""
    try:
        path.relative_to(root)
        return True
    except ValueError:
        return False


def resolve_target(path: Path | str, base: Path | str | None = None) -> Path:
    """Resolve ``path`` to an existing canonical directory.

    When ``base`` is given, the canonical target must stay inside the
    canonical ``base`` so symlinks or ``..`` segments cannot escape it.
    """
    target = Path(path).expanduser().resolve()
    if not target.exists():
        raise TargetPathError(f"Path does not exist: {target}")
    if not target.is_dir():
        raise TargetPathError(f"Not a directory: {target}")
    if base is not None:
        base_path = Path(base).expanduser().resolve()
        if not is_within(target, base_path):
            raise TargetPathError(f"Path escapes base directory {base_path}: {target}")
    return target


__all__ = [
    "TargetPathError",
    "is_within",
    "resolve_target",
]
