"""Defaults and persisted JSON config for treeviz.

Holds the default ignore list and output format, builds the effective ignore
set, and reads optional user defaults from the platform config directory.
The config file is only read; a missing or broken file means built-in defaults.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "treeviz"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_IGNORES: tuple[str, ...] = (
    "node_modules",
    ".claude",
    ".git",
    ".next",
    ".husky",
    ".turbo",
    "dist",
    "build",
    ".DS_Store",
)


class OutputFormat(str, Enum):
    ASCII = "ascii"
    JSON = "json"
    MARKDOWN = "markdown"


DEFAULT_FORMAT = OutputFormat.ASCII


def parse_ignore_list(text: str) -> list[str]:
    """Split a comma-separated ignore value into stripped, non-empty names."""
    return [name.strip() for name in text.split(",") if name.strip()]


def build_ignore_set(extra: Iterable[str] = (), use_defaults: bool = True) -> frozenset[str]:
    """Return defaults plus ``extra``, or only ``extra`` when defaults are off."""
    names = set(DEFAULT_IGNORES) if use_defaults else set()
    names.update(name.strip() for name in extra if name.strip())
    return frozenset(names)


def load_config() -> dict[str, object]:
    """Read the user's config file, or ``{}`` if absent or not a JSON object."""
    try:
        raw = CONFIG_PATH.read_text(encoding="utf-8")
        data = json.loads(raw)
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


@dataclass(frozen=True)
class UserDefaults:
    """Validated defaults read from the user config file."""

    ignore: tuple[str, ...] = ()
    output_format: OutputFormat = DEFAULT_FORMAT
    follow_symlinks: bool = False
    max_depth: int | None = None


def _coerce_ignore(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(name.strip() for name in value if isinstance(name, str) and name.strip())


def _coerce_format(value: object) -> OutputFormat:
    if isinstance(value, str):
        try:
            return OutputFormat(value)
        except ValueError:
            pass
    return DEFAULT_FORMAT


def _coerce_max_depth(value: object) -> int | None:
    """Booleans, negatives and non-integers mean "unbounded"."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def load_user_defaults() -> UserDefaults:
    """Read ``ignore``, ``format``, ``follow_symlinks`` and ``max_depth``.

    Invalid values are dropped in favor of built-in defaults.
    """
    data = load_config()
    follow = data.get("follow_symlinks")
    return UserDefaults(
        ignore=_coerce_ignore(data.get("ignore")),
        output_format=_coerce_format(data.get("format")),
        follow_symlinks=follow if isinstance(follow, bool) else False,
        max_depth=_coerce_max_depth(data.get("max_depth")),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_FORMAT",
    "DEFAULT_IGNORES",
    "OutputFormat",
    "UserDefaults",
    "build_ignore_set",
    "load_config",
    "load_user_defaults",
    "parse_ignore_list",
]
