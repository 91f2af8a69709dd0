"""Filesystem traversal that builds ``TreeNode`` trees.

The walk is depth-first and synchronous. Cycle detection and the entry
budget live on a ``TraversalContext`` shared by every recursive call of one
top-level ``traverse`` run, so sibling subtrees observe each other's writes.
"""

from __future__ import annotations

import locale
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..config import DEFAULT_IGNORES
from .types import TreeNode

logger = logging.getLogger(__name__)

MAX_ENTRIES = 10_000


@dataclass
class TraversalContext:
    """Mutable state for one traversal run.

    ``visited`` holds canonical paths of the root and every followed symlink
    target. ``entry_count`` counts accepted entries across the whole run.
    """

    visited: set[Path] = field(default_factory=set)
    entry_count: int = 0
    max_entries: int = MAX_ENTRIES
    limit_reached: bool = False

    def claim_entry(self) -> bool:
        """Reserve budget for one entry; ``False`` once the cap is hit."""
        if self.entry_count >= self.max_entries:
            if not self.limit_reached:
                self.limit_reached = True
                logger.warning(
                    "Entry limit reached (%d). Tree output is truncated.",
                    self.max_entries,
                )
            return False
        self.entry_count += 1
        return True


def _sort_key(node: TreeNode) -> tuple[bool, str, str]:
    return (not node.is_dir, locale.strxfrm(node.name.casefold()), node.name)


def sort_children(children: Iterable[TreeNode]) -> tuple[TreeNode, ...]:
    """Order siblings: directories first, then locale-aware by name."""
    return tuple(sorted(children, key=_sort_key))


def _resolve_link(path: Path) -> Path | None:
    """Return the canonical target of ``path`` or ``None`` when broken."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def _list_children(
    directory: Path,
    ignore_names: frozenset[str],
    max_depth: int | None,
    depth: int,
    follow_symlinks: bool,
    context: TraversalContext,
) -> tuple[TreeNode, ...]:
    """List and classify ``directory``; raises ``OSError`` when unreadable."""
    nodes: list[TreeNode] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            name = entry.name
            if name in ignore_names:
                continue
            if not context.claim_entry():
                break

            child_path = Path(entry.path)
            if entry.is_symlink():
                if not follow_symlinks:
                    logger.debug("Skipping symlink %s", child_path)
                    continue
                target = _resolve_link(child_path)
                if target is None:
                    logger.debug("Skipping broken symlink %s", child_path)
                    continue
                if target in context.visited:
                    logger.debug("Skipping already visited symlink target %s", target)
                    continue
                context.visited.add(target)
                is_dir = target.is_dir()
            else:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

            if not is_dir:
                nodes.append(TreeNode.file(name))
                continue

            if max_depth is not None and depth >= max_depth:
                nodes.append(TreeNode.directory(name))
                continue

            try:
                children = _list_children(
                    child_path,
                    ignore_names,
                    max_depth,
                    depth + 1,
                    follow_symlinks,
                    context,
                )
            except OSError as exc:
                logger.debug("Not expanding %s: %s", child_path, exc)
                nodes.append(TreeNode.directory(name))
                continue
            nodes.append(TreeNode.directory(name, children))

    return sort_children(nodes)


def traverse(
    root_path: Path | str,
    ignore_names: Iterable[str] = DEFAULT_IGNORES,
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    context: TraversalContext | None = None,
) -> TreeNode:
    """Walk ``root_path`` and return its directory tree.

    ``max_depth`` of ``None`` is unbounded; ``0`` lists the root's entries
    without expanding any subdirectory. Failure to list the root itself
    propagates as ``OSError``. Unreadable subdirectories become unexpanded
    directory nodes and broken symlinks are omitted. The filesystem root has
    an empty base name, so renderers print it as a bare ``/``.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("max_depth must be >= 0")
    if context is None:
        context = TraversalContext()

    root = Path(root_path).resolve()
    context.visited.add(root)
    children = _list_children(
        root,
        frozenset(ignore_names),
        max_depth,
        0,
        follow_symlinks,
        context,
    )
    return TreeNode.directory(root.name, children)


__all__ = [
    "MAX_ENTRIES",
    "TraversalContext",
    "sort_children",
    "traverse",
]
