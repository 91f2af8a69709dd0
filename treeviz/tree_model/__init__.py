"""Domain model for traversed directory trees.

This package contains non-UI tree primitives:
- ``TreeNode``/``NodeKind`` datatypes with optional nested children
- the cycle-safe, entry-capped filesystem traversal that builds them
"""

from __future__ import annotations

from .types import NodeKind, TreeNode
from .traversal import MAX_ENTRIES, TraversalContext, sort_children, traverse

__all__ = [
    "NodeKind",
    "TreeNode",
    "MAX_ENTRIES",
    "TraversalContext",
    "sort_children",
    "traverse",
]
