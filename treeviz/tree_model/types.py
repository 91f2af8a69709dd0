"""Domain datatypes for rendered directory trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(str, Enum):
    """Filesystem entry kind as serialized in structured output."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class TreeNode:
    """One file or directory in a traversed tree.

    ``children`` is ``None`` when a directory was listed but not expanded
    (depth cutoff or unreadable subdirectory). An empty tuple means the
    directory was traversed and held nothing after ignore filtering.
    """

    name: str
    kind: NodeKind
    children: tuple["TreeNode", ...] | None = None

    def __post_init__(self) -> None:
        if self.kind is NodeKind.FILE and self.children is not None:
            raise ValueError(f"file node {self.name!r} cannot have children")

    @classmethod
    def file(cls, name: str) -> TreeNode:
        return cls(name=name, kind=NodeKind.FILE)

    @classmethod
    def directory(cls, name: str, children: tuple[TreeNode, ...] | None = None) -> TreeNode:
        return cls(name=name, kind=NodeKind.DIRECTORY, children=children)

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_expanded(self) -> bool:
        """Return whether this directory's listing was traversed."""
        return self.children is not None

    def to_dict(self) -> dict[str, object]:
        """Return the structural JSON form; ``children`` only when present."""
        data: dict[str, object] = {"name": self.name, "type": self.kind.value}
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> TreeNode:
        """Rebuild a node from ``to_dict`` output.

        Raises ``ValueError`` for unknown kinds or malformed shapes.
        """
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError(f"node name must be a string, got {name!r}")
        kind = NodeKind(data.get("type"))
        raw_children = data.get("children")
        if raw_children is None:
            return cls(name=name, kind=kind)
        if not isinstance(raw_children, list):
            raise ValueError(f"children of {name!r} must be a list")
        children = tuple(cls.from_dict(child) for child in raw_children)
        return cls(name=name, kind=kind, children=children)


__all__ = [
    "NodeKind",
    "TreeNode",
]
