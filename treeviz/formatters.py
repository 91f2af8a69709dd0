"""Text renderers for ``TreeNode`` trees.

Every renderer is a pure function of the tree. Directories carry a trailing
``/``; directories without an expanded listing render no rows beneath them.
"""

from __future__ import annotations

import json

from .config import OutputFormat
from .tree_model.types import TreeNode

ASCII_TEE = "├── "
ASCII_CORNER = "└── "
ASCII_PIPE = "│   "
ASCII_BLANK = "    "


def _display_name(node: TreeNode) -> str:
    return node.name + ("/" if node.is_dir else "")


def _ascii_rows(node: TreeNode, prefix: str, out: list[str]) -> None:
    children = node.children or ()
    last_index = len(children) - 1
    for index, child in enumerate(children):
        is_last = index == last_index
        connector = ASCII_CORNER if is_last else ASCII_TEE
        out.append(f"{prefix}{connector}{_display_name(child)}\n")
        if child.children:
            _ascii_rows(child, prefix + (ASCII_BLANK if is_last else ASCII_PIPE), out)


def generate_ascii_tree(node: TreeNode) -> str:
    """Render box-drawing tree text, one newline-terminated row per node."""
    out = [f"{node.name}/\n"]
    _ascii_rows(node, "", out)
    return "".join(out)


def generate_json_tree(node: TreeNode) -> str:
    """Render the tree as 2-space indented JSON, preserving child order."""
    return json.dumps(node.to_dict(), indent=2, ensure_ascii=False)


def _markdown_rows(node: TreeNode, indent: int, out: list[str]) -> None:
    prefix = "  " * indent
    for child in node.children or ():
        out.append(f"{prefix}- {_display_name(child)}\n")
        if child.children:
            _markdown_rows(child, indent + 1, out)


def generate_markdown_tree(node: TreeNode) -> str:
    """Render a nested Markdown list; root children share the root's level."""
    out = [f"- {node.name}/\n"]
    _markdown_rows(node, 0, out)
    return "".join(out)


_RENDERERS = {
    OutputFormat.ASCII: generate_ascii_tree,
    OutputFormat.JSON: generate_json_tree,
    OutputFormat.MARKDOWN: generate_markdown_tree,
}


def render_tree(node: TreeNode, output_format: OutputFormat | str = OutputFormat.ASCII) -> str:
    """Render ``node`` with the renderer registered for ``output_format``."""
    return _RENDERERS[OutputFormat(output_format)](node)


__all__ = [
    "generate_ascii_tree",
    "generate_json_tree",
    "generate_markdown_tree",
    "render_tree",
]
