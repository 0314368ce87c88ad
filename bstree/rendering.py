"""Sideways text rendering of a tree for consoles.

The tree lies on its side with the right subtree on top, drawn with box
connectors (``┌──`` for right children, ``└──`` for the root and left
children). Only ``key``/``left``/``right`` are read; the tree is never
modified.
"""

from __future__ import annotations

from typing import List, Optional

from .node import Node

__all__ = ["pretty_print"]


def _side_lines(node: Node, prefix: str, is_left: bool, lines: List[str]) -> None:
    if node.right is not None:
        _side_lines(node.right, prefix + ("│   " if is_left else "    "), False, lines)
    lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.key}")
    if node.left is not None:
        _side_lines(node.left, prefix + ("    " if is_left else "│   "), True, lines)


def pretty_print(root: Optional[Node], prefix: str = "") -> str:
    """Render *root* sideways. An empty tree renders as an empty string."""

    if root is None:
        return ""
    lines: List[str] = []
    _side_lines(root, prefix, True, lines)
    return "\n".join(lines)
