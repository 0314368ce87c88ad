"""Balanced tree construction from an arbitrary key sequence.

``build_tree`` collapses duplicates, sorts the remaining keys and partitions
the sorted sequence around its midpoint recursively. Because every split
leaves at most one extra key on the left or right, the resulting tree is
height-balanced and the recursion depth is ``O(log n)``.

Even-length ranges pick the lower midpoint (floor division) so the shape of a
tree built from a given key set is fully reproducible.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from .node import Node


def _build_range(sorted_keys: Sequence[Any], start: int, end: int) -> Optional[Node]:
    """Return the balanced subtree for ``sorted_keys[start:end + 1]``."""

    if start > end:
        return None

    mid = (start + end) // 2
    node = Node(sorted_keys[mid])
    node.left = _build_range(sorted_keys, start, mid - 1)
    node.right = _build_range(sorted_keys, mid + 1, end)
    return node


def build_tree(keys: Iterable[Any]) -> Optional[Node]:
    """Build a height-balanced binary search tree from *keys*.

    Equal keys are stored once. ``None`` is returned for an empty input.
    Keys that cannot be compared with each other propagate the ``TypeError``
    raised while sorting.
    """

    sorted_keys = sorted(set(keys))
    return _build_range(sorted_keys, 0, len(sorted_keys) - 1)


__all__ = ["build_tree"]
