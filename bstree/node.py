"""Node type shared by the builder and the tree operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class Node:
    """Binary search tree node holding an ordered *key* and two child slots."""

    key: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __post_init__(self) -> None:
        if self.key is None:
            raise TypeError("Node key must not be None")


__all__ = ["Node"]
