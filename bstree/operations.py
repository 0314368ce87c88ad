"""Mutation and query operations over a binary search tree.

``Tree`` owns the root produced by :func:`bstree.builder.build_tree` and
``TreeOperations`` wraps a ``Tree`` to expose the full API:

* ``insert`` / ``delete_item`` / ``rebalance`` – in-place mutation. Inserts and
  deletes never rebalance on their own; call ``rebalance`` explicitly.
* ``find`` / ``get_parent`` / ``depth`` / ``height`` – structural queries.
* ``level_order`` / ``pre_order`` / ``in_order`` / ``post_order`` – traversals
  invoking an optional visitor with each ``Node``.
* ``is_balanced`` / ``check_balance`` – ``O(n)`` balance verification using a
  single post-order pass that short-circuits on the first unbalanced subtree.

Nodes carry no parent references. ``get_parent`` and ``depth`` rediscover the
ancestor chain by descending from the root with key comparisons, so the node
passed to them must still be reachable by its own key; otherwise
:class:`NodeNotFoundError` is raised.

The depth-first traversals use explicit stacks. ``rebalance`` flattens the tree
through ``in_order`` and therefore works on degenerate trees deeper than the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
import logging
from typing import Any, Callable, Deque, Iterable, Iterator, List, Optional

from .builder import build_tree
from .node import Node

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], None]

__all__ = [
    "NodeNotFoundError",
    "Tree",
    "TreeOperations",
    "Visitor",
]


class NodeNotFoundError(LookupError):
    """Raised when a node cannot be reached from the root by its own key."""


class Tree:
    """Owner of a single optional root node."""

    __slots__ = ("root",)

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = build_tree(keys)


class TreeOperations:
    """Insert, delete, search, traverse and rebalance a wrapped :class:`Tree`."""

    __slots__ = ("_tree",)

    def __init__(self, tree: Optional[Tree] = None) -> None:
        self._tree = tree if tree is not None else Tree()

    @classmethod
    def from_keys(cls, keys: Iterable[Any]) -> "TreeOperations":
        """Build a balanced tree from *keys* and wrap it."""

        return cls(Tree(keys))

    @property
    def tree(self) -> Tree:
        return self._tree

    @property
    def root(self) -> Optional[Node]:
        return self._tree.root

    @root.setter
    def root(self, node: Optional[Node]) -> None:
        self._tree.root = node

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, key: Any) -> None:
        """Attach *key* as a new leaf. Existing keys are ignored."""

        if self.root is None:
            self.root = Node(key)
            return

        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = Node(key)
                    return
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = Node(key)
                    return
                current = current.right
            else:
                logger.debug("Ignoring duplicate key %r", key)
                return

    def delete_item(self, key: Any) -> None:
        """Remove *key* from the tree. Absent keys leave the tree unchanged."""

        self.root = self.delete_node(self.root, key)

    def delete_node(self, node: Optional[Node], key: Any) -> Optional[Node]:
        """Delete *key* from the subtree at *node* and return its new root.

        A node with two children takes over the key of its in-order successor,
        which is then removed from the right subtree where it has at most one
        child.
        """

        if node is None:
            logger.debug("Key %r not present; nothing to delete", key)
            return None

        if key < node.key:
            node.left = self.delete_node(node.left, key)
        elif key > node.key:
            node.right = self.delete_node(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            successor = self.find_min_node(node.right)
            node.key = successor.key
            node.right = self.delete_node(node.right, successor.key)
        return node

    @staticmethod
    def find_min_node(node: Node) -> Node:
        """Return the leftmost node of the subtree rooted at *node*."""

        while node.left is not None:
            node = node.left
        return node

    def rebalance(self) -> None:
        """Rebuild the tree as height-balanced while keeping its key set."""

        keys: List[Any] = []
        self.in_order(lambda node: keys.append(node.key))
        self.root = build_tree(keys)
        logger.debug("Rebalanced %d keys; height is now %d", len(keys), self.height(self.root))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding *key* or ``None`` when it is absent."""

        current = self.root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def height(self, node: Optional[Node]) -> int:
        """Return the number of edges on the longest path below *node*.

        An empty subtree has height ``-1`` and a single leaf has height ``0``.
        """

        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def get_parent(self, node: Node) -> Optional[Node]:
        """Return the parent of *node*, or ``None`` when *node* is the root.

        The parent is located by descending from the root with ``node.key``.
        :class:`NodeNotFoundError` is raised when no node on that path holds
        *node* as a child.
        """

        if node is self.root:
            return None

        current = self.root
        while current is not None:
            if current.left is node or current.right is node:
                return current
            current = current.left if node.key < current.key else current.right
        raise NodeNotFoundError(f"Node with key {node.key!r} is not part of this tree")

    def depth(self, node: Node) -> int:
        """Return the number of edges between the root and *node*."""

        depth = 0
        current = node
        while current is not self.root:
            depth += 1
            current = self.get_parent(current)
        return depth

    def is_balanced(self) -> bool:
        """Return ``True`` when no node's subtrees differ in height by more than one."""

        return self.check_balance(self.root) != -1

    def check_balance(self, node: Optional[Node]) -> int:
        """Return the level count of *node*'s subtree or ``-1`` when unbalanced.

        Empty subtrees count as ``0`` levels and leaves as ``1``. Once any
        subtree reports ``-1`` the sentinel is propagated to the top without
        inspecting further height differences.
        """

        if node is None:
            return 0

        left_height = self.check_balance(node.left)
        if left_height == -1:
            return -1
        right_height = self.check_balance(node.right)
        if right_height == -1:
            return -1

        if abs(left_height - right_height) > 1:
            return -1
        return max(left_height, right_height) + 1

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def level_order(self, visit: Optional[Visitor] = None) -> List[Any]:
        """Return keys breadth-first, calling *visit* for each dequeued node."""

        if self.root is None:
            return []

        result: List[Any] = []
        queue: Deque[Node] = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.key)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            if visit is not None:
                visit(node)
        return result

    def pre_order(self, visit: Visitor) -> None:
        """Call *visit* for every node in node-left-right order."""

        if self.root is None:
            return
        stack: List[Node] = [self.root]
        while stack:
            node = stack.pop()
            visit(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self, visit: Visitor) -> None:
        """Call *visit* for every node in left-node-right (ascending key) order."""

        for node in self._iter_in_order():
            visit(node)

    def post_order(self, visit: Visitor) -> None:
        """Call *visit* for every node in left-right-node order."""

        stack: List[Node] = []
        current = self.root
        last_visited: Optional[Node] = None
        while stack or current is not None:
            if current is not None:
                stack.append(current)
                current = current.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last_visited:
                current = top.right
            else:
                visit(top)
                last_visited = stack.pop()

    def _iter_in_order(self) -> Iterator[Node]:
        stack: List[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def keys(self) -> List[Any]:
        """Return all keys in ascending order."""

        return [node.key for node in self._iter_in_order()]

    def __iter__(self) -> Iterator[Any]:
        for node in self._iter_in_order():
            yield node.key

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_in_order())

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None
