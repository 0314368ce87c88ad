"""Tests for balanced tree construction."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bstree import Node, TreeOperations, build_tree  # noqa: E402  -- imported after sys.path mutation

SCENARIO_KEYS = [1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324]


def test_build_tree_empty_input_returns_none() -> None:
    assert build_tree([]) is None


def test_build_tree_single_key() -> None:
    root = build_tree([42])
    assert root == Node(42)


def test_build_tree_collapses_duplicates_and_sorts() -> None:
    tree = TreeOperations.from_keys(SCENARIO_KEYS)

    assert tree.keys() == [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]
    assert tree.is_balanced()


def test_build_tree_shape_uses_lower_midpoint() -> None:
    tree = TreeOperations.from_keys(SCENARIO_KEYS)

    assert tree.level_order() == [8, 4, 67, 1, 5, 9, 324, 3, 7, 23, 6345]


def test_build_tree_even_length_prefers_lower_index() -> None:
    root = build_tree([10, 20, 30, 40])

    assert root is not None
    assert root.key == 20
    assert root.left == Node(10)
    assert root.right == Node(30, right=Node(40))


def test_build_tree_accepts_any_iterable_of_ordered_keys() -> None:
    root = build_tree(iter(["pear", "apple", "fig", "apple"]))

    assert TreeOperations.from_keys(["pear", "apple", "fig"]).level_order() == ["fig", "apple", "pear"]
    assert root is not None and root.key == "fig"


def test_build_tree_rejects_mixed_unorderable_keys() -> None:
    with pytest.raises(TypeError):
        build_tree([1, "two", 3])


@pytest.mark.parametrize("seed", range(8))
def test_build_tree_in_order_matches_sorted_unique_input(seed: int) -> None:
    rng = random.Random(seed)
    keys = [rng.randint(-50, 50) for _ in range(rng.randint(0, 120))]

    tree = TreeOperations.from_keys(keys)

    assert tree.keys() == sorted(set(keys))
    assert tree.is_balanced()


def test_node_rejects_none_key() -> None:
    with pytest.raises(TypeError):
        Node(None)
