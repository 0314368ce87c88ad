from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bstree import Node, TreeOperations, pretty_print  # noqa: E402  -- imported after sys.path mutation


def test_pretty_print_three_node_tree() -> None:
    root = Node(2, Node(1), Node(3))
    assert pretty_print(root) == "\n".join(["│   ┌── 3", "└── 2", "    └── 1"])


def test_pretty_print_nested_prefixes() -> None:
    tree = TreeOperations.from_keys(range(1, 8))
    expected = "\n".join(
        [
            "│       ┌── 7",
            "│   ┌── 6",
            "│   │   └── 5",
            "└── 4",
            "    │   ┌── 3",
            "    └── 2",
            "        └── 1",
        ]
    )
    assert pretty_print(tree.root) == expected


def test_pretty_print_empty_tree() -> None:
    assert pretty_print(None) == ""

