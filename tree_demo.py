"""Command line demonstration of the ``bstree`` operations.

The script builds a balanced tree from random distinct keys, prints it with
every traversal order, pushes it out of balance by inserting keys larger than
anything in the sample, and finally calls ``rebalance()`` to restore the
height-balanced shape. Inputs come from an optional JSON/YAML configuration
file with command line flags taking precedence::

    python tree_demo.py --seed 7 --count 12 --extra 200,300,400

All tree logic lives in :mod:`bstree`; this module only sequences the calls
and formats human-readable output.
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Any, Iterable, List, Sequence, Tuple

from bstree import (
    ConfigError,
    DemoConfig,
    TreeOperations,
    load_demo_config,
    pretty_print,
    random_keys,
)

logger = logging.getLogger(__name__)


def _parse_key_list(raw: str) -> Tuple[int, ...]:
    try:
        return tuple(int(item) for item in raw.split(",") if item.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected comma separated integers: {raw!r}") from exc


def _join(keys: Iterable[Any]) -> str:
    return " ".join(str(key) for key in keys)


def _tree_section(title: str, tree: TreeOperations) -> List[str]:
    return [
        title,
        pretty_print(tree.root) or "<empty>",
        "",
        f"Is balanced: {tree.is_balanced()}",
        "",
    ]


def run_demo(config: DemoConfig) -> List[str]:
    """Execute the demonstration for *config* and return the output lines."""

    rng = random.Random(config.seed)
    keys = random_keys(config.sample_size, config.upper_bound, rng=rng)
    logger.info("Building tree from %d random keys", len(keys))
    tree = TreeOperations.from_keys(keys)

    lines = _tree_section("Initial tree:", tree)

    lines.append(f"Level order: {_join(tree.level_order())}")
    for label, traversal in (
        ("Pre order", tree.pre_order),
        ("Post order", tree.post_order),
        ("In order", tree.in_order),
    ):
        visited: List[Any] = []
        traversal(lambda node: visited.append(node.key))
        lines.append(f"{label}: {_join(visited)}")
    lines.append("")

    for key in config.extra_keys:
        tree.insert(key)
    lines.extend(_tree_section(f"After inserting {_join(config.extra_keys)}:", tree))

    tree.rebalance()
    lines.extend(_tree_section("After rebalance:", tree))

    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON or YAML file providing demo settings.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of random keys used to build the initial tree.",
    )
    parser.add_argument(
        "--upper",
        type=int,
        default=None,
        help="Exclusive upper bound for the random keys.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible random keys.",
    )
    parser.add_argument(
        "--extra",
        type=_parse_key_list,
        default=None,
        help="Comma separated keys inserted to unbalance the tree.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point printing the demonstration output."""

    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = load_demo_config(args.config).merged(
            sample_size=args.count,
            upper_bound=args.upper,
            seed=args.seed,
            extra_keys=args.extra,
        )
    except ConfigError as exc:
        logger.error("Invalid demo configuration: %s", exc)
        return 1

    for line in run_demo(config):
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
