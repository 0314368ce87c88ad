from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bstree import random_keys  # noqa: E402  -- imported after sys.path mutation


def test_random_keys_are_distinct_and_in_range() -> None:
    keys = random_keys(10, 100, rng=random.Random(5))

    assert len(keys) == 10
    assert len(set(keys)) == 10
    assert all(0 <= key < 100 for key in keys)


def test_random_keys_are_reproducible_with_seeded_rng() -> None:
    assert random_keys(10, rng=random.Random(21)) == random_keys(10, rng=random.Random(21))


def test_random_keys_can_exhaust_the_range() -> None:
    assert sorted(random_keys(5, 5)) == [0, 1, 2, 3, 4]
    assert random_keys(0, 0) == []


@pytest.mark.parametrize(
    ("count", "upper", "error"),
    [
        (-1, 10, ValueError),
        (11, 10, ValueError),
        (3, -2, ValueError),
        (2.5, 10, TypeError),
        (True, 10, TypeError),
    ],
)
def test_random_keys_validates_arguments(count, upper, error) -> None:
    with pytest.raises(error):
        random_keys(count, upper)
