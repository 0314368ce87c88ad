"""Random sample keys for demonstrations and property checks."""

from __future__ import annotations

import random
from typing import List, Optional


def _validate_bound(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def random_keys(
    count: int, upper: int = 100, *, rng: Optional[random.Random] = None
) -> List[int]:
    """Return *count* distinct integers drawn from ``range(upper)``.

    Pass a seeded ``random.Random`` as *rng* for reproducible output.
    """

    _validate_bound("count", count)
    _validate_bound("upper", upper)
    if count > upper:
        raise ValueError(
            f"Cannot draw {count} distinct keys from a range of {upper} values"
        )
    generator = rng if rng is not None else random.Random()
    return generator.sample(range(upper), count)


__all__ = ["random_keys"]
