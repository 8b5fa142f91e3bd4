"""Small random helpers: Bernoulli trials, ranges and picking distinct pairs."""

from __future__ import annotations

import random
from typing import MutableSequence, Optional, Sequence, Tuple


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def chance(p: float, rng: Optional[random.Random] = None) -> bool:
    """Return True with probability ``p``, which must lie in ``[0, 1]``."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability {p!r} is not in [0, 1]")
    return _rng_or_default(rng).random() < p


def range_exclusive(minimum: int, maximum: int, rng: Optional[random.Random] = None) -> int:
    """Random integer from the half-open range ``[minimum, maximum)``."""
    if maximum <= minimum:
        raise ValueError(f"empty range [{minimum}, {maximum})")
    return _rng_or_default(rng).randrange(minimum, maximum)


def choose_two_distinct_indices(
    items: Sequence[object], rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """Pick two distinct indices ``(a, b)`` with ``a < b``, or None for fewer than two items."""
    n = len(items)
    if n < 2:
        return None
    if n == 2:
        return (0, 1)
    rng = _rng_or_default(rng)
    first = range_exclusive(0, n, rng)
    second = first
    while second == first:
        second = range_exclusive(0, n, rng)
    return (first, second) if first < second else (second, first)


def swap_two_distinct(
    items: MutableSequence[object], rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """Swap two distinct random elements in place; return their indices, or None."""
    chosen = choose_two_distinct_indices(items, rng)
    if chosen is None:
        return None
    lo, hi = chosen
    items[lo], items[hi] = items[hi], items[lo]
    return chosen