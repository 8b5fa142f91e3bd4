import random

import pytest

from widgetlab.randomness import (
    chance,
    choose_two_distinct_indices,
    range_exclusive,
    swap_two_distinct,
)


@pytest.mark.parametrize("seed", range(20))
def test_chance_extremes(seed):
    rng = random.Random(seed)
    assert chance(1.0, rng) is True
    assert chance(0.0, rng) is False


@pytest.mark.parametrize("p", [-0.1, 1.5, float("nan")])
def test_chance_rejects_bad_probability(p):
    with pytest.raises(ValueError):
        chance(p, random.Random(0))


def test_chance_half_yields_both_outcomes():
    rng = random.Random(7)
    results = {chance(0.5, rng) for _ in range(200)}
    assert results == {True, False}


def test_range_exclusive_stays_in_bounds():
    rng = random.Random(1)
    values = [range_exclusive(7, 77, rng) for _ in range(1000)]
    assert min(values) >= 7
    assert max(values) < 77


def test_range_exclusive_single_value():
    assert range_exclusive(4, 5, random.Random(3)) == 4


@pytest.mark.parametrize("bounds", [(5, 5), (6, 5)])
def test_range_exclusive_empty_range(bounds):
    with pytest.raises(ValueError):
        range_exclusive(*bounds, random.Random(0))


def test_choose_indices_short_sequences():
    assert choose_two_distinct_indices([]) is None
    assert choose_two_distinct_indices(["a"]) is None
    assert choose_two_distinct_indices(["a", "b"]) == (0, 1)


@pytest.mark.parametrize("seed", range(30))
def test_choose_indices_ordered_and_distinct(seed):
    items = list(range(9))
    a, b = choose_two_distinct_indices(items, random.Random(seed))
    assert 0 <= a < b < len(items)


def test_swap_too_short_returns_none():
    items = [1]
    assert swap_two_distinct(items, random.Random(0)) is None
    assert items == [1]


@pytest.mark.parametrize("seed", range(10))
def test_swap_changes_exactly_two_positions(seed):
    original = list(range(6))
    items = list(original)
    lo, hi = swap_two_distinct(items, random.Random(seed))
    assert sorted(items) == original
    changed = [i for i, (x, y) in enumerate(zip(items, original)) if x != y]
    assert changed == [lo, hi]
    assert items[lo] == original[hi] and items[hi] == original[lo]