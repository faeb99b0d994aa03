import random

import pytest

from cpalgos.monotonic import (
    days_to_warmer,
    largest_rectangle_area,
    largest_rectangle_area_bounds,
    next_greater_right,
    next_greater_values,
    next_smaller_right,
    prev_greater_left,
    prev_smaller_left,
    span_greater_equal_left,
)


def _first_index(indices, pred):
    return next((j for j in indices if pred(j)), -1)


def _random_values(seed, size=15):
    rng = random.Random(seed)
    return [rng.randint(0, 8) for _ in range(size)]


@pytest.mark.parametrize("seed", range(6))
def test_next_and_previous_queries_match_scans(seed):
    a = _random_values(seed)
    n = len(a)
    assert next_greater_right(a) == [
        _first_index(range(i + 1, n), lambda j, i=i: a[j] > a[i]) for i in range(n)
    ]
    assert next_smaller_right(a) == [
        _first_index(range(i + 1, n), lambda j, i=i: a[j] < a[i]) for i in range(n)
    ]
    assert prev_greater_left(a) == [
        _first_index(range(i - 1, -1, -1), lambda j, i=i: a[j] > a[i]) for i in range(n)
    ]
    assert prev_smaller_left(a) == [
        _first_index(range(i - 1, -1, -1), lambda j, i=i: a[j] < a[i]) for i in range(n)
    ]


@pytest.mark.parametrize("seed", range(6))
def test_next_greater_values_follow_indices(seed):
    a = _random_values(seed)
    expected = [a[j] if j != -1 else -1 for j in next_greater_right(a)]
    assert next_greater_values(a) == expected


def test_days_to_warmer_example():
    temps = [73, 74, 75, 71, 69, 72, 76, 73]
    assert days_to_warmer(temps) == [1, 1, 4, 2, 1, 1, 0, 0]


@pytest.mark.parametrize("seed", range(6))
def test_days_to_warmer_agrees_with_next_greater(seed):
    a = _random_values(seed)
    expected = [j - i if j != -1 else 0 for i, j in enumerate(next_greater_right(a))]
    assert days_to_warmer(a) == expected


def test_largest_rectangle_example():
    heights = [2, 1, 5, 6, 2, 3]
    assert largest_rectangle_area(heights) == 10
    assert largest_rectangle_area_bounds(heights) == 10


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0
    assert largest_rectangle_area_bounds([]) == 0


@pytest.mark.parametrize("seed", range(8))
def test_largest_rectangle_matches_brute_force(seed):
    h = _random_values(seed, size=10)
    brute = max(
        min(h[i : j + 1]) * (j - i + 1) for i in range(len(h)) for j in range(i, len(h))
    )
    assert largest_rectangle_area(h) == brute
    assert largest_rectangle_area_bounds(h) == brute


def test_span_stock_example():
    prices = [100, 80, 60, 70, 60, 75, 85]
    assert span_greater_equal_left(prices) == [1, 1, 1, 2, 1, 4, 6]


def test_span_of_increasing_sequence_is_position():
    values = list(range(8))
    assert span_greater_equal_left(values) == [i + 1 for i in range(len(values))]