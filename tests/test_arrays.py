from collections import Counter
from itertools import chain

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.arrays import (
    equilibrium_index,
    max_subarray,
    merge_k_sorted,
    merge_sorted,
    rotate,
    sorted_union,
    trapped_water,
)

ints = st.integers(min_value=-1000, max_value=1000)
heights = st.lists(st.integers(min_value=0, max_value=100))
sorted_lists = st.lists(ints).map(sorted)


def test_trapped_water_single_basin():
    assert trapped_water([3, 0, 3]) == 3


@pytest.mark.parametrize("bars", [[], [4], [4, 1], [1, 2, 3, 4], [5, 4, 3, 2]])
def test_trapped_water_holds_nothing_without_basin(bars):
    assert trapped_water(bars) == 0


@given(heights)
def test_trapped_water_is_symmetric_and_non_negative(bars):
    water = trapped_water(bars)
    assert water >= 0
    assert water == trapped_water(list(reversed(bars)))


@given(st.lists(ints, min_size=1))
def test_equilibrium_position_balances_sums(values):
    position = equilibrium_index(values)
    if position is None:
        assert all(
            sum(values[: p - 1]) != sum(values[p:]) for p in range(1, len(values) + 1)
        )
    else:
        assert sum(values[: position - 1]) == sum(values[position:])
        assert all(
            sum(values[: p - 1]) != sum(values[p:]) for p in range(1, position)
        )


def test_equilibrium_absent():
    assert equilibrium_index([1, 2]) is None


@given(st.lists(ints, min_size=1, max_size=30))
def test_max_subarray_is_optimal(values):
    result = max_subarray(values)
    assert result.start <= result.end
    assert sum(values[result.start : result.end + 1]) == result.total
    for i in range(len(values)):
        for j in range(i + 1, len(values) + 1):
            assert sum(values[i:j]) <= result.total


@given(st.lists(st.integers(max_value=-1), min_size=1))
def test_max_subarray_all_negative_picks_largest(values):
    result = max_subarray(values)
    assert result.total == max(values)
    assert result.start == result.end


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


def test_merge_k_sorted_example():
    arrays = [[1, 3, 5], [2, 7], [6, 8, 9]]
    assert merge_k_sorted(arrays) == sorted(chain.from_iterable(arrays))


@given(st.lists(sorted_lists))
def test_merge_k_sorted_matches_sorted(arrays):
    assert merge_k_sorted(arrays) == sorted(chain.from_iterable(arrays))


@given(sorted_lists, sorted_lists)
def test_merge_sorted_matches_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sorted_with_empty_side():
    assert merge_sorted([], [1, 2]) == [1, 2]
    assert merge_sorted([3, 4], []) == [3, 4]


def test_rotate_example():
    assert rotate([4, 5, 6, 7, 0, 1, 2], 3) == [0, 1, 2, 4, 5, 6, 7]


@given(st.lists(ints, min_size=1), st.integers(min_value=-50, max_value=50))
def test_rotate_round_trip(values, k):
    rotated = rotate(values, k)
    assert Counter(rotated) == Counter(values)
    assert rotated[k % len(values)] == values[0]
    assert rotate(rotated, -k) == values


def test_rotate_empty():
    assert rotate([], 3) == []


def test_sorted_union_example():
    first = [5, 10, 15, 20, 25]
    second = [50, 40, 30, 20, 10]
    assert sorted_union(first, second) == [5, 10, 15, 20, 25, 30, 40, 50]


@given(st.lists(ints), st.lists(ints))
def test_sorted_union_multiplicities(first, second):
    result = sorted_union(first, second)
    assert result == sorted(result)
    assert Counter(result) == Counter(first) | Counter(second)