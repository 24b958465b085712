"""Array algorithms: trapped water, equilibrium, subarray sums, merging, rotation."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Sequence
from typing import NamedTuple

__all__ = [
    "SubarraySum",
    "trapped_water",
    "equilibrium_index",
    "max_subarray",
    "merge_k_sorted",
    "merge_sorted",
    "rotate",
    "sorted_union",
]


class SubarraySum(NamedTuple):
    """The largest contiguous sum and the inclusive bounds where it lies."""

    total: int
    start: int
    end: int


def trapped_water(heights: Iterable[int]) -> int:
    """Return how much water is held between bars of the given heights."""
    items = list(heights)
    if len(items) < 3:
        return 0
    left_max = list(itertools.accumulate(items, max))
    right_max = list(itertools.accumulate(reversed(items), max))[::-1]
    inner = zip(left_max[1:-1], right_max[1:-1], items[1:-1])
    return sum(min(left, right) - height for left, right, height in inner)


def equilibrium_index(values: Iterable[int]) -> int | None:
    """Return the 1-based position where the sums on both sides are equal.

    The element at that position belongs to neither side. None is
    returned when no such position exists.
    """
    items = list(values)
    right = sum(items)
    left = 0
    for position, value in enumerate(items, start=1):
        right -= value
        if left == right:
            return position
        left += value
    return None


def max_subarray(values: Iterable[int]) -> SubarraySum:
    """Find the contiguous run with the largest sum (Kadane's algorithm)."""
    items = list(values)
    if not items:
        raise ValueError("max_subarray needs at least one value")
    best: SubarraySum | None = None
    running = 0
    run_start = 0
    for index, value in enumerate(items):
        running += value
        if best is None or best.total < running:
            best = SubarraySum(running, run_start, index)
        if running < 0:
            running = 0
            run_start = index + 1
    assert best is not None
    return best


def merge_k_sorted(arrays: Iterable[Sequence[int]]) -> list[int]:
    """Merge any number of sorted sequences into one sorted list."""
    lists = [list(array) for array in arrays]
    heap = [(array[0], i, 0) for i, array in enumerate(lists) if array]
    heapq.heapify(heap)
    merged: list[int] = []
    while heap:
        value, i, j = heapq.heappop(heap)
        merged.append(value)
        if j + 1 < len(lists[i]):
            heapq.heappush(heap, (lists[i][j + 1], i, j + 1))
    return merged


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences; on ties the element of ``first`` comes first."""
    return list(heapq.merge(first, second))


def rotate(values: Iterable, k: int) -> list:
    """Return ``values`` rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    split = len(items) - k % len(items)
    return items[split:] + items[:split]


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the sorted union of two collections.

    An element present several times appears as often as in whichever
    input holds it more often.
    """
    left = sorted(first)
    right = sorted(second)
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        elif right[j] < left[i]:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result