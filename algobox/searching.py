"""Binary search, lower/upper bounds and an nth-root bisection."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

__all__ = ["binary_search", "lower_bound", "upper_bound", "nth_root"]

_EPSILON = 1e-6


def binary_search(values: Sequence, target) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        middle = (start + end) // 2
        if values[middle] == target:
            return middle
        if values[middle] < target:
            start = middle + 1
        else:
            end = middle - 1
    return None


def lower_bound(values: Sequence, element) -> int | None:
    """Return the first index whose value is not less than ``element``.

    None is returned when every value is smaller.
    """
    index = bisect_left(values, element)
    return index if index < len(values) else None


def upper_bound(values: Sequence, element) -> int | None:
    """Return the first index whose value is greater than ``element``.

    None is returned when no value is greater.
    """
    index = bisect_right(values, element)
    return index if index < len(values) else None


def nth_root(n: int, m: float) -> float:
    """Approximate the ``n``-th root of ``m`` by bisection on [1, m].

    The result is accurate to about 1e-6. For ``m`` at or below 1 the
    search interval is empty and 1.0 is returned.
    """
    if n < 1:
        raise ValueError("root degree must be at least 1")
    low, high = 1.0, float(m)
    while high - low > _EPSILON:
        mid = (low + high) / 2.0
        if mid**n < m:
            low = mid
        else:
            high = mid
    return low