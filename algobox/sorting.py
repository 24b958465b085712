"""Classic comparison and counting sorts returning new sorted lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

__all__ = [
    "count_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "shell_sort",
]


def count_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("count_sort only accepts non-negative integers")
    counts = Counter(items)
    largest = max(items, default=0)
    result: list[int] = []
    for value in range(largest + 1):
        result.extend([value] * counts[value])
    return result


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort using an in-place max-heap on a copy of the input."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Sort by recursively splitting and merging halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> list:
    """Sort with Lomuto-partition quicksort, last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable) -> list:
    """Sort by repeatedly selecting the minimum of the unsorted tail."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def shell_sort(values: Iterable) -> list:
    """Sort with gapped insertion sort, halving the gap each pass."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for j in range(gap, len(items)):
            current = items[j]
            i = j
            while i >= gap and items[i - gap] > current:
                items[i] = items[i - gap]
                i -= gap
            items[i] = current
        gap //= 2
    return items