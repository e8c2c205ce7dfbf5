"""Divide and conquer: binary search, the unpaired element and merge sort."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def binary_search(
    values: Sequence[int], target: int, low: int = 0, high: int | None = None
) -> int:
    """Index of ``target`` in sorted ``values[low..high]``, or -1 when it is absent."""
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def single_in_pairs(values: Sequence[T]) -> T:
    """Find the one element without a neighbouring twin in a sorted, paired sequence."""
    low, high = 0, len(values) - 1
    while low < high:
        mid = low + (high - low) // 2
        if mid % 2 == 0:
            if values[mid] == values[mid + 1]:
                low = mid + 2
            else:
                high = mid
        elif values[mid] == values[mid - 1]:
            low = mid + 1
        else:
            high = mid
    if low == high:
        return values[low]
    raise ValueError("no unpaired element")


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Return a new list holding ``values`` in ascending order, sorted stably."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))