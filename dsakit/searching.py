"""Binary searches over sorted and rotated sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def find_pivot(values: Sequence[int]) -> int | None:
    """Index of the largest element of a rotated sorted sequence.

    Returns ``None`` when the sequence shows no rotation point.
    """
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if mid < end and values[mid] > values[mid + 1]:
            return mid
        if mid > start and values[mid] < values[mid - 1]:
            return mid - 1
        if values[mid] <= values[start]:
            end = mid - 1
        else:
            start = mid + 1
    return None


def binary_search(
    values: Sequence[int], key: int, start: int = 0, end: int | None = None
) -> int | None:
    """Find ``key`` in the sorted slice ``values[start..end]`` (inclusive)."""
    if end is None:
        end = len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            start = mid + 1
        else:
            end = mid - 1
    return None


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in a rotated sorted sequence, or ``None``."""
    if len(values) <= 2:
        for index, value in enumerate(values):
            if value == target:
                return index
        return None
    pivot = find_pivot(values)
    split = -1 if pivot is None else pivot
    left = binary_search(values, target, 0, split)
    if left is not None:
        return left
    return binary_search(values, target, split + 1, len(values) - 1)


def first_and_last(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """First and last index of ``target`` in a sorted sequence, or ``None``."""
    first = bisect_left(values, target)
    if first == len(values) or values[first] != target:
        return None
    return first, bisect_right(values, target) - 1