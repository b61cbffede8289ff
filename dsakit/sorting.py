"""Comparison sorts: bubble, selection and heap sort."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int], adaptive: bool = True) -> tuple[list[int], int]:
    """Sort a copy of ``values`` by bubble sort.

    Returns the sorted list and the number of passes made. The adaptive
    variant stops after the first pass that makes no swap.
    """
    result = list(values)
    passes = 0
    for done in range(len(result) - 1):
        swapped = False
        for j in range(len(result) - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        passes += 1
        if adaptive and not swapped:
            break
    return result, passes


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, moving the smallest remaining value forward each step."""
    result = list(values)
    for position in range(len(result)):
        smallest = min(range(position, len(result)), key=result.__getitem__)
        result[position], result[smallest] = result[smallest], result[position]
    return result


def _sift_down(heap: list[int], root: int, size: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy built through a max-heap."""
    heap = list(values)
    size = len(heap)
    for start in range(size // 2 - 1, -1, -1):
        _sift_down(heap, start, size)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap