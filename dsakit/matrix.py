"""Matrix problems: medians, common values, rectangles and spiral order."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_rectangular(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def median(matrix: Matrix) -> int:
    """Median of a matrix whose rows are each sorted, with an odd element count."""
    rows, cols = _check_rectangular(matrix)
    if rows == 0 or cols == 0:
        raise ValueError("median of an empty matrix")
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    desired = (rows * cols + 1) // 2
    while low < high:
        mid = low + (high - low) // 2
        placed = sum(bisect_right(row, mid) for row in matrix)
        if placed < desired:
            low = mid + 1
        else:
            high = mid
    return low


def common_in_all_rows(matrix: Matrix) -> list[int]:
    """Values present in every row, in the order they occur in the last row.

    Counting starts from the second row, so a single row yields nothing.
    """
    if not matrix:
        return []
    seen = dict.fromkeys(matrix[0], 1)
    last = len(matrix) - 1
    found: list[int] = []
    for index, row in enumerate(matrix[1:], start=1):
        for value in row:
            if seen.get(value, 0) == index:
                seen[value] = index + 1
                if index == last:
                    found.append(value)
    return found


def max_pair_difference(matrix: Matrix) -> int:
    """Largest ``matrix[c][d] - matrix[a][b]`` with ``c > a`` and ``d > b``."""
    rows, cols = _check_rectangular(matrix)
    if rows < 2 or cols < 2:
        raise ValueError("matrix needs at least two rows and two columns")
    # best[i][j]: largest value in the block from (i, j) to the bottom-right corner
    best = [list(row) for row in matrix]
    for j in range(cols - 2, -1, -1):
        best[-1][j] = max(best[-1][j], best[-1][j + 1])
    for i in range(rows - 2, -1, -1):
        best[i][-1] = max(best[i][-1], best[i + 1][-1])
    answer: int | None = None
    for i in range(rows - 2, -1, -1):
        for j in range(cols - 2, -1, -1):
            candidate = best[i + 1][j + 1] - matrix[i][j]
            if answer is None or candidate > answer:
                answer = candidate
            best[i][j] = max(matrix[i][j], best[i][j + 1], best[i + 1][j])
    return answer


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of unit-width bars."""
    stack: list[int] = []
    largest = 0
    for index, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] > height:
            bar = heights[stack.pop()]
            width = index - stack[-1] - 1 if stack else index
            largest = max(largest, bar * width)
        stack.append(index)
    return largest


def max_rectangle_area(matrix: Matrix) -> int:
    """Area of the largest all-ones rectangle in a 0/1 matrix."""
    _check_rectangular(matrix)
    if not matrix:
        return 0
    heights = list(matrix[0])
    largest = largest_histogram_area(heights)
    for row in matrix[1:]:
        heights = [
            height + 1 if cell == 1 else cell for height, cell in zip(heights, row)
        ]
        largest = max(largest, largest_histogram_area(heights))
    return largest


def spiral_order(matrix: Matrix) -> list[int]:
    """Elements read clockwise from the top-left corner, spiralling inward."""
    rows, cols = _check_rectangular(matrix)
    order: list[int] = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        order.extend(matrix[top][col] for col in range(left, right + 1))
        order.extend(matrix[row][right] for row in range(top + 1, bottom + 1))
        if top < bottom:
            order.extend(matrix[bottom][col] for col in range(right - 1, left - 1, -1))
        if left < right:
            order.extend(matrix[row][left] for row in range(bottom - 1, top, -1))
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1
    return order