"""Problems over contiguous stretches of a sequence."""

from __future__ import annotations

from collections.abc import Sequence


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    low, high = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while low <= high:
        if heights[low] < heights[high]:
            if heights[low] < left_max:
                water += left_max - heights[low]
            else:
                left_max = heights[low]
            low += 1
        else:
            if heights[high] >= right_max:
                right_max = heights[high]
            else:
                water += right_max - heights[high]
            high -= 1
    return water


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a contiguous stretch, with the empty stretch counting as 0."""
    current = best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def min_jumps(steps: Sequence[int]) -> int | None:
    """Fewest jumps to reach the last index, or ``None`` if it cannot be reached.

    ``steps[i]`` is the longest jump allowed from index ``i``.
    """
    if len(steps) <= 1:
        return 0
    if steps[0] == 0:
        return None
    max_reach = remaining = steps[0]
    jumps = 1
    for index, step in enumerate(steps[1:-1], start=1):
        max_reach = max(max_reach, index + step)
        remaining -= 1
        if remaining == 0:
            jumps += 1
            if index >= max_reach:
                return None
            remaining = max_reach - index
    return jumps