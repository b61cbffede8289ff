"""Classic problems on one-dimensional sequences."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import combinations

_CLOCK = re.compile(r"(\d{2})(:\d{2}:\d{2})(AM|PM)")


def reverse_word(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def reverse_in_place(chars: MutableSequence) -> None:
    """Reverse a mutable sequence of characters in place."""
    chars.reverse()


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    return sum(1 for left, right in combinations(values, 2) if left > right)


def count_pairs_with_sum(values: Sequence[int], target: int) -> int:
    """Count index pairs ``i < j`` whose elements add up to ``target``."""
    return sum(1 for left, right in combinations(values, 2) if left + right == target)


def _half_toward_zero(number: int) -> int:
    return -((-number) // 2) if number < 0 else number // 2


def pair_count_by_frequency(values: Iterable[int], target: int) -> int:
    """Count pairs summing to ``target`` using element frequencies.

    Each distinct value no larger than half the target (halved toward zero)
    is matched with its complement; equal halves contribute ``c*(c-1)/2``.
    """
    counts = Counter(values)
    half = _half_toward_zero(target)
    total = 0
    for value, count in counts.items():
        if value > half:
            continue
        complement = target - value
        if complement not in counts:
            continue
        if complement == value:
            total += count * (count - 1) // 2
        else:
            total += count * counts[complement]
    return total


def common_elements(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> list[int]:
    """Return the values present in all three sorted sequences, in order."""
    found: list[int] = []
    i = j = k = 0
    while i < len(first) and j < len(second) and k < len(third):
        if first[i] == second[j] == third[k]:
            found.append(first[i])
            i += 1
            j += 1
            k += 1
        elif first[i] < second[j]:
            i += 1
        elif second[j] < third[k]:
            j += 1
        else:
            k += 1
    return found


def has_triplet_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether three distinct elements add up to ``target``."""
    ordered = sorted(values)
    last = len(ordered) - 1
    for i, base in enumerate(ordered[:-2]):
        low, high = i + 1, last
        while low < high:
            total = base + ordered[low] + ordered[high]
            if total == target:
                return True
            if total > target:
                high -= 1
            else:
                low += 1
    return False


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive non-negative integers present.

    Negative values are ignored.
    """
    present = {value for value in values if value >= 0}
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def factorial_digits(n: int) -> list[int]:
    """Return the decimal digits of ``n!``, most significant first.

    Values of ``n`` below one give the empty product, ``[1]``.
    """
    return [int(digit) for digit in str(math.factorial(max(n, 0)))]


def find_duplicate(values: Iterable[int]) -> int:
    """Return the smallest value that occurs more than once.

    Raises ``ValueError`` when every value is distinct.
    """
    ordered = sorted(values)
    for current, following in zip(ordered, ordered[1:]):
        if current == following:
            return current
    raise ValueError("no duplicate value present")


def majority_element(values: Sequence[int]) -> int | None:
    """Return the element occurring more than ``len(values) // 2`` times, if any."""
    counts = Counter(values)
    threshold = len(values) // 2
    for value in values:
        if counts[value] > threshold:
            return value
    return None


def negatives_first(values: Iterable[int]) -> list[int]:
    """Return a copy with every negative value moved to the front.

    Negatives keep their relative order; the others are shuffled by swaps.
    """
    result = list(values)
    boundary = 0
    for index, value in enumerate(result):
        if value < 0:
            if index != boundary:
                result[index], result[boundary] = result[boundary], value
            boundary += 1
    return result


def repeated_elements(values: Sequence[int]) -> list[int]:
    """Report repeats in a sequence whose values lie in ``0 .. len - 1``.

    Works by sign marking, so a value is reported at each repeat after the
    first, and zero entries cannot carry a mark.
    """
    size = len(values)
    if any(not 0 <= value < size for value in values):
        raise ValueError("values must lie between 0 and len(values) - 1")
    marks = list(values)
    repeats: list[int] = []
    for value in marks:
        slot = abs(value)
        if marks[slot] >= 0:
            marks[slot] = -marks[slot]
        else:
            repeats.append(slot)
    return repeats


def sort_by_parity_ii(values: Iterable[int]) -> list[int]:
    """Arrange values so even indices hold even numbers and odd indices odd ones.

    Raises ``ValueError`` when the input has too few odd numbers for that.
    """
    result = list(values)
    size = len(result)
    even_slot, odd_slot = 0, 1
    while even_slot < size:
        while even_slot < size and result[even_slot] % 2 == 0:
            even_slot += 2
        while odd_slot < size and result[odd_slot] % 2 == 1:
            odd_slot += 2
        if even_slot < size:
            if odd_slot >= size:
                raise ValueError("values cannot be split evenly by parity")
            result[even_slot], result[odd_slot] = result[odd_slot], result[even_slot]
        even_slot += 2
        odd_slot += 2
    return result


def to_24_hour(clock: str) -> str:
    """Convert ``hh:mm:ssAM`` / ``hh:mm:ssPM`` to 24-hour ``hh:mm:ss``."""
    match = _CLOCK.fullmatch(clock)
    if match is None:
        raise ValueError(f"not a 12-hour time: {clock!r}")
    hours_text, rest, period = match.groups()
    hours = int(hours_text)
    if period == "AM":
        return ("00" if hours == 12 else hours_text) + rest
    return ("12" if hours == 12 else str(hours + 12)) + rest