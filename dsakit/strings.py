"""String problems: palindromes and repeated subsequences."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def longest_repeating_subsequence(text: str) -> int:
    """Length of the longest subsequence occurring twice at distinct positions."""
    size = len(text)
    previous = [0] * (size + 1)
    for i, left in enumerate(text, start=1):
        current = [0] * (size + 1)
        for j, right in enumerate(text, start=1):
            if left == right and i != j:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[size]