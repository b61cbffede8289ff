"""Backtracking enumerations: combination sums and string permutations."""

from __future__ import annotations

from collections.abc import Iterable


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Every multiset of candidates, each reusable, that adds up to ``target``.

    Combinations come out with the earliest candidates taken as often as
    possible first. Candidates must be positive.
    """
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    path: list[int] = []

    def walk(index: int, remaining: int) -> None:
        if index == len(pool):
            if remaining == 0:
                found.append(list(path))
            return
        value = pool[index]
        if value <= remaining:
            path.append(value)
            walk(index, remaining - value)
            path.pop()
        walk(index + 1, remaining)

    walk(0, target)
    return found


def permutations(text: str) -> list[str]:
    """All arrangements of the characters of ``text``, repeats included."""
    if not text:
        return [""]
    return [
        char + rest
        for index, char in enumerate(text)
        for rest in permutations(text[:index] + text[index + 1 :])
    ]