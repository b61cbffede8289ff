"""Greedy algorithms: job sequencing, fractional knapsack, meeting selection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline and the profit it earns if done by then."""

    job_id: int
    deadline: int
    profit: int


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    value: int
    weight: int


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Schedule jobs for the most profit; return ``(jobs done, total profit)``.

    Jobs are taken by falling profit, each in the latest free slot before
    its deadline.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    if not ordered:
        return 0, 0
    slots = [0] * max(0, max(job.deadline for job in ordered))
    for job in ordered:
        for slot in range(min(job.deadline, len(slots)) - 1, -1, -1):
            if slots[slot] == 0:
                slots[slot] = job.profit
                break
    return sum(1 for profit in slots if profit != 0), sum(slots)


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Greatest value that fits in ``capacity`` when items may be split."""
    pool = list(items)
    if any(item.weight <= 0 for item in pool):
        raise ValueError("item weights must be positive")
    ranked = sorted(
        ((item.value / item.weight, item.weight) for item in pool),
        key=lambda entry: entry[0],
        reverse=True,
    )
    total = 0.0
    used = 0
    for ratio, weight in ranked:
        if used + weight <= capacity:
            total += ratio * weight
            used += weight
        else:
            total += (capacity - used) * ratio
            break
    return total


def max_meetings(
    start_times: Sequence[int], finish_times: Sequence[int]
) -> list[int]:
    """Positions (1-based) of the largest set of meetings that do not overlap.

    Meetings are chosen by earliest finish; one may start when the last ends.
    """
    if len(start_times) != len(finish_times):
        raise ValueError("start and finish times must have the same length")
    meetings = sorted(
        zip(start_times, finish_times, range(1, len(start_times) + 1)),
        key=lambda meeting: meeting[1],
    )
    chosen: list[int] = []
    limit: int | None = None
    for start, finish, position in meetings:
        if limit is None or start >= limit:
            chosen.append(position)
            limit = finish
    return chosen