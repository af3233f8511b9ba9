"""Greedy algorithms: activity selection, fractional knapsack, job sequencing, merge cost."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Most non-overlapping ``(start, end)`` activities one person can do.

    An activity may start exactly when the previous one ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


def fractional_knapsack(
    items: Iterable[tuple[float, float]], capacity: float
) -> float:
    """Largest profit from ``(profit, weight)`` items when items may be split."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    goods = list(items)
    for _, weight in goods:
        if weight <= 0:
            raise ValueError(f"item weights must be positive, got {weight}")
    ranked = sorted(goods, key=lambda item: item[0] / item[1], reverse=True)
    remaining = float(capacity)
    total = 0.0
    for profit, weight in ranked:
        if weight <= remaining:
            total += profit
            remaining -= weight
        elif remaining != 0:
            fraction = remaining / weight
            total += fraction * profit
            remaining -= fraction * weight
    return total


def job_sequencing(jobs: Iterable[tuple[int, int]]) -> tuple[list[int], int]:
    """Schedule ``(profit, deadline)`` jobs, one per unit time slot.

    Returns the 1-based job numbers in slot order and the total profit.
    """
    listing = list(jobs)
    count = len(listing)
    by_profit = sorted(range(count), key=lambda index: -listing[index][0])
    slots: list[int | None] = [None] * count
    total = 0
    for index in by_profit:
        profit, deadline = listing[index]
        for slot in range(min(count, deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = index
                total += profit
                break
    order = [index + 1 for index in slots if index is not None]
    return order, total


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging files two at a time into one."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total