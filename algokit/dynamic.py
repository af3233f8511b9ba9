"""Dynamic-programming classics: knapsack, subset sums, LCS, rain water and TSP."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import permutations


def knapsack_01(
    profits: Sequence[int], weights: Sequence[int], capacity: int
) -> int:
    """Largest total profit of whole items whose weights fit in ``capacity``.

    Returns 0 when the capacity is not positive, there are no items, or the
    two sequences differ in length.
    """
    if capacity <= 0 or not profits or len(weights) != len(profits):
        return 0
    if any(weight < 0 for weight in weights):
        raise ValueError("item weights must not be negative")
    row = [profits[0] if weights[0] <= c else 0 for c in range(capacity + 1)]
    for profit, weight in zip(profits[1:], weights[1:]):
        next_row = [0]
        for c in range(1, capacity + 1):
            include = profit + row[c - weight] if weight <= c else 0
            next_row.append(max(include, row[c]))
        row = next_row
    return row[capacity]


def _check_non_negative(items: list[int]) -> None:
    for value in items:
        if value < 0:
            raise ValueError(f"values must not be negative, got {value}")


def subset_sum(values: Iterable[int], target: int) -> bool:
    """Whether some subset of ``values`` (each used at most once) adds up to ``target``."""
    items = list(values)
    _check_non_negative(items)
    if target < 0:
        raise ValueError("the target must not be negative")
    reachable = [True] + [False] * target
    for value in items:
        for total in range(target, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable[target]


def can_partition(values: Iterable[int]) -> bool:
    """Whether ``values`` splits into two groups with equal sums."""
    items = list(values)
    total = sum(items)
    if total % 2 != 0:
        return False
    return subset_sum(items, total // 2)


def _lcs_table(first: Sequence, second: Sequence) -> list[list[int]]:
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest string that is a subsequence of both ``first`` and ``second``."""
    table = _lcs_table(first, second)
    chars: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def min_insertions_palindrome(text: str) -> int:
    """Fewest characters to insert anywhere in ``text`` to make it a palindrome."""
    return len(text) - _lcs_table(text, text[::-1])[-1][-1]


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    result = 0
    left_max = right_max = 0
    lo, hi = 0, len(heights) - 1
    while lo <= hi:
        if heights[lo] < heights[hi]:
            if heights[lo] > left_max:
                left_max = heights[lo]
            else:
                result += left_max - heights[lo]
            lo += 1
        else:
            if heights[hi] > right_max:
                right_max = heights[hi]
            else:
                result += right_max - heights[hi]
            hi -= 1
    return result


def tsp_min_cost(graph: Sequence[Sequence[int]], source: int = 0) -> int:
    """Cheapest round trip from ``source`` through every vertex, trying every order."""
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("the cost matrix must be square")
    if not 0 <= source < size:
        raise ValueError(f"source {source} is outside 0..{size - 1}")
    others = [vertex for vertex in range(size) if vertex != source]

    def tour_cost(order: tuple[int, ...]) -> int:
        stops = (source, *order, source)
        return sum(graph[a][b] for a, b in zip(stops, stops[1:]))

    return min(tour_cost(order) for order in permutations(others))