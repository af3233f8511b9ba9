"""Array algorithms: maximum subarray sums, prefix sums and 0/1/2 sorting."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


class PrefixSums:
    """Answers inclusive range-sum queries over 1-based positions in constant time."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = list(accumulate(values, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the elements at 1-based positions ``left`` to ``right`` inclusive."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(
                f"range [{left}, {right}] is outside positions 1..{len(self)}"
            )
        return self._prefix[right] - self._prefix[left - 1]


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("the sequence must not be empty")
    return items


def max_subarray_sum_brute(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run, by summing every run (O(n^3))."""
    items = _non_empty(values)
    size = len(items)
    return max(
        sum(items[start : end + 1])
        for start in range(size)
        for end in range(start, size)
    )


def max_subarray_sum_prefix(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run, using cumulative sums (O(n^2))."""
    items = _non_empty(values)
    prefix = list(accumulate(items, initial=0))
    return max(
        prefix[end] - prefix[start]
        for end in range(1, len(prefix))
        for start in range(end)
    )


def max_subarray_sum_kadane(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run in one pass.

    The running sum is reset to zero whenever it drops below zero, so a
    sequence made only of negative numbers yields 0.
    """
    items = _non_empty(values)
    current = 0
    best = 0
    for value in items:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag).

    Anything that is neither 0 nor 1 is treated like a 2.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items