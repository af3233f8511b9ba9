"""Binary and linear search over sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Optional


def binary_search(values: Sequence[int], key: int) -> bool:
    """Whether ``key`` occurs in the sorted sequence ``values``."""
    index = bisect_left(values, key)
    return index < len(values) and values[index] == key


def lower_bound(values: Sequence[int], key: int) -> int:
    """Index of the first element not less than ``key``."""
    return bisect_left(values, key)


def upper_bound(values: Sequence[int], key: int) -> int:
    """Index of the first element greater than ``key``."""
    return bisect_right(values, key)


def count_occurrences(values: Sequence[int], key: int) -> int:
    """Number of times ``key`` occurs in the sorted sequence ``values``."""
    return upper_bound(values, key) - lower_bound(values, key)


def linear_search(values: Sequence[int], key: int) -> Optional[int]:
    """Index of the first element equal to ``key``, or None if it is absent."""
    return next((index for index, value in enumerate(values) if value == key), None)