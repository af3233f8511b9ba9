"""Inversion counting, Lomuto quick sort and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) - 1) // 2 + 1
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    cross = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            cross += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + cross


def inversion_count(values: Iterable[int]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``, by merge sort."""
    _, count = _sort_and_count(list(values))
    return count


def _lomuto_partition(items: list[int], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def quick_sort_lomuto(values: Iterable[int]) -> list[int]:
    """Quick sort with the last element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = _lomuto_partition(items, start, end)
            pending.append((start, split - 1))
            pending.append((split + 1, end))
    return items


def hanoi_moves(
    disks: int, source: str = "A", helper: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that carry all disks to ``target``."""
    if disks < 0:
        raise ValueError("the number of disks must not be negative")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, target, helper)
    yield (disks, source, target)
    yield from hanoi_moves(disks - 1, helper, source, target)