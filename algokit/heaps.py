"""Binary max-heap helpers and a k-largest selection."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator


def heapify(values: list[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items of a max-heap."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


class MaxHeap:
    """Array-backed max-heap with insertion and root deletion."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = list(values)
        for index in range(len(self._items) // 2 - 1, -1, -1):
            heapify(self._items, len(self._items), index)

    def push(self, key: int) -> None:
        """Insert ``key`` and restore the heap order."""
        items = self._items
        items.append(key)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if items[parent] >= items[child]:
                break
            items[parent], items[child] = items[child], items[parent]
            child = parent

    def pop_root(self) -> int:
        """Remove and return the largest key."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return root

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the array representation of the heap."""
        return iter(list(self._items))


def k_largest(values: Iterable[int], k: int) -> list[int]:
    """The ``k`` largest values, largest first."""
    if k <= 0:
        return []
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            heapq.heappop(heap)
    return sorted(heap, reverse=True)