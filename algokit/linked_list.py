"""Singly linked list with positional insertion and deletion, reversal and checks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A list node holding a value and a link to the next node."""

    data: int
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list of integers addressed by 1-based positions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: int) -> None:
        """Add ``value`` before the first node."""
        self._head = Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def append(self, value: int) -> None:
        """Add ``value`` after the last node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"position {position} is outside 1..{self._size + 1}"
            )
        if position == 1:
            self.push_front(value)
            return
        if position == self._size + 1:
            self.append(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def delete(self, position: int) -> int:
        """Remove the node at 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        if position == 1:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        if self._head is None:
            self._tail = None
        self._size -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[Node] = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def middle(self) -> int:
        """Value of the middle node; the second of the two middles for even lengths."""
        if self._head is None:
            raise ValueError("an empty list has no middle")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        assert slow is not None
        return slow.data

    def is_palindrome(self) -> bool:
        """Whether the values read the same from both ends."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        second_half: list[int] = []
        while slow is not None:
            second_half.append(slow.data)
            slow = slow.next
        return all(
            front == back for front, back in zip(self, reversed(second_half))
        )


def segregate_even_odd(values: Iterable[int]) -> list[int]:
    """Build a list from ``values``: the first stays put, later evens go to the
    front and later odds go to the back."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return []
    result = LinkedList([first])
    for value in items:
        if value % 2 == 0:
            result.push_front(value)
        else:
            result.append(value)
    return list(result)