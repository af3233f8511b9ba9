"""Binary trees: construction, level-order and Morris traversals, diameter, largest BST."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass(eq=False)
class BinaryNode:
    """A binary tree node."""

    data: int
    left: Optional[BinaryNode] = None
    right: Optional[BinaryNode] = None


def _is_null(value: Optional[int]) -> bool:
    return value is None or value == NULL_MARKER


def build_from_level_order(values: Iterable[Optional[int]]) -> Optional[BinaryNode]:
    """Build a tree from values given level by level.

    Each node is followed, in queue order, by its left and right child values;
    -1 (or None) marks a missing child. Running out of values leaves the
    remaining children empty.
    """
    items = iter(values)
    first = next(items, None)
    if _is_null(first):
        return None
    root = BinaryNode(first)
    pending: deque[BinaryNode] = deque([root])

    def take() -> Optional[BinaryNode]:
        value = next(items, None)
        if _is_null(value):
            return None
        child = BinaryNode(value)
        pending.append(child)
        return child

    while pending:
        node = pending.popleft()
        node.left = take()
        node.right = take()
    return root


def build_from_preorder(values: Iterable[Optional[int]]) -> Optional[BinaryNode]:
    """Build a tree from a pre-order listing where -1 (or None) marks an empty subtree."""
    items: Iterator[Optional[int]] = iter(values)

    def build() -> Optional[BinaryNode]:
        value = next(items, None)
        if _is_null(value):
            return None
        node = BinaryNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: Optional[BinaryNode]) -> list[int]:
    """Node values level by level, left to right."""
    result: list[int] = []
    pending: deque[BinaryNode] = deque([root] if root else [])
    while pending:
        node = pending.popleft()
        result.append(node.data)
        if node.left:
            pending.append(node.left)
        if node.right:
            pending.append(node.right)
    return result


def morris_inorder(root: Optional[BinaryNode]) -> list[int]:
    """In-order values using threaded links instead of a stack.

    The temporary links are removed again, so the tree is left unchanged.
    """
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.data)
            current = current.right
    return result


def _height_and_diameter(node: Optional[BinaryNode]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    height = max(left_height, right_height) + 1
    best = max(left_diameter, right_diameter, left_height + right_height)
    return height, best


def diameter(root: Optional[BinaryNode]) -> int:
    """Number of edges on the longest path between two nodes."""
    return _height_and_diameter(root)[1]


@dataclass
class _Summary:
    is_bst: bool
    maximum: float
    minimum: float
    root: Optional[BinaryNode]
    size: int


def _summarise(node: Optional[BinaryNode]) -> _Summary:
    if node is None:
        return _Summary(True, -math.inf, math.inf, None, 0)
    left = _summarise(node.left)
    right = _summarise(node.right)
    maximum = max(node.data, left.maximum, right.maximum)
    minimum = min(node.data, left.minimum, right.minimum)
    if left.is_bst and right.is_bst and left.maximum < node.data < right.minimum:
        return _Summary(True, maximum, minimum, node, left.size + right.size + 1)
    best = left if left.size > right.size else right
    return _Summary(False, maximum, minimum, best.root, best.size)


def largest_bst(root: Optional[BinaryNode]) -> tuple[Optional[BinaryNode], int]:
    """Root and node count of the largest subtree that is a binary search tree."""
    summary = _summarise(root)
    return summary.root, summary.size