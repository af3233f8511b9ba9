"""Self-balancing AVL search tree with insertion, deletion and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    key: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    _update(node)
    balance = _balance(node)
    if balance > 1 and node.left is not None:
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and node.right is not None:
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left or node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A set of integer keys kept in a height-balanced binary search tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is ignored."""
        self._root = _insert(self._root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if present."""
        self._root = _delete(self._root, key)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if node.key > key else node.right  # type: ignore[operator]
        return False

    def preorder(self) -> list[int]:
        """Keys in node, left, right order."""
        result: list[int] = []
        pending = [self._root] if self._root else []
        while pending:
            node = pending.pop()
            result.append(node.key)
            if node.right:
                pending.append(node.right)
            if node.left:
                pending.append(node.left)
        return result