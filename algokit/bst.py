"""Unbalanced binary search trees with parent links, traversals and height."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class BSTNode:
    """A search-tree node that also records its parent."""

    value: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None
    parent: Optional[BSTNode] = None


def insert(
    root: Optional[BSTNode], value: int, allow_duplicates: bool = False
) -> BSTNode:
    """Insert ``value`` and return the (possibly new) root.

    Duplicates are ignored unless ``allow_duplicates`` is set, in which case
    they go to the right subtree.
    """
    if root is None:
        return BSTNode(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = BSTNode(value, parent=node)
                return root
            node = node.left
        elif value > node.value or allow_duplicates:
            if node.right is None:
                node.right = BSTNode(value, parent=node)
                return root
            node = node.right
        else:
            return root


def inorder(root: Optional[BSTNode]) -> list[int]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def preorder(root: Optional[BSTNode]) -> list[int]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def postorder(root: Optional[BSTNode]) -> list[int]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def height(root: Optional[BSTNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))