"""N-ary trees built from a pre-order sequence with -1 as an end-of-children marker."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

END_OF_CHILDREN = -1


@dataclass
class TreeNode:
    """A tree node holding a value and any number of children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)


def build_tree(sequence: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from values in pre-order, where -1 closes the current node."""
    root: Optional[TreeNode] = None
    stack: list[TreeNode] = []
    for value in sequence:
        if value == END_OF_CHILDREN:
            if not stack:
                raise ValueError("end-of-children marker with no open node")
            stack.pop()
            continue
        node = TreeNode(value)
        if stack:
            stack[-1].children.append(node)
        else:
            root = node
        stack.append(node)
    return root


def describe(root: TreeNode) -> list[str]:
    """One line per node in pre-order, such as ``10->20, 30, .``."""
    lines: list[str] = []
    pending = [root]
    while pending:
        node = pending.pop()
        children = "".join(f"{child.data}, " for child in node.children)
        lines.append(f"{node.data}->{children}.")
        pending.extend(reversed(node.children))
    return lines


def diameter(root: TreeNode) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode) -> int:
        nonlocal best
        tallest = second = -1
        for child in node.children:
            child_height = height(child)
            if child_height >= tallest:
                second, tallest = tallest, child_height
            elif child_height >= second:
                second = child_height
        best = max(best, tallest + second + 2)
        return tallest + 1

    height(root)
    return best


def node_path(root: TreeNode, key: int) -> list[int]:
    """Values from the node holding ``key`` up to the root, or [] if absent."""
    if root.data == key:
        return [root.data]
    for child in root.children:
        path = node_path(child, key)
        if path:
            path.append(root.data)
            return path
    return []


def node_distance(root: TreeNode, first: int, second: int) -> int:
    """Number of edges between the nodes holding ``first`` and ``second``."""
    first_path = node_path(root, first)
    second_path = node_path(root, second)
    if not first_path or not second_path:
        missing = first if not first_path else second
        raise ValueError(f"value {missing} is not in the tree")
    i = len(first_path) - 1
    j = len(second_path) - 1
    while i >= 0 and j >= 0 and first_path[i] == second_path[j]:
        i -= 1
        j -= 1
    return (i + 1) + (j + 1)