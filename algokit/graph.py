"""Adjacency-list graphs, traversals, articulation points, colouring and bipartiteness."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from itertools import count
from typing import Optional, Union


class Graph:
    """Graph stored as an adjacency list of ``(neighbour, weight)`` pairs.

    Vertices may be any hashable values and appear when an edge mentions them.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, Optional[float]]]] = {}

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        weight: Optional[float] = None,
        bidirectional: bool = True,
    ) -> None:
        """Add an edge from ``source`` to ``target``, and back if ``bidirectional``."""
        self._adjacency.setdefault(source, []).append((target, weight))
        if bidirectional:
            self._adjacency.setdefault(target, []).append((source, weight))
        else:
            self._adjacency.setdefault(target, [])

    def neighbors(self, vertex: Hashable) -> list[tuple[Hashable, Optional[float]]]:
        """``(neighbour, weight)`` pairs of ``vertex`` in insertion order."""
        return list(self._adjacency.get(vertex, ()))

    def _targets(self, vertex: Hashable) -> Iterator[Hashable]:
        return (target for target, _ in self._adjacency.get(vertex, ()))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Vertices in breadth-first order from ``source``."""
        visited = {source}
        order: list[Hashable] = []
        pending: deque[Hashable] = deque([source])
        while pending:
            node = pending.popleft()
            order.append(node)
            for neighbour in self._targets(node):
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Vertices in depth-first (pre-)order from ``source``."""
        visited = {source}
        order = [source]
        stack = [self._targets(source)]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(self._targets(neighbour))
                    break
            else:
                stack.pop()
        return order


AdjacencyInput = Union[Mapping[int, Iterable[int]], Sequence[Iterable[int]]]


def _neighbour_lists(num_vertices: int, adjacency: AdjacencyInput) -> list[list[int]]:
    if isinstance(adjacency, Mapping):
        lists = [list(adjacency.get(vertex, ())) for vertex in range(num_vertices)]
    else:
        lists = [
            list(adjacency[vertex]) if vertex < len(adjacency) else []
            for vertex in range(num_vertices)
        ]
    for vertex, neighbours in enumerate(lists):
        for neighbour in neighbours:
            if not 0 <= neighbour < num_vertices:
                raise ValueError(
                    f"vertex {vertex} has neighbour {neighbour} outside 0..{num_vertices - 1}"
                )
    return lists


def _from_edges(num_vertices: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    lists: list[list[int]] = [[] for _ in range(num_vertices)]
    for first, second in edges:
        for vertex in (first, second):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"vertex {vertex} is outside 0..{num_vertices - 1}")
        lists[first].append(second)
        lists[second].append(first)
    return lists


def articulation_points(num_vertices: int, adjacency: AdjacencyInput) -> list[int]:
    """Vertices whose removal disconnects their component (Tarjan), ascending."""
    neighbours = _neighbour_lists(num_vertices, adjacency)
    discovery = [-1] * num_vertices
    low = [-1] * num_vertices
    parent = [-1] * num_vertices
    is_point = [False] * num_vertices
    timer = count()

    def visit(u: int) -> None:
        discovery[u] = low[u] = next(timer)
        children = 0
        for v in neighbours[u]:
            if discovery[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    is_point[u] = True
                if parent[u] != -1 and low[v] >= discovery[u]:
                    is_point[u] = True
            elif v != parent[u]:
                low[u] = min(low[u], discovery[v])

    for vertex in range(num_vertices):
        if discovery[vertex] == -1:
            visit(vertex)
    return [vertex for vertex, flagged in enumerate(is_point) if flagged]


def greedy_coloring(
    num_vertices: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices in index order with the smallest free colour.

    Returns the number of colours used and the colour of every vertex.
    """
    neighbours = _from_edges(num_vertices, edges)
    colors = [-1] * num_vertices
    if num_vertices:
        colors[0] = 0
    for vertex in range(1, num_vertices):
        taken = {colors[other] for other in neighbours[vertex] if colors[other] != -1}
        colors[vertex] = next(color for color in count() if color not in taken)
    return max(colors, default=-1) + 1, colors


def is_bipartite(num_vertices: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the graph can be two-coloured with no edge inside one colour."""
    neighbours = _from_edges(num_vertices, edges)
    colors = [-1] * num_vertices
    for start in range(num_vertices):
        if colors[start] != -1:
            continue
        colors[start] = 1
        pending: deque[int] = deque([start])
        while pending:
            node = pending.popleft()
            for other in neighbours[node]:
                if colors[other] == -1:
                    colors[other] = 1 - colors[node]
                    pending.append(other)
                elif colors[other] == colors[node]:
                    return False
    return True