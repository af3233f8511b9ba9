"""Minimum spanning tree weights by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from algokit.dsu import UnionFind

Edge = tuple[int, int, float]


def _checked(num_vertices: int, edges: Iterable[Edge]) -> list[Edge]:
    listing = list(edges)
    for first, second, _ in listing:
        for vertex in (first, second):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"vertex {vertex} is outside 0..{num_vertices - 1}")
    return listing


def kruskal_mst(num_vertices: int, edges: Iterable[Edge]) -> float:
    """Total weight of a minimum spanning forest from ``(u, v, weight)`` edges."""
    listing = _checked(num_vertices, edges)
    sets = UnionFind(num_vertices)
    total = 0
    for first, second, weight in sorted(listing, key=lambda e: (e[2], e[0], e[1])):
        if not sets.same_set(first, second):
            sets.union(first, second)
            total += weight
    return total


def prim_mst(num_vertices: int, edges: Iterable[Edge]) -> float:
    """Total weight of a minimum spanning tree of the component holding vertex 0."""
    listing = _checked(num_vertices, edges)
    if num_vertices == 0:
        return 0
    neighbours: list[list[tuple[int, float]]] = [[] for _ in range(num_vertices)]
    for first, second, weight in listing:
        neighbours[first].append((second, weight))
        neighbours[second].append((first, weight))
    visited = [False] * num_vertices
    pending: list[tuple[float, int]] = [(0, 0)]
    total = 0
    while pending:
        weight, vertex = heapq.heappop(pending)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += weight
        for other, cost in neighbours[vertex]:
            if not visited[other]:
                heapq.heappush(pending, (cost, other))
    return total