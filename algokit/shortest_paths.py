"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Sequence
from itertools import count


class NegativeCycleError(ValueError):
    """Raised when a graph holds a negative-weight cycle reachable from the source."""


def bellman_ford(
    num_vertices: int, edges: Iterable[tuple[int, int, float]], source: int = 0
) -> list[float]:
    """Distances from ``source`` to every vertex over directed ``(u, v, w)`` edges.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError when a
    negative cycle is reachable.
    """
    listing = list(edges)
    if not 0 <= source < num_vertices:
        raise ValueError(f"source {source} is outside 0..{num_vertices - 1}")
    for u, v, _ in listing:
        for vertex in (u, v):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"vertex {vertex} is outside 0..{num_vertices - 1}")
    distance = [math.inf] * num_vertices
    distance[source] = 0
    updated = False
    for _ in range(num_vertices - 1):
        updated = False
        for u, v, weight in listing:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                updated = True
        if not updated:
            break
    if updated:
        for u, v, weight in listing:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                raise NegativeCycleError("graph has a negative-weight cycle")
    return distance


def dijkstra(
    edges: Iterable[tuple[Hashable, Hashable, float]],
    source: Hashable,
    bidirectional: bool = True,
) -> dict[Hashable, float]:
    """Distances from ``source`` to every vertex named by an edge.

    Edges are ``(u, v, weight)`` with non-negative weights; unreachable
    vertices get ``math.inf``.
    """
    adjacency: dict[Hashable, list[tuple[Hashable, float]]] = {}
    for u, v, weight in edges:
        adjacency.setdefault(u, []).append((v, weight))
        if bidirectional:
            adjacency.setdefault(v, []).append((u, weight))
        else:
            adjacency.setdefault(v, [])
    distance: dict[Hashable, float] = {vertex: math.inf for vertex in adjacency}
    distance[source] = 0
    tie = count()
    pending: list[tuple[float, int, Hashable]] = [(0, next(tie), source)]
    while pending:
        dist, _, node = heapq.heappop(pending)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency.get(node, ()):
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(pending, (candidate, next(tie), neighbour))
    return distance


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    Missing edges are written as ``math.inf``. The input is not modified.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the weight matrix must be square")
    dist = [list(row) for row in matrix]
    for k in range(size):
        through = dist[k]
        for i in range(size):
            row = dist[i]
            via = row[k]
            for j in range(size):
                if row[j] > via + through[j]:
                    row[j] = via + through[j]
    return dist