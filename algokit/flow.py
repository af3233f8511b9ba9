"""Maximum flow by augmenting along breadth-first shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class FlowResult:
    """The maximum flow and the augmenting paths used, each from source to sink."""

    max_flow: int
    augmenting_paths: list[list[int]] = field(default_factory=list)


def _find_path(residual: list[list[int]], source: int, sink: int) -> tuple[int, list[int]]:
    size = len(residual)
    parent = [-1] * size
    parent[source] = -2
    pending: deque[tuple[int, float]] = deque([(source, float("inf"))])
    while pending:
        node, bottleneck = pending.popleft()
        for target in range(size):
            if target != node and parent[target] == -1 and residual[node][target] > 0:
                parent[target] = node
                narrowest = min(bottleneck, residual[node][target])
                if target == sink:
                    path = [sink]
                    while path[-1] != source:
                        path.append(parent[path[-1]])
                    path.reverse()
                    return int(narrowest), path
                pending.append((target, narrowest))
    return 0, []


def ford_fulkerson(
    capacity: Sequence[Sequence[int]], source: int, sink: int
) -> FlowResult:
    """Maximum flow from ``source`` to ``sink`` in a capacity matrix."""
    size = len(capacity)
    if any(len(row) != size for row in capacity):
        raise ValueError("the capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex {vertex} is outside 0..{size - 1}")
    if any(value < 0 for row in capacity for value in row):
        raise ValueError("capacities must not be negative")
    residual = [list(row) for row in capacity]
    result = FlowResult(0)
    while True:
        bottleneck, path = _find_path(residual, source, sink)
        if bottleneck == 0:
            return result
        result.max_flow += bottleneck
        for u, v in zip(path, path[1:]):
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        result.augmenting_paths.append(path)