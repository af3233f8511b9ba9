import random

import pytest

from algokit.mst import kruskal_mst, prim_mst

FIVE_VERTEX = [
    (0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8),
    (1, 4, 5), (2, 4, 7), (3, 4, 9),
]


def _random_connected(seed, size):
    rng = random.Random(seed)
    edges = [(v, rng.randrange(v), rng.randint(1, 50)) for v in range(1, size)]
    for _ in range(size * 2):
        a, b = rng.randrange(size), rng.randrange(size)
        if a != b:
            edges.append((a, b, rng.randint(1, 50)))
    return edges


def test_five_vertex_graph():
    assert kruskal_mst(5, FIVE_VERTEX) == 16
    assert prim_mst(5, FIVE_VERTEX) == 16


@pytest.mark.parametrize("seed", range(10))
def test_kruskal_and_prim_agree(seed):
    edges = _random_connected(seed, 12)
    assert kruskal_mst(12, edges) == prim_mst(12, edges)


def test_tree_weight_is_sum_of_edges():
    tree = [(0, 1, 4), (1, 2, 7), (1, 3, 1), (3, 4, 9)]
    expected = sum(weight for *_, weight in tree)
    assert kruskal_mst(5, tree) == expected
    assert prim_mst(5, tree) == expected


def test_cheaper_parallel_edge_is_chosen():
    edges = [(0, 1, 5), (0, 1, 3)]
    assert kruskal_mst(2, edges) == 3
    assert prim_mst(2, edges) == 3


def test_prim_spans_only_component_of_zero():
    component = [(0, 1, 2), (1, 2, 3), (0, 2, 4)]
    other = [(3, 4, 10)]
    assert prim_mst(5, component + other) == kruskal_mst(3, component)
    assert kruskal_mst(5, component + other) == kruskal_mst(3, component) + 10


def test_single_vertex():
    assert kruskal_mst(1, []) == 0
    assert prim_mst(1, []) == 0


@pytest.mark.parametrize("algorithm", [kruskal_mst, prim_mst])
def test_rejects_vertex_out_of_range(algorithm):
    with pytest.raises(ValueError):
        algorithm(2, [(0, 2, 1)])