import itertools

import pytest

from cpalgos.spanning_tree import kruskal_mst_weight, manhattan_distance, prim_mst_weight

POINT_SETS = [
    [(0, 0), (2, 2), (3, 10), (5, 2), (7, 0)],
    [(3, 12), (-2, 5), (-4, 1)],
    [(0, 0), (1, 1), (1, 0), (-1, 1)],
    [(5, 5), (5, 5), (0, 9)],
]


def test_manhattan_distance_value():
    assert manhattan_distance((0, 0), (3, 4)) == 7


def test_manhattan_distance_is_symmetric_and_zero_on_self():
    a, b = (-3, 8), (4, -1)
    assert manhattan_distance(a, b) == manhattan_distance(b, a)
    assert manhattan_distance(a, a) == 0


def test_prim_worked_example():
    assert prim_mst_weight([(0, 0), (2, 2), (3, 10), (5, 2), (7, 0)]) == 20


def test_prim_single_point_and_empty():
    assert prim_mst_weight([(4, 4)]) == prim_mst_weight([])


@pytest.mark.parametrize("points", POINT_SETS)
def test_prim_agrees_with_kruskal(points):
    edges = [
        (i, j, manhattan_distance(points[i], points[j]))
        for i, j in itertools.combinations(range(len(points)), 2)
    ]
    assert prim_mst_weight(points) == kruskal_mst_weight(len(points), edges)


def test_kruskal_on_tree_uses_every_edge():
    edges = [(0, 1, 4), (1, 2, 7), (2, 3, 1), (3, 4, 9)]
    assert kruskal_mst_weight(5, edges) == sum(w for _, _, w in edges)


def test_kruskal_skips_heavy_cycle_edge():
    edges = [(0, 1, 1), (1, 2, 2), (0, 2, 5)]
    assert kruskal_mst_weight(3, edges) == edges[0][2] + edges[1][2]


def test_kruskal_leaves_input_unchanged():
    edges = [(0, 2, 5), (0, 1, 1), (1, 2, 2)]
    original = list(edges)
    kruskal_mst_weight(3, edges)
    assert edges == original