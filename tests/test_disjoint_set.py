import pytest

from cpalgos.disjoint_set import DisjointSet, count_components


def test_fresh_elements_are_their_own_roots():
    sets = DisjointSet(5)
    assert [sets.find(i) for i in range(5)] == list(range(5))


def test_unite_connects_only_the_pair():
    sets = DisjointSet(4)
    assert sets.unite(0, 1) is True
    assert sets.connected(0, 1)
    assert not sets.connected(0, 2)


def test_unite_within_one_set_returns_false():
    sets = DisjointSet(3)
    sets.unite(0, 1)
    assert sets.unite(1, 0) is False


def test_connection_is_transitive():
    sets = DisjointSet(4)
    sets.unite(0, 1)
    sets.unite(2, 3)
    sets.unite(1, 3)
    assert sets.connected(0, 2)
    assert sets.find(0) == sets.find(3)


def test_larger_set_keeps_its_root():
    sets = DisjointSet(4)
    sets.unite(0, 1)
    sets.unite(0, 2)
    root = sets.find(0)
    sets.unite(3, 0)
    assert sets.find(3) == root


def test_find_out_of_range_raises():
    sets = DisjointSet(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.find(-1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_identity_matrix_has_one_component_per_vertex():
    matrix = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert count_components(matrix) == len(matrix)


def test_empty_matrix_has_no_components():
    assert count_components([]) == 0


def test_two_groups():
    edges = [(0, 1), (1, 2), (3, 4)]
    matrix = [[0] * 5 for _ in range(5)]
    for u, v in edges:
        matrix[u][v] = matrix[v][u] = 1
    assert count_components(matrix) == 2


def test_full_matrix_is_one_component():
    matrix = [[1] * 6 for _ in range(6)]
    assert count_components(matrix) == 1


def test_one_sided_edge_counts_like_symmetric_edge():
    one_sided = [[0, 1, 0], [0, 0, 0], [0, 0, 0]]
    symmetric = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert count_components(one_sided) == count_components(symmetric)