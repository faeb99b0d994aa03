import pytest

from cpalgos.grid import flattened_adjacency, grid_index, grid_neighbours


@pytest.mark.parametrize("size", [1, 2, 3, 5])
def test_grid_index_is_row_major_enumeration(size):
    indices = [grid_index(i, j, size) for i in range(size) for j in range(size)]
    assert indices == list(range(size * size))


@pytest.mark.parametrize("size", [2, 3, 4])
def test_neighbours_in_bounds_and_adjacent(size):
    for i in range(size):
        for j in range(size):
            for ni, nj in grid_neighbours(i, j, size):
                assert 0 <= ni < size and 0 <= nj < size
                assert abs(ni - i) + abs(nj - j) == 1


def test_corner_and_centre_neighbour_counts():
    assert len(list(grid_neighbours(0, 0, 3))) == 2
    assert len(list(grid_neighbours(1, 1, 3))) == 4


def test_single_cell_has_no_neighbours():
    assert list(grid_neighbours(0, 0, 1)) == []


def test_flattened_adjacency_sample_grid():
    sample = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    adjacency = flattened_adjacency(sample)
    assert sorted(adjacency) == list(range(9))
    for node, neighbours in adjacency.items():
        for other in neighbours:
            assert node in adjacency[other]
    assert sorted(adjacency[grid_index(0, 0, 3)]) == [grid_index(0, 1, 3), grid_index(1, 0, 3)]


def test_flattened_adjacency_empty():
    assert flattened_adjacency([]) == {}