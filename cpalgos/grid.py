"""Flattening a square grid and walking its four-way neighbours."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def grid_index(i: int, j: int, size: int) -> int:
    """Row-major position of cell ``(i, j)`` in a grid of side ``size``."""
    return i * size + j


def grid_neighbours(i: int, j: int, size: int) -> Iterator[tuple[int, int]]:
    """Yield the in-bounds four-way neighbours of ``(i, j)``."""
    for di, dj in DIRECTIONS:
        ni, nj = i + di, j + dj
        if 0 <= ni < size and 0 <= nj < size:
            yield ni, nj


def flattened_adjacency(grid: Sequence[Sequence[object]]) -> dict[int, list[int]]:
    """Map each cell's flattened index to the flattened indices of its neighbours.

    The grid is treated as square with side ``len(grid)``.
    """
    size = len(grid)
    return {
        grid_index(i, j, size): [
            grid_index(ni, nj, size) for ni, nj in grid_neighbours(i, j, size)
        ]
        for i in range(size)
        for j in range(size)
    }