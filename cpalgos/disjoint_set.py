"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

from collections.abc import Sequence


class DisjointSet:
    """A partition of ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("a disjoint set needs a non-negative number of elements")
        self.parent = list(range(n))
        self.size = [1] * n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} is outside 0..{len(self.parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; return False if they were already one."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self.size[a] < self.size[b]:
            a, b = b, a
        self.parent[b] = a
        self.size[a] += self.size[b]
        return True

    def connected(self, a: int, b: int) -> bool:
        """Whether ``a`` and ``b`` lie in the same set."""
        return self.find(a) == self.find(b)


def count_components(adj_matrix: Sequence[Sequence[int]]) -> int:
    """Number of connected components of the graph given by an adjacency matrix.

    A cell holding 1 marks an edge; the graph is treated as undirected.
    """
    n = len(adj_matrix)
    sets = DisjointSet(n)
    for i, row in enumerate(adj_matrix):
        for j, cell in enumerate(row):
            if i != j and cell == 1:
                sets.unite(i, j)
    return sum(1 for i in range(n) if sets.find(i) == i)