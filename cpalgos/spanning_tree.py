"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from cpalgos.disjoint_set import DisjointSet


def kruskal_mst_weight(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest over vertices ``0 .. n-1``.

    Edges are ``(u, v, w)`` triples; the input is left unchanged.
    """
    sets = DisjointSet(n)
    total = 0
    added = 0
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        if added >= n - 1:
            break
        if sets.unite(u, v):
            total += w
            added += 1
    return total


def manhattan_distance(p1: Sequence[int], p2: Sequence[int]) -> int:
    """Manhattan distance between two points in the plane."""
    return abs(p1[0] - p2[0]) + abs(p1[1] - p2[1])


def prim_mst_weight(points: Iterable[Sequence[int]]) -> int:
    """Weight of the minimum spanning tree joining ``points`` under Manhattan distance."""
    pts = list(points)
    n = len(pts)
    if n == 0:
        return 0
    found = [False] * n
    heap: list[tuple[int, int]] = [(0, 0)]
    total = 0
    count = 0
    while count < n:
        weight, node = heapq.heappop(heap)
        if found[node]:
            continue
        found[node] = True
        total += weight
        count += 1
        for nxt in range(n):
            if not found[nxt]:
                heapq.heappush(heap, (manhattan_distance(pts[node], pts[nxt]), nxt))
    return total