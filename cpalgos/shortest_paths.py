"""Shortest paths: Bellman-Ford, 0-1 BFS, Dijkstra and Floyd-Warshall.

Unreachable vertices are reported with a distance of ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

Edge = Sequence[int]


def bellman_ford(n: int, edges: Iterable[Edge], start: int, end: int) -> float:
    """Length of the shortest path from ``start`` to ``end`` over directed weighted edges.

    Edges are ``(u, v, w)`` triples on vertices ``0 .. n-1``; weights may be
    negative. Returns ``math.inf`` when ``end`` cannot be reached.
    """
    edge_list = [tuple(edge) for edge in edges]
    dist: list[float] = [math.inf] * n
    dist[start] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    return dist[end]


def build_undirected_adjacency(n: int, edges: Iterable[Edge]) -> list[list[tuple[int, int]]]:
    """Adjacency lists of ``(neighbour, weight)`` pairs, each edge added both ways."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def zero_one_bfs(
    n: int, src: int, adj: Sequence[Iterable[Sequence[int]]]
) -> list[float]:
    """Distances from ``src`` in a graph whose edge weights are 0 or 1.

    ``adj[u]`` holds ``(v, w)`` pairs. Zero-weight edges are explored first.
    """
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    queue: deque[int] = deque([src])
    while queue:
        u = queue.popleft()
        for v, weight in adj[u]:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                if weight == 0:
                    queue.appendleft(v)
                else:
                    queue.append(v)
    return dist


def dijkstra_path(
    n: int,
    edges: Sequence[Sequence[int]],
    weights: Sequence[int],
    start: int,
    end: int,
) -> list[int]:
    """Shortest path from ``start`` to ``end`` in an undirected graph on vertices ``1 .. n``.

    ``edges[i]`` is a ``(u, v)`` pair with weight ``weights[i]``. Returns the
    vertices along the path, or an empty list when there is none.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for (u, v), w in zip(edges, weights, strict=True):
        adj[u].append((v, w))
        adj[v].append((u, w))

    dist: list[float] = [math.inf] * (n + 1)
    prev: list[int | None] = [None] * (n + 1)
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, w in adj[node]:
            candidate = dist[node] + w
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                prev[nxt] = node
                heapq.heappush(heap, (candidate, nxt))

    path: list[int] = []
    at: int | None = end
    while at is not None:
        path.append(at)
        at = prev[at]
    path.reverse()
    return path if path[0] == start else []


def floyd_warshall(n: int, edges: Iterable[Edge]) -> list[list[float]]:
    """All-pairs shortest distances in an undirected graph on vertices ``0 .. n-1``.

    Edges are ``(u, v, w)`` triples; a later edge between the same pair
    replaces an earlier one.
    """
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for u, v, w in edges:
        dist[u][v] = w
        dist[v][u] = w
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            via = dist[i][k]
            if via == math.inf:
                continue
            row_i = dist[i]
            for j in range(n):
                if row_k[j] != math.inf and via + row_k[j] < row_i[j]:
                    row_i[j] = via + row_k[j]
    return dist