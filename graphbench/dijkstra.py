"""Dijkstra's single-source shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

from graphbench.graph import GraphArray


def dijkstra(
    graph: GraphArray, start: int, vertex_count: int
) -> tuple[list[float], list[int | None]]:
    """Return ``(dist, prev)`` for shortest paths from ``start``.

    Unreachable vertices have distance ``math.inf`` and predecessor ``None``.
    """
    dist: list[float] = [math.inf] * vertex_count
    prev: list[int | None] = [None] * vertex_count
    dist[start] = 0

    queue: list[tuple[float, int]] = [(0, start)]
    while queue:
        current, u = heapq.heappop(queue)
        if current > dist[u]:
            continue
        for v, weight in graph.neighbors(u):
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = u
                heapq.heappush(queue, (candidate, v))

    return dist, prev


def path_build(start: int, target: int, prev: Sequence[int | None]) -> list[int]:
    """Rebuild the path from ``start`` to ``target``; empty if there is none."""
    path: list[int] = []
    vertex: int | None = target
    while vertex is not None:
        path.append(vertex)
        vertex = prev[vertex]
    path.reverse()
    return path if path[0] == start else []