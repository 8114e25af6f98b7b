"""Bellman-Ford single-source shortest paths with negative-cycle detection."""

from __future__ import annotations

import math

from graphbench.graph import GraphArray


class NegativeCycleError(RuntimeError):
    """Raised when a negative cycle is reachable from the start vertex."""


def bellman_ford(
    graph: GraphArray, start: int, vertex_count: int
) -> tuple[list[float], list[int | None]]:
    """Return ``(dist, prev)`` for shortest paths from ``start``.

    Unreachable vertices have distance ``math.inf`` and predecessor ``None``.
    Raises NegativeCycleError if a reachable negative cycle exists.
    """
    dist: list[float] = [math.inf] * vertex_count
    prev: list[int | None] = [None] * vertex_count
    dist[start] = 0

    for _ in range(vertex_count - 1):
        for u in range(vertex_count):
            if dist[u] == math.inf:
                continue
            for v, weight in graph.neighbors(u):
                if dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    prev[v] = u

    for u in range(vertex_count):
        if dist[u] == math.inf:
            continue
        if any(dist[u] + weight < dist[v] for v, weight in graph.neighbors(u)):
            raise NegativeCycleError("graph contains a negative cycle")

    return dist, prev