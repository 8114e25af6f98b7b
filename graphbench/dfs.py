"""Depth-first traversal."""

from __future__ import annotations

from graphbench.graph import GraphArray


def dfs(graph: GraphArray, u: int, visited: list[bool]) -> list[bool]:
    """Mark every vertex reachable from ``u`` in ``visited`` and return it.

    Vertices already marked are not entered again.
    """
    visited[u] = True
    stack = [iter(graph.neighbors(u))]
    while stack:
        for v, _ in stack[-1]:
            if not visited[v]:
                visited[v] = True
                stack.append(iter(graph.neighbors(v)))
                break
        else:
            stack.pop()
    return visited


def full_dfs(graph: GraphArray, start: int, vertex_count: int) -> list[bool]:
    """Run a traversal from ``start`` on a fresh marking and return it."""
    return dfs(graph, start, [False] * vertex_count)