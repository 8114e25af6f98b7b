"""Weighted directed graphs, shortest paths, traversal and timing benchmarks."""

__version__ = "0.1.0"
__all__ = ["graph", "dijkstra", "bellman_ford", "dfs", "benchmark"]