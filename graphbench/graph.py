"""Directed weighted graphs stored as an adjacency matrix or adjacency lists."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GraphArray(ABC):
    """Common interface of the graph representations.

    A weight of zero means "no edge" for the matrix representation, so edges
    are expected to carry non-zero weights.
    """

    @abstractmethod
    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Add a directed edge ``u -> v`` with the given weight."""

    @abstractmethod
    def is_connected(self, u: int, v: int) -> bool:
        """Return whether there is an edge ``u -> v``."""

    @abstractmethod
    def render(self) -> str:
        """Return a printable text view of the graph."""

    @abstractmethod
    def neighbors(self, u: int) -> list[tuple[int, int]]:
        """Return the ``(vertex, weight)`` pairs reachable by one edge from ``u``."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every edge, keeping the vertex count."""

    def __str__(self) -> str:
        return self.render()


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} out of range for graph of {size} vertices")


class AdjacencyMatrix(GraphArray):
    """Graph stored as a flat ``n * n`` matrix of weights."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self.size = n
        self._matrix = [0] * (n * n)

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        _check_vertex(u, self.size)
        _check_vertex(v, self.size)
        self._matrix[u * self.size + v] = weight

    def is_connected(self, u: int, v: int) -> bool:
        _check_vertex(u, self.size)
        _check_vertex(v, self.size)
        return self._matrix[u * self.size + v] != 0

    def _row(self, u: int) -> list[int]:
        return self._matrix[u * self.size:(u + 1) * self.size]

    def render(self) -> str:
        return "".join(
            "".join(f"{weight} " for weight in self._row(u)) + "\n"
            for u in range(self.size)
        )

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        _check_vertex(u, self.size)
        return [(v, weight) for v, weight in enumerate(self._row(u)) if weight != 0]

    def clear(self) -> None:
        self._matrix = [0] * (self.size * self.size)


class AdjacencyLists(GraphArray):
    """Graph stored as one list of ``(vertex, weight)`` pairs per vertex."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must not be negative")
        self._lists: list[list[tuple[int, int]]] = [[] for _ in range(n)]

    @property
    def size(self) -> int:
        return len(self._lists)

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        _check_vertex(u, self.size)
        self._lists[u].append((v, weight))

    def is_connected(self, u: int, v: int) -> bool:
        _check_vertex(u, self.size)
        return any(target == v for target, _ in self._lists[u])

    def render(self) -> str:
        return "".join(
            f"{u}: " + "".join(f"({v}, w={weight}) " for v, weight in edges) + "\n"
            for u, edges in enumerate(self._lists)
        )

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        _check_vertex(u, self.size)
        return list(self._lists[u])

    def clear(self) -> None:
        for edges in self._lists:
            edges.clear()