"""Demonstration run and timing benchmarks of the shortest-path and traversal algorithms."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Sequence
from contextlib import ExitStack
from enum import Enum
from pathlib import Path
from typing import TextIO

from graphbench.bellman_ford import NegativeCycleError, bellman_ford
from graphbench.dfs import dfs
from graphbench.dijkstra import dijkstra
from graphbench.graph import AdjacencyLists, AdjacencyMatrix, GraphArray

DEFAULT_REPEATS = 100
DEFAULT_VERTEX_COUNTS = (10, 50, 100, 200, 500)
DEFAULT_DENSITIES = (0.25, 0.5, 1.0)
RESULTS_HEADER = "Liczba wierzchołków\tGęstość\tCzas(s)\n"


class Algorithm(Enum):
    """Shortest-path algorithm measured by :func:`run_test`."""

    DIJKSTRA = 0
    BELLMAN_FORD = 1


def generate_edges(
    graph: GraphArray,
    vertex_count: int,
    edge_count: int,
    max_weight: int = 10,
    allow_negative: bool = False,
    rng: random.Random | None = None,
) -> int:
    """Add up to ``edge_count`` random edges to ``graph`` and return how many were added.

    Edges follow a random ordering of the vertices, so the result never holds a
    cycle. Weights are non-zero and drawn from ``[1, max_weight]``, or from
    ``[-max_weight, max_weight]`` when negative weights are allowed.
    """
    rng = rng if rng is not None else random.Random()
    order = list(range(vertex_count))
    rng.shuffle(order)

    possible = [
        (u, v) for i, u in enumerate(order) for v in order[i + 1:]
    ]
    rng.shuffle(possible)

    low = -max_weight if allow_negative else 1
    added = 0
    for u, v in possible[:max(edge_count, 0)]:
        weight = 0
        while weight == 0:
            weight = rng.randint(low, max_weight)
        graph.add_edge(u, v, weight)
        added += 1
    return added


def _new_graph(vertex_count: int, use_matrix: bool) -> GraphArray:
    return AdjacencyMatrix(vertex_count) if use_matrix else AdjacencyLists(vertex_count)


def _edge_count(vertex_count: int, density: float) -> int:
    return int(density * vertex_count * (vertex_count - 1))


def _write_result(out: TextIO, vertex_count: int, density: float, average: float) -> None:
    out.write(f"{vertex_count}\t{density:g}\t{average:g}\n")
    out.flush()


def run_test(
    out: TextIO,
    vertex_count: int,
    density: float,
    use_matrix: bool,
    algorithm: Algorithm | int,
    repeats: int = DEFAULT_REPEATS,
    rng: random.Random | None = None,
) -> float:
    """Time a shortest-path algorithm on random graphs, write a result line, return the mean."""
    algorithm = Algorithm(algorithm)
    rng = rng if rng is not None else random.Random()
    edge_count = _edge_count(vertex_count, density)
    solve = dijkstra if algorithm is Algorithm.DIJKSTRA else bellman_ford
    allow_negative = algorithm is Algorithm.BELLMAN_FORD

    total = 0.0
    for _ in range(repeats):
        graph = _new_graph(vertex_count, use_matrix)
        generate_edges(graph, vertex_count, edge_count, 10, allow_negative, rng)
        began = time.perf_counter()
        solve(graph, 0, vertex_count)
        total += time.perf_counter() - began

    average = total / repeats
    _write_result(out, vertex_count, density, average)
    return average


def run_test_dfs(
    out: TextIO,
    vertex_count: int,
    density: float,
    use_matrix: bool,
    repeats: int = DEFAULT_REPEATS,
    rng: random.Random | None = None,
) -> float:
    """Time depth-first traversal on random graphs, write a result line, return the mean."""
    rng = rng if rng is not None else random.Random()
    edge_count = _edge_count(vertex_count, density)

    total = 0.0
    for _ in range(repeats):
        graph = _new_graph(vertex_count, use_matrix)
        generate_edges(graph, vertex_count, edge_count, rng=rng)
        began = time.perf_counter()
        dfs(graph, 0, [False] * vertex_count)
        total += time.perf_counter() - began

    average = total / repeats
    _write_result(out, vertex_count, density, average)
    return average


def format_paths(
    dist: Sequence[float], prev: Sequence[int | None], start: int
) -> str:
    """Return a table of distances and paths from ``start`` to every vertex."""
    lines = ["Wierzcholek\tOdleglosc\tSciezka"]
    for vertex, distance in enumerate(dist):
        if distance == math.inf:
            lines.append(f"{vertex}\t\tBrak sciezki")
            continue
        path: list[int] = []
        at: int | None = vertex
        while at is not None:
            path.append(at)
            at = prev[at]
        steps = "".join(f"{p} " for p in reversed(path))
        lines.append(f"{vertex}\t\t{distance}\t\t{steps}")
    return "\n".join(lines) + "\n"


def format_visited(visited: Sequence[bool]) -> str:
    """Return the line listing the visited vertices."""
    marked = "".join(f"{vertex} " for vertex, seen in enumerate(visited) if seen)
    return f"Odwiedzone wierzcholki: {marked}\n"


def to_graphviz(graph: GraphArray, vertex_count: int) -> str:
    """Return the graph in Graphviz ``dot`` notation with weights as labels."""
    lines = ["digraph G {"]
    lines.extend(
        f'\t{u} -> {v} [label="{weight}"];'
        for u in range(vertex_count)
        for v, weight in graph.neighbors(u)
    )
    lines.append("}")
    return "\n".join(lines) + "\n"


def _demo_graphs(vertex_count: int) -> tuple[AdjacencyLists, AdjacencyLists]:
    graph = AdjacencyLists(vertex_count)
    for u, v, weight in (
        (0, 1, 7), (0, 2, 9), (0, 5, 14), (1, 2, 10), (1, 3, 15),
        (2, 3, 11), (2, 5, 2), (3, 4, 6), (4, 5, 9),
    ):
        graph.add_edge(u, v, weight)

    graph_bf = AdjacencyLists(vertex_count)
    for u, v, weight in (
        (0, 1, 5), (1, 3, 3), (1, 4, 9), (3, 4, 3), (3, 5, 2), (4, 2, -1),
        (4, 5, -5), (5, 2, 8), (5, 0, 9), (2, 1, -4), (2, 0, 3),
    ):
        graph_bf.add_edge(u, v, weight)
    return graph, graph_bf


def _run_demo() -> None:
    vertex_count = 6
    graph, graph_bf = _demo_graphs(vertex_count)

    dist, prev = dijkstra(graph, 0, vertex_count)
    print("\n______Dijkstra______")
    print(format_paths(dist, prev, 0), end="")

    try:
        dist_bf, prev_bf = bellman_ford(graph_bf, 0, vertex_count)
    except NegativeCycleError as error:
        print(f"Error: {error}")
    else:
        print("\n______B-F______")
        print(format_paths(dist_bf, prev_bf, 0), end="")

    visited = dfs(graph, 0, [False] * vertex_count)
    print("\n______DFS______")
    print(format_visited(visited), end="")

    for shown in (graph, graph_bf):
        print("\n\n" + to_graphviz(shown, vertex_count) + "\n")


_RESULT_FILES = (
    "matrix_dijkstra.txt",
    "matrix_bellman.txt",
    "matrix_DFS.txt",
    "list_dijkstra.txt",
    "list_bellman.txt",
    "list_DFS.txt",
)


def _run_benchmarks(
    output_dir: Path,
    vertex_counts: Sequence[int],
    densities: Sequence[float],
    repeats: int,
    rng: random.Random,
) -> int:
    with ExitStack is None or ExitStack() as stack:
        outputs = {}
        for name in _RESULT_FILES:
            try:
                outputs[name] = stack.enter_context(
                    open(output_dir / name, "w", encoding="utf-8")
                )
            except OSError:
                print("Nie udalo sie odtworzyc pliku", file=sys.stderr)
                return 1
        for out in outputs.values():
            out.write(RESULTS_HEADER)

        for vertex_count in vertex_counts:
            for density in densities:
                jobs = (
                    ("Dijkstra Matrix", lambda: run_test(
                        outputs["matrix_dijkstra.txt"], vertex_count, density, True,
                        Algorithm.DIJKSTRA, repeats, rng)),
                    ("B-F Matrix", lambda: run_test(
                        outputs["matrix_bellman.txt"], vertex_count, density, True,
                        Algorithm.BELLMAN_FORD, repeats, rng)),
                    ("DFS Matrix", lambda: run_test_dfs(
                        outputs["matrix_DFS.txt"], vertex_count, density, True,
                        repeats, rng)),
                    ("Dijkstra List", lambda: run_test(
                        outputs["list_dijkstra.txt"], vertex_count, density, False,
                        Algorithm.DIJKSTRA, repeats, rng)),
                    ("B-F List", lambda: run_test(
                        outputs["list_bellman.txt"], vertex_count, density, False,
                        Algorithm.BELLMAN_FORD, repeats, rng)),
                    ("DFS List", lambda: run_test_dfs(
                        outputs["list_DFS.txt"], vertex_count, density, False,
                        repeats, rng)),
                )
                for label, job in jobs:
                    try:
                        job()
                    except Exception as error:  # one failed measurement must not stop the rest
                        print(f"Error {label}: {error}")
    return 0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the graph algorithm demonstration and timing benchmarks."
    )
    parser.add_argument("--output-dir", type=Path, default=Path("results"),
                        help="existing directory for the result files")
    parser.add_argument("--repeats", type=int, default=DEFAULT_REPEATS,
                        help="random graphs measured per data point")
    parser.add_argument("--vertex-counts", type=int, nargs="+",
                        default=list(DEFAULT_VERTEX_COUNTS))
    parser.add_argument("--densities", type=float, nargs="+",
                        default=list(DEFAULT_DENSITIES))
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random graph generator")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration results, then write the benchmark tables."""
    args = _parse_args(argv)
    if args.repeats < 1:
        print("Error: repeats must be positive", file=sys.stderr)
        return 1
    try:
        _run_demo()
        return _run_benchmarks(
            args.output_dir, args.vertex_counts, args.densities, args.repeats,
            random.Random(args.seed),
        )
    except Exception as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())