import io
import math
import random

import pytest

from graphbench.bellman_ford import bellman_ford
from graphbench.benchmark import (
    RESULTS_HEADER,
    Algorithm,
    format_paths,
    format_visited,
    generate_edges,
    main,
    run_test,
    run_test_dfs,
    to_graphviz,
)
from graphbench.dijkstra import dijkstra
from graphbench.graph import AdjacencyLists, AdjacencyMatrix


def _edges(graph, n):
    return [(u, v, w) for u in range(n) for v, w in graph.neighbors(u)]


@pytest.mark.parametrize("graph_type", [AdjacencyMatrix, AdjacencyLists])
def test_generate_edges_respects_count_and_weights(graph_type):
    n = 8
    graph = graph_type(n)
    added = generate_edges(graph, n, 10, 10, False, random.Random(1))
    edges = _edges(graph, n)
    assert added == 10
    assert len(edges) == 10
    assert all(1 <= w <= 10 for _, _, w in edges)
    assert all(u != v for u, v, _ in edges)


def test_generate_edges_caps_at_possible_pairs():
    n = 5
    graph = AdjacencyLists(n)
    added = generate_edges(graph, n, n * (n - 1), rng=random.Random(2))
    assert added == n * (n - 1) // 2
    pairs = {(u, v) for u, v, _ in _edges(graph, n)}
    assert all((v, u) not in pairs for u, v in pairs)


def test_generate_edges_negative_weights_nonzero_and_acyclic():
    n = 12
    graph = AdjacencyMatrix(n)
    generate_edges(graph, n, 60, 10, True, random.Random(3))
    edges = _edges(graph, n)
    assert all(w != 0 and -10 <= w <= 10 for _, _, w in edges)
    dist, _ = bellman_ford(graph, 0, n)
    assert dist[0] == 0


def test_generate_edges_is_deterministic_with_seed():
    first = AdjacencyLists(7)
    second = AdjacencyLists(7)
    generate_edges(first, 7, 15, rng=random.Random(42))
    generate_edges(second, 7, 15, rng=random.Random(42))
    assert _edges(first, 7) == _edges(second, 7)


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("use_matrix", [True, False])
def test_run_test_writes_result_line(algorithm, use_matrix):
    out = io.StringIO()
    average = run_test(out, 10, 0.5, use_matrix, algorithm, 3, random.Random(5))
    fields = out.getvalue().rstrip("\n").split("\t")
    assert fields[0] == "10"
    assert fields[1] == "0.5"
    assert average >= 0
    assert math.isclose(float(fields[2]), average, rel_tol=1e-5, abs_tol=1e-12)


def test_run_test_accepts_integer_algorithm():
    out = io.StringIO()
    run_test(out, 6, 1.0, False, 1, 2, random.Random(6))
    assert out.getvalue().split("\t")[1] == "1"


@pytest.mark.parametrize("use_matrix", [True, False])
def test_run_test_dfs_writes_result_line(use_matrix):
    out = io.StringIO()
    average = run_test_dfs(out, 10, 0.25, use_matrix, 2, random.Random(7))
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].split("\t")[:2] == ["10", "0.25"]
    assert average >= 0


def test_format_paths_from_dijkstra():
    graph = AdjacencyMatrix(3)
    graph.add_edge(0, 1, 4)
    graph.add_edge(0, 2, 1)
    graph.add_edge(2, 1, 2)
    dist, prev = dijkstra(graph, 0, 3)
    lines = format_paths(dist, prev, 0).splitlines()
    assert lines[0] == "Wierzcholek\tOdleglosc\tSciezka"
    assert lines[2] == "1\t\t3\t\t0 2 1 "
    assert len(lines) == 4


def test_format_paths_unreachable():
    graph = AdjacencyLists(2)
    dist, prev = dijkstra(graph, 0, 2)
    lines = format_paths(dist, prev, 0).splitlines()
    assert lines[2] == "1\t\tBrak sciezki"


def test_format_visited():
    assert format_visited([True, False, True]) == "Odwiedzone wierzcholki: 0 2 \n"


def test_to_graphviz():
    graph = AdjacencyLists(3)
    graph.add_edge(0, 1, 4)
    graph.add_edge(1, 2, -2)
    text = to_graphviz(graph, 3)
    lines = text.splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert '\t0 -> 1 [label="4"];' in lines
    assert len(lines) == 4


def test_main_writes_all_result_files(tmp_path, capsys):
    code = main([
        "--output-dir", str(tmp_path), "--repeats", "1",
        "--vertex-counts", "5", "6", "--densities", "0.5", "--seed", "1",
    ])
    assert code == 0
    files = sorted(p.name for p in tmp_path.iterdir())
    assert len(files) == 6
    for path in tmp_path.iterdir():
        content = path.read_text(encoding="utf-8")
        assert content.startswith(RESULTS_HEADER)
        assert len(content.splitlines()) == 3
    captured = capsys.readouterr().out
    assert "______Dijkstra______" in captured
    assert "______DFS______" in captured
    assert captured.count("digraph G {") == 2


def test_main_fails_without_output_directory(tmp_path, capsys):
    missing = tmp_path / "missing"
    code = main(["--output-dir", str(missing), "--repeats", "1",
                 "--vertex-counts", "4", "--densities", "0.5"])
    assert code == 1
    assert "Nie udalo sie odtworzyc pliku" in capsys.readouterr().err