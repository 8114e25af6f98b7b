# graphbench

Weighted directed graphs in two representations, the classic algorithms that
run on them, and a benchmark that times those algorithms against each other.

## Graphs

`graphbench.graph` provides two interchangeable representations behind the
common `GraphArray` interface:

- `AdjacencyMatrix(n)`: an `n × n` weight matrix; a weight of `0` means "no
  edge", and adding an edge a second time overwrites its weight.
- `AdjacencyLists(n)`: a list of `(vertex, weight)` pairs per vertex; adding an
  edge a second time keeps both entries.

Both offer `add_edge(u, v, weight=1)`, `is_connected(u, v)`, `neighbors(u)`
(a list of `(vertex, weight)` pairs), `clear()` and `render()`, which returns a
textual dump of the graph (`str(graph)` gives the same). A vertex outside
`0 … n-1` raises `IndexError`; a negative vertex count raises `ValueError`.

```python
from graphbench.graph import AdjacencyMatrix

g = AdjacencyMatrix(3)
g.add_edge(0, 1, 4)
g.add_edge(0, 2, 1)
g.add_edge(2, 1, 2)
print(g.neighbors(0))   # [(1, 4), (2, 1)]
```

## Algorithms

- `graphbench.dijkstra.dijkstra(graph, start, vertex_count)` returns
  `(dist, prev)`. A vertex that cannot be reached has distance `math.inf` and
  predecessor `None`. `path_build(start, target, prev)` turns `prev` into a
  path, or an empty list when `target` cannot be reached from `start`.
- `graphbench.bellman_ford.bellman_ford(graph, start, vertex_count)` returns
  `(dist, prev)` in the same form and accepts negative weights. It raises
  `NegativeCycleError` (a `RuntimeError`) if a negative cycle can be reached
  from `start`.
- `graphbench.dfs.dfs(graph, u, visited)` marks in the list `visited` every
  vertex that can be reached from `u` and returns that list; vertices already
  marked are not entered. `full_dfs(graph, start, vertex_count)` runs it on a
  fresh list of flags and returns it.

```python
from graphbench.dijkstra import dijkstra, path_build

dist, prev = dijkstra(g, 0, 3)
print(dist)                      # [0, 3, 1]
print(path_build(0, 1, prev))    # [0, 2, 1]
```

## Benchmark

```
graphbench
```

The command first prints a demonstration on two small sample graphs: the
Dijkstra and Bellman–Ford distances and paths, the vertices a DFS visits, and
both graphs in Graphviz `digraph` form. It then times Dijkstra, Bellman–Ford
and DFS on randomly generated acyclic graphs for both representations and
writes tab-separated tables (vertex count, density, mean time in seconds) to
`matrix_dijkstra.txt`, `matrix_bellman.txt`, `matrix_DFS.txt`,
`list_dijkstra.txt`, `list_bellman.txt` and `list_DFS.txt`.

Options:

- `--output-dir DIR`: directory for the result files (default `results`); it
  must already exist, otherwise the command reports the failure and exits
  with status 1.
- `--repeats N`: random graphs measured per data point (default 100, must be
  positive).
- `--vertex-counts N [N ...]`: vertex counts to measure (default
  `10 50 100 200 500`).
- `--densities D [D ...]`: edge densities to measure (default `0.25 0.5 1.0`).
- `--seed N`: seed for the random graph generator, for repeatable graphs.

A measurement that fails is reported on standard output and the remaining
measurements still run.

The building blocks are available on their own in `graphbench.benchmark`:

- `generate_edges(graph, vertex_count, edge_count, max_weight=10, allow_negative=False, rng=None)`
  adds random non-zero-weight edges and returns how many were added.
- `run_test(out, vertex_count, density, use_matrix, algorithm, repeats=100, rng=None)`
  times Dijkstra or Bellman–Ford (chosen by the `Algorithm` enum), writes one
  result line to `out` and returns the mean time.
- `run_test_dfs(out, vertex_count, density, use_matrix, repeats=100, rng=None)`
  does the same for DFS.
- `format_paths(dist, prev, start)`, `format_visited(visited)` and
  `to_graphviz(graph, vertex_count)` return the demonstration's text.