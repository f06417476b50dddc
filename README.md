# rankbench

rankbench is a small graph toolkit written in pure Python. It has no
dependencies outside the standard library. It provides:

- `rankbench.graph`: undirected and directed graphs that store adjacency
  lists (`Graph`, `Digraph`), a PageRank transition matrix
  (`PageRankGraph`), breadth-first and depth-first traversals (`bfs`, `dfs`),
  a random link generator (`randomly_populate`) and a matrix formatter
  (`format_matrix`).
- `rankbench.pagerank`: dense vector helpers (`norm_l1`, `vector_add`,
  `vector_sub`, `scale_vector`, `vector_matmul`) and a damped power-iteration
  PageRank (`page_rank_matrix`, `page_rank`).
- `rankbench.bench`: a benchmark that times PageRank on random graphs. The
  graphs grow in size in one series, and the tolerance shrinks in another.

It needs Python 3.10 or later.

## Installation

```
pip install .
```

Add the `test` extra to install pytest as well:

```
pip install ".[test]"
```

## Graphs and traversals

```python
from rankbench.graph import Graph, Digraph, bfs, dfs

g = Graph()
g.add_node([])       # node 0
g.add_node([0])      # node 1, linked to 0
g.add_node([0, 1])   # node 2, linked to 0 and 1
g.add_edges([(1, 2)])

print(bfs(g, 0))     # breadth-first order from node 0
print(dfs(g, 0))     # depth-first (preorder) order from node 0
```

- `Graph.add_node(neighbors)` appends a new node. It links the new node to
  each of the given existing nodes in both directions.
- `Graph.add_edges(pairs)` adds undirected edges. `Digraph.add_edges(pairs)`
  adds only the `source -> target` direction.
- Both methods check every node first. If a node does not exist yet, they
  raise `IndexError` and leave the graph unchanged.
- `bfs` and `dfs` raise `IndexError` if the start node is not in the graph.

## PageRank

```python
from rankbench.graph import PageRankGraph
from rankbench.pagerank import page_rank

prg = PageRankGraph.from_adjacency(3, [[1, 2], [2], [0]])
ranks = page_rank(prg, 0.85, 1e-6)
print(ranks)         # the ranks sum to about 1
```

`PageRankGraph.from_adjacency(nodes, adj_list)` builds a dense transition
matrix. Each link `i -> j` gets weight `1 / len(adj_list[i])`. A target
outside `0..nodes-1` raises `IndexError`. An adjacency list with fewer rows
than `nodes` raises `ValueError`.

`PageRankGraph.from_graph(graph)` does the same from a `Graph` or `Digraph`
and keeps the graph's edge count.

`page_rank(graph, damp, epsilon)` runs the damped iteration until the L1
change between two steps drops below `epsilon`:

```
r_next = damp * (r · P) + (1 - damp) / N
```

`page_rank_matrix(adj, damp=0.85, eps=1e-6)` works on a bare square matrix.
It raises `ValueError` if the matrix is empty or not square.

`vector_add`, `vector_sub` and `vector_matmul` raise `ValueError` when the
sizes do not match.

`format_matrix(matrix)` renders a matrix as text. It writes one row per line
and puts a space after each value.

`randomly_populate(adj_list, rng=None)` fills each row of a list of empty
lists in place with random, increasing link targets. It needs at least 3
rows. Pass a `random.Random` to make the result reproducible.

## Benchmark

```
rankbench <damp> <epsilon>
```

For example:

```
rankbench 0.85 0.000001
```

The first argument is the damping factor and the second is the tolerance.
Each is read like a C `strtof`: the leading number is used and any text after
it is ignored. A value with no leading number, or one outside single-precision
range, is reported on standard error and the command exits with status 1. It
also exits with status 1 when fewer than two arguments are given.

The benchmark runs two series and prints one line per step:

1. **Size scale test**: the size starts at 128 nodes and doubles each step,
   for 5 steps.
2. **Epsilon scale test**: the graph has 128 nodes and the tolerance is
   divided by 10 at each step, for 7 steps.

Each step builds a new random graph and times 30 PageRank runs on it. It
reports the integer average, maximum and minimum times in nanoseconds.

The same series can be run from code with `size_scale_test` and
`epsilon_scale_test`. Both take an optional text stream `out`, which defaults
to standard output. `time_page_rank`, `multi_sample` and `summarize` are
available for custom timings.

## What it does not do

- The PageRank solver works on dense lists of floats. It has no
  sparse-matrix support.
- The benchmark's random graphs are not seeded, so two runs give different
  graphs and timings.
- No results are saved; the benchmark only prints them.

## Tests

```
pytest
```