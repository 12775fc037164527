# graphalgos

A small library of undirected, weighted graphs and the classic algorithms
that build trees from them. Every function lives in `graphalgos.algorithms`:

- `bfs(graph, start)`: breadth-first search tree rooted at `start`
- `dfs(graph, start)`: depth-first search tree rooted at `start`
- `dijkstra(graph, start)`: shortest-path tree from `start`; raises
  `ValueError` if any edge weight is negative
- `prim(graph, start)`: minimum spanning tree of the component that holds `start`
- `kruskal(graph)`: minimum spanning forest of the whole graph

Each algorithm returns a new `Graph` with the same number of vertices as the
input, holding only the edges of the tree (with their original weights).

The package also provides the data structures these algorithms use:

- `graphalgos.bounded_queue.BoundedQueue`: FIFO queue with a fixed capacity;
  raises `QueueOverflowError` when full and `QueueUnderflowError` when empty
- `graphalgos.min_heap.MinHeap`: indexed min-heap of vertices with
  `insert`, `extract_min`, `decrease_key`, `priority` and `in` membership;
  raises `HeapError` on overflow, underflow or an unknown vertex
- `graphalgos.union_find.UnionFind`: disjoint sets with `find` (path
  compression) and `unite` (union by rank)

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from graphalgos.graph import Graph
from graphalgos.algorithms import dijkstra, kruskal

g = Graph(4)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 2)
g.add_edge(2, 3, 1)
g.add_edge(1, 3, 5)

tree = dijkstra(g, 0)
print(tree.format())
print(tree.num_edges)      # 3

mst = kruskal(g)
print(mst.has_edge(1, 3))  # False
```

## The `Graph` class

Vertices are the integers `0` to `vertex_count - 1`; a graph must have at
least one vertex. Edges are undirected and kept in insertion order.

- `add_edge(src, dest, weight=1)` adds an undirected edge. Self-loops and
  invalid vertices raise `GraphError`; adding an edge twice raises `ValueError`.
- `add_directed_edge(src, dest, weight)` appends a one-way entry.
- `remove_edge(src, dest)` removes both directions; it raises `GraphError`
  for an invalid vertex or a missing edge.
- `neighbors(v)` returns the adjacency list of `v` as a tuple of `Edge`
  objects (`vertex`, `weight`); `adj_size(v)` is its length.
- `vertex_count` and `num_edges` are properties; `num_edges` counts each
  undirected edge once.
- `has_edge(src, dst)`, `is_valid_vertex(v)` and `has_negative_edge()`
  answer the obvious questions.
- `format()` returns the adjacency lists as text and `print_graph(file=None)`
  writes them to `file` (standard output by default), one line per vertex:

```
0: (1, w=1) 
1: (0, w=1) (2, w=2) 
```

## Demo

A demonstration command runs every algorithm on a few sample graphs, removes
an edge to split one of them, runs them again and prints all the trees:

```
graphalgos-demo
```

It takes no options and reads no input; the sample graphs are fixed.