"""Undirected weighted graphs with BFS, DFS, Dijkstra, Prim and Kruskal, plus a bounded queue, an indexed min-heap and union-find."""

__version__ = "0.1.0"

__all__ = ["algorithms", "bounded_queue", "demo", "graph", "min_heap", "union_find"]