"""Traversal, shortest-path and spanning-tree algorithms on :class:`Graph`."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .bounded_queue import BoundedQueue
from .graph import Color, Graph
from .min_heap import MinHeap
from .union_find import UnionFind


def _require_start(graph: Graph, start: int, name: str) -> None:
    if not graph.is_valid_vertex(start):
        raise ValueError(f"Invalid start vertex for {name}")


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first search tree of ``graph`` rooted at ``start``."""
    _require_start(graph, start, "BFS")
    n = graph.vertex_count
    tree = Graph(n)
    color = [Color.WHITE] * n
    color[start] = Color.GRAY

    queue = BoundedQueue(n)
    queue.enqueue(start)
    while not queue.is_empty():
        u = queue.dequeue()
        for edge in graph.neighbors(u):
            v = edge.vertex
            if color[v] is Color.WHITE:
                color[v] = Color.GRAY
                tree.add_edge(u, v, edge.weight)
                queue.enqueue(v)
        color[u] = Color.BLACK
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search tree of ``graph`` rooted at ``start``."""
    _require_start(graph, start, "DFS")
    n = graph.vertex_count
    tree = Graph(n)
    color = [Color.WHITE] * n

    color[start] = Color.GRAY
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        u, pending = stack[-1]
        for edge in pending:
            v = edge.vertex
            if color[v] is Color.WHITE:
                tree.add_edge(u, v, edge.weight)
                color[v] = Color.GRAY
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            color[u] = Color.BLACK
            stack.pop()
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree of ``graph`` from ``start``.

    Raises ``ValueError`` if any edge weight is negative.
    """
    if graph.has_negative_edge():
        raise ValueError("Dijkstra cannot run on graphs with negative weight edges")
    _require_start(graph, start, "Dijkstra")

    n = graph.vertex_count
    dist: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    dist[start] = 0

    heap = MinHeap(n)
    for v, d in enumerate(dist):
        heap.insert(v, d)

    while not heap.is_empty():
        u = heap.extract_min()
        if dist[u] == math.inf:
            continue
        for edge in graph.neighbors(u):
            v = edge.vertex
            candidate = dist[u] + edge.weight
            if v in heap and dist[v] > candidate:
                dist[v] = candidate
                parent[v] = u
                heap.decrease_key(v, candidate)

    tree = Graph(n)
    for v, p in enumerate(parent):
        if p is None:
            continue
        weight = next((e.weight for e in graph.neighbors(v) if e.vertex == p), None)
        if weight is not None:
            tree.add_edge(v, p, weight)
    return tree


def prim(graph: Graph, start: int) -> Graph:
    """Return the minimum spanning tree of the component holding ``start``."""
    _require_start(graph, start, "Prim")
    n = graph.vertex_count
    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[start] = 0

    heap = MinHeap(n)
    heap.insert(start, 0)
    while not heap.is_empty():
        u = heap.extract_min()
        in_tree[u] = True
        for edge in graph.neighbors(u):
            v, w = edge.vertex, edge.weight
            if not in_tree[v] and w < key[v]:
                key[v] = w
                parent[v] = u
                if v in heap:
                    heap.decrease_key(v, w)
                else:
                    heap.insert(v, w)

    mst = Graph(n)
    for v, p in enumerate(parent):
        if p is not None:
            mst.add_edge(v, p, key[v])
    return mst


@dataclass(frozen=True)
class _WeightedEdge:
    u: int
    v: int
    weight: int


def _selection_sorted(edges: list[_WeightedEdge]) -> list[_WeightedEdge]:
    """Order edges by weight, resolving ties as a swapping selection sort does."""
    items = list(edges)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=lambda j: items[j].weight)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest of ``graph``."""
    n = graph.vertex_count
    mst = Graph(n)
    sets = UnionFind(n)

    edges = [
        _WeightedEdge(u, edge.vertex, edge.weight)
        for u in range(n)
        for edge in graph.neighbors(u)
        if u < edge.vertex
    ]
    for edge in _selection_sorted(edges):
        if sets.find(edge.u) != sets.find(edge.v):
            mst.add_edge(edge.u, edge.v, edge.weight)
            sets.unite(edge.u, edge.v)
    return mst