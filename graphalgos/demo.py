"""Command that runs every algorithm on a few sample graphs and prints the trees."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .algorithms import bfs, dfs, dijkstra, kruskal, prim
from .graph import Graph


def _build(vertices: int, edges: Sequence[tuple[int, int, int]]) -> Graph:
    graph = Graph(vertices)
    for src, dst, weight in edges:
        graph.add_edge(src, dst, weight)
    return graph


def _show(title: str, graph: Graph) -> None:
    print(f"\n== {title} ==")
    graph.print_graph()


def _run_all(graph: Graph, starts: tuple[int, int]) -> None:
    for name, algorithm in (("BFS", bfs), ("DFS", dfs), ("Dijkstra", dijkstra)):
        for start in starts:
            _show(f"{name} from vertex {start}", algorithm(graph, start))
    _show("Prim (MST)", prim(graph, 0))
    _show("Kruskal (MST)", kruskal(graph))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graphs and the trees each algorithm builds from them."""
    parser = argparse.ArgumentParser(
        description="Run BFS, DFS, Dijkstra, Prim and Kruskal on sample graphs."
    )
    parser.parse_args(argv)

    print("\n== Example 1 ==")
    g1 = _build(
        6,
        [(0, 1, 0), (0, 2, 0), (1, 2, 0), (1, 3, 0), (2, 3, 0), (3, 4, 0), (4, 5, 0)],
    )
    print("\nOriginal Graph:")
    g1.print_graph()
    _run_all(g1, (0, 2))

    print("\n== Example 2 ==")
    g2 = _build(
        8,
        [
            (0, 1, 1),
            (0, 2, 1),
            (1, 2, 2),
            (1, 3, 3),
            (2, 3, 2),
            (3, 4, 5),
            (4, 5, 4),
            (5, 6, 3),
            (6, 7, 2),
        ],
    )
    print("\nOriginal Graph:")
    g2.print_graph()
    _run_all(g2, (0, 4))

    print("\n== Example 3 ==")
    print("\nRemoving edge (3,4):")
    g2.remove_edge(3, 4)
    _show("Printing the new g2 (unconnected graph)", g2)
    _run_all(g2, (0, 4))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())