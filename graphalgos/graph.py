"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO


class Color(Enum):
    """Visit state of a vertex during a traversal."""

    WHITE = 0
    GRAY = 1
    BLACK = 2


class GraphError(RuntimeError):
    """Raised on an invalid vertex or edge operation."""


@dataclass(frozen=True)
class Edge:
    """One entry of an adjacency list: the neighbour and the edge weight."""

    vertex: int
    weight: int


class Graph:
    """Graph on vertices ``0 .. vertices - 1``, edges kept in insertion order."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("Graph has no vertices")
        self._adj: list[list[Edge]] = [[] for _ in range(vertices)]

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        """Number of undirected edges, each counted once."""
        return sum(
            1 for i, edges in enumerate(self._adj) for e in edges if e.vertex > i
        )

    def is_valid_vertex(self, v: int) -> bool:
        return 0 <= v < len(self._adj)

    def _is_valid_edge(self, src: int, dst: int) -> bool:
        return self.is_valid_vertex(src) and self.is_valid_vertex(dst) and src != dst

    def has_edge(self, src: int, dst: int) -> bool:
        """True if ``dst`` appears in the adjacency list of ``src``."""
        if not self.is_valid_vertex(src):
            return False
        return any(e.vertex == dst for e in self._adj[src])

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge between ``src`` and ``dest``."""
        if not self._is_valid_edge(src, dest):
            raise GraphError("Invalid edge (either bad vertices or src==dest).")
        if self.has_edge(src, dest) or self.has_edge(dest, src):
            raise ValueError("Edge already exists!")
        self.add_directed_edge(src, dest, weight)
        self.add_directed_edge(dest, src, weight)

    def add_directed_edge(self, src: int, dest: int, weight: int) -> None:
        """Append a one-way edge ``src -> dest``."""
        if not self.is_valid_vertex(src):
            raise GraphError("Invalid vertex index!")
        self._adj[src].append(Edge(dest, weight))

    def _remove_one(self, src: int, dest: int) -> bool:
        edges = self._adj[src]
        for pos, edge in enumerate(edges):
            if edge.vertex == dest:
                del edges[pos]
                return True
        return False

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the undirected edge between ``src`` and ``dest``."""
        if not self.is_valid_vertex(src) or not self.is_valid_vertex(dest):
            raise GraphError("Invalid vertex index!")
        found_src = self._remove_one(src, dest)
        found_dest = self._remove_one(dest, src)
        if not (found_src and found_dest):
            raise GraphError("Edge not found!")

    def adj_size(self, v: int) -> int:
        """Number of neighbours of ``v``."""
        if not self.is_valid_vertex(v):
            raise GraphError("Invalid vertex index in adj_size.")
        return len(self._adj[v])

    def neighbors(self, v: int) -> tuple[Edge, ...]:
        """The adjacency list of ``v`` in insertion order."""
        if not self.is_valid_vertex(v):
            raise GraphError("Invalid vertex index in neighbors.")
        return tuple(self._adj[v])

    def has_negative_edge(self) -> bool:
        return any(e.weight < 0 for edges in self._adj for e in edges)

    def format(self) -> str:
        """Render the adjacency lists, one vertex per line."""
        return "".join(
            f"{i}: " + "".join(f"({e.vertex}, w={e.weight}) " for e in edges) + "\n"
            for i, edges in enumerate(self._adj)
        )

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write the adjacency lists to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format())