"""Indexed binary min-heap keyed by vertex, supporting decrease-key."""

from __future__ import annotations

from dataclasses import dataclass


class HeapError(RuntimeError):
    """Raised on heap overflow, underflow or a lookup of a missing vertex."""


@dataclass
class _Entry:
    vertex: int
    priority: int


class MinHeap:
    """Priority queue of vertices holding at most ``capacity`` entries."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._data: list[_Entry] = []
        self._positions: dict[int, int] = {}

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._positions

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        self._positions[data[i].vertex] = i
        self._positions[data[j].vertex] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._data[parent].priority > self._data[index].priority:
                self._swap(parent, index)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and self._data[left].priority < self._data[smallest].priority:
                smallest = left
            if right < size and self._data[right].priority < self._data[smallest].priority:
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest

    def insert(self, vertex: int, priority: int) -> None:
        """Add ``vertex`` with the given priority."""
        if len(self._data) >= self._capacity:
            raise HeapError("Heap overflow")
        self._data.append(_Entry(vertex, priority))
        self._positions[vertex] = len(self._data) - 1
        self._sift_up(len(self._data) - 1)

    def extract_min(self) -> int:
        """Remove and return the vertex with the smallest priority."""
        if not self._data:
            raise HeapError("Heap underflow")
        min_vertex = self._data[0].vertex
        last = self._data.pop()
        self._positions.pop(min_vertex, None)
        if self._data:
            self._data[0] = last
            self._positions[last.vertex] = 0
            self._sift_down(0)
        return min_vertex

    def decrease_key(self, vertex: int, new_priority: int) -> None:
        """Lower the priority of ``vertex``; ignored if absent or not lower."""
        index = self._positions.get(vertex)
        if index is None or self._data[index].priority <= new_priority:
            return
        self._data[index].priority = new_priority
        self._sift_up(index)

    def priority(self, vertex: int) -> int:
        """Return the current priority of ``vertex``."""
        index = self._positions.get(vertex)
        if index is None:
            raise HeapError("Vertex not found in heap")
        return self._data[index].priority