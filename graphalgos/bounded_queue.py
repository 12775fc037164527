"""A first-in, first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque


class QueueOverflowError(RuntimeError):
    """Raised when a value is added to a full queue."""


class QueueUnderflowError(RuntimeError):
    """Raised when a value is taken from an empty queue."""


class BoundedQueue:
    """FIFO queue of integers that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Queue capacity must not be negative")
        self._capacity = capacity
        self._items: deque[int] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear of the queue."""
        if len(self._items) >= self._capacity:
            raise QueueOverflowError("Queue overflow")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise QueueUnderflowError("Queue underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)