"""A first-in, first-out queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from cityroutes.errors import Overflow, Underflow

T = TypeVar("T")


class BoundedQueue(Generic[T]):
    """FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def front(self) -> T:
        """Return the least recently inserted item without removing it."""
        if self.is_empty():
            raise Underflow("queue is empty")
        return self._items[0]

    def make_empty(self) -> None:
        self._items.clear()

    def dequeue(self) -> T:
        """Remove and return the least recently inserted item."""
        if self.is_empty():
            raise Underflow("queue is empty")
        return self._items.popleft()

    def enqueue(self, x: T) -> None:
        """Append ``x``; raise Overflow if the queue is full."""
        if self.is_full():
            raise Overflow("queue is full")
        self._items.append(x)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self._items)!r}, capacity={self._capacity})"