"""A FIFO queue with a fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when an item is added to a queue that is already full."""


class QueueEmptyError(Exception):
    """Raised when an item is read or removed from an empty queue."""


class BoundedQueue(Generic[T]):
    """A first-in first-out queue that holds at most ``capacity`` items.

    Iteration goes from the oldest item to the newest one.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        """The largest number of items the queue can hold."""
        return self._capacity

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back of the queue."""
        if len(self._items) >= self._capacity:
            raise QueueFullError(f"queue is full ({self._capacity} items)")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove the oldest item and return it."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.popleft()

    def first(self) -> T:
        """Return the oldest item without removing it."""
        if not self._items:
            raise QueueEmptyError("first of an empty queue")
        return self._items[0]

    def clone(self) -> BoundedQueue[T]:
        """Return an independent queue with the same capacity and items."""
        copy: BoundedQueue[T] = BoundedQueue(self._capacity)
        copy._items.extend(self._items)
        return copy

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __str__(self) -> str:
        return ",".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self._capacity}, items=[{self}])"