"""A bounded FIFO queue that many threads can share safely."""

from __future__ import annotations

import sys
import threading
from typing import Generic, TextIO, TypeVar

from ptlab.bounded_queue import BoundedQueue
from ptlab.logger import Logger

T = TypeVar("T")


class ConcurrentBoundedQueue(Generic[T]):
    """A bounded queue guarded as a monitor.

    Adding to a full queue blocks until there is room; reading from an
    empty one blocks until an item arrives. When a :class:`Logger` is
    given, each operation records ``name,BEGIN_FUNC_PROC,length`` and
    ``name,END_FUNC_PROC,length`` events.
    """

    def __init__(self, capacity: int, logger: Logger | None = None):
        self._queue: BoundedQueue[T] = BoundedQueue(capacity)
        self._capacity = capacity
        self._logger = logger
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        """The largest number of items the queue can hold."""
        with self._cond:
            self._log("size", "BEGIN_FUNC_PROC")
            self._log("size", "END_FUNC_PROC")
            return self._capacity

    def clear(self) -> None:
        """Remove every item and wake any blocked producers."""
        with self._cond:
            self._queue.clear()
            self._cond.notify_all()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back, waiting for room if the queue is full."""
        with self._cond:
            self._log("enqueue", "BEGIN_FUNC_PROC")
            self._cond.wait_for(lambda: len(self._queue) < self._capacity)
            self._queue.enqueue(item)
            self._log("enqueue", "END_FUNC_PROC")
            self._cond.notify_all()

    def dequeue(self) -> T:
        """Remove and return the oldest item, waiting for one if needed."""
        return self._take("dequeue", remove=True)

    def first(self) -> T:
        """Return the oldest item without removing it, waiting for one if needed."""
        return self._take("first", remove=False)

    def pop_first(self) -> T:
        """Return the oldest item and remove it, waiting for one if needed."""
        return self._take("firstR", remove=True)

    def print(self, file: TextIO | None = None) -> None:
        """Write the items, comma separated, followed by a newline."""
        out = sys.stdout if file is None else file
        with self._cond:
            self._log("print", "BEGIN_FUNC_PROC")
            out.write(f"{self._queue}\n")
            self._log("print", "END_FUNC_PROC")

    def __len__(self) -> int:
        with self._cond:
            self._log("length", "BEGIN_FUNC_PROC")
            self._log("length", "END_FUNC_PROC")
            return len(self._queue)

    def __str__(self) -> str:
        with self._cond:
            return str(self._queue)

    def _take(self, name: str, remove: bool) -> T:
        with self._cond:
            self._log(name, "BEGIN_FUNC_PROC")
            self._cond.wait_for(lambda: len(self._queue) > 0)
            item = self._queue.dequeue() if remove else self._queue.first()
            self._log(name, "END_FUNC_PROC")
            if remove:
                self._cond.notify_all()
            return item

    def _log(self, name: str, phase: str) -> None:
        if self._logger is not None:
            self._logger.add_message(f"{name},{phase},{len(self._queue)}")