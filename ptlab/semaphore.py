"""Counting semaphore with multi-unit wait and signal and optional event logging."""

from __future__ import annotations

import threading

from ptlab.logger import Logger

NO_INFO = "NO_INFO"


class SemaphoreError(Exception):
    """Raised when a semaphore is used against its preconditions."""


class Semaphore:
    """A counting semaphore.

    Created with a non-negative ``value`` it is ready to use; created
    without one it must be given its value once with :meth:`set_init_value`.
    When a :class:`Logger` is supplied, every wait and signal records an
    ``info,WAIT,count`` or ``info,SIGNAL,count`` event.
    """

    def __init__(self, value: int | None = None, info: str = NO_INFO,
                 logger: Logger | None = None):
        self._cond = threading.Condition()
        self._logger = logger
        self.info = info
        self._count = 0
        self._initialized = False
        if value is not None:
            if value < 0:
                raise SemaphoreError(f"initial value must be non-negative, got {value}")
            self._count = value
            self._initialized = True

    def set_init_value(self, n: int, info: str = NO_INFO) -> None:
        """Give an uninitialised semaphore its starting value."""
        with self._cond:
            if self._initialized:
                raise SemaphoreError("semaphore is already initialised")
            if n < 0:
                raise SemaphoreError(f"initial value must be non-negative, got {n}")
            self._count = n
            self.info = info
            self._initialized = True

    def signal(self, n: int = 1) -> None:
        """Add ``n`` units and wake the waiters."""
        with self._cond:
            self._check(n)
            self._count += n
            self._cond.notify_all()
            self._log("SIGNAL")

    def wait(self, n: int = 1) -> None:
        """Block until ``n`` units are available, then take them."""
        with self._cond:
            self._check(n)
            self._cond.wait_for(lambda: self._count >= n)
            self._count -= n
            self._log("WAIT")

    @property
    def value(self) -> int:
        """The current count."""
        with self._cond:
            return self._count

    @property
    def initialized(self) -> bool:
        """Whether the semaphore has been given a value."""
        return self._initialized

    def _check(self, n: int) -> None:
        if not self._initialized:
            raise SemaphoreError("semaphore used before being initialised")
        if n <= 0:
            raise SemaphoreError(f"amount must be positive, got {n}")

    def _log(self, event: str) -> None:
        if self._logger is not None:
            self._logger.add_message(f"{self.info},{event},{self._count}")