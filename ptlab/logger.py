"""Buffered event log that serves concurrent writers in strict arrival order."""

from __future__ import annotations

import itertools
import threading
import time
from pathlib import Path
from typing import TextIO


class Logger:
    """Collects event lines and writes them to a CSV log file.

    Every call to :meth:`add_message` draws a ticket on arrival, and the
    calls are served in ticket order, so events reach the log first come,
    first served. Lines are buffered in memory and appended to the file
    whenever the buffer fills up and when the logger is closed.
    """

    HEADER = "threadID,sectionID,event,val,ts,ticket"
    MAX_MESSAGES = 4096
    SEPARATOR = ","

    def __init__(self, path, echo: TextIO | None = None):
        self._path = Path(path)
        self._echo = echo
        self._main_id = f"id_{threading.get_ident()}"
        self._buffer: list[str] = []
        self._tickets = itertools.count(1)
        self._ticket_lock = threading.Lock()
        self._turn = threading.Condition()
        self._next = 1
        self._closed = False
        with self._path.open("w", encoding="utf-8") as log_file:
            log_file.write(self.HEADER + "\n")

    @property
    def path(self) -> Path:
        """The file the log is written to."""
        return self._path

    def add_message(self, message: str) -> None:
        """Add one or more ';'-separated events to the log."""
        with self._ticket_lock:
            ticket = next(self._tickets)
        timestamp = time.time_ns()

        with self._turn:
            self._turn.wait_for(lambda: self._next == ticket)
            try:
                if len(self._buffer) >= self.MAX_MESSAGES:
                    self._flush()
                for event in _split_events(message):
                    line = self.SEPARATOR.join(
                        (self._main_id, event, str(timestamp), str(ticket))
                    )
                    self._buffer.append(line)
                    if self._echo is not None:
                        self._echo.write(line + "\n")
            finally:
                self._next += 1
                self._turn.notify_all()

    def save(self) -> None:
        """Append the buffered lines to the log file and empty the buffer."""
        with self._turn:
            self._flush()

    def close(self) -> None:
        """Write any pending lines; further calls do nothing."""
        with self._turn:
            if self._closed:
                return
            self._flush()
            self._closed = True

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _flush(self) -> None:
        if not self._buffer:
            return
        with self._path.open("a", encoding="utf-8") as log_file:
            log_file.writelines(line + "\n" for line in self._buffer)
        self._buffer.clear()


def _split_events(message: str) -> list[str]:
    """Split on ';' the way a line reader does: a trailing empty part is dropped."""
    parts = message.split(";")
    if parts and parts[-1] == "":
        parts.pop()
    return parts