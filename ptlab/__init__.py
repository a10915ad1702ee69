"""Semaphores, bounded queues, a thread-safe bounded queue, an ordered event logger and demos."""

__version__ = "0.1.0"
__all__ = [
    "bounded_queue",
    "concurrent_queue",
    "demos",
    "logger",
    "semaphore",
]