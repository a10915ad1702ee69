"""Small demonstration programs for the semaphore and queue classes."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections.abc import Callable, Sequence
from typing import TextIO, TypeVar

from ptlab.bounded_queue import BoundedQueue
from ptlab.concurrent_queue import ConcurrentBoundedQueue
from ptlab.semaphore import Semaphore

T = TypeVar("T")

ROUNDS = 10
DEMO_CAPACITY = 12
EXTRA_INDEX = 1000
SEPARATOR = "------------------------------"
VALUE_RANGE = 100


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def ping(n: int, s1: Semaphore, s2: Semaphore, out: TextIO | None = None) -> None:
    """Take ``s1``, write ``ping`` and hand the turn over through ``s2``, ``n`` times."""
    stream = _stream(out)
    for _ in range(n):
        s1.wait()
        stream.write("ping\n")
        s2.signal()


def pong(n: int, s1: Semaphore, s2: Semaphore, out: TextIO | None = None) -> None:
    """Take ``s2``, write an indented ``pong`` and hand the turn back through ``s1``."""
    stream = _stream(out)
    for _ in range(n):
        s2.wait()
        stream.write("\tpong\n")
        s1.signal()


def bulk_exchange(sem: Semaphore, out: TextIO | None = None) -> None:
    """Take five units at once, then give them back as three and two."""
    stream = _stream(out)
    sem.wait(5)
    stream.write("Me he llevado 5 de golpe\n")
    sem.signal(3)
    stream.write("Dejo 3\n")
    sem.signal(2)
    stream.write("Dejo 2 y me quedo en paz\n")


def _run_threads(*targets: Callable[[], None]) -> None:
    threads = [threading.Thread(target=target) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _play(s1: Semaphore, s2: Semaphore, out: TextIO) -> None:
    _run_threads(
        lambda: ping(ROUNDS, s1, s2, out),
        lambda: pong(ROUNDS, s1, s2, out),
    )


def semaphore_demo(out: TextIO | None = None) -> None:
    """Run the ping-pong phases and the multi-unit exchange."""
    stream = _stream(out)

    s1 = Semaphore(1)
    s2 = Semaphore()
    s2.set_init_value(0)
    _play(s1, s2, stream)
    stream.write("----------- Fin primera fase -----------\n")

    pair = [Semaphore(), Semaphore()]
    pair[0].set_init_value(1)
    pair[1].set_init_value(0)
    _play(pair[0], pair[1], stream)
    stream.write("----------- Fin segunda fase -----------\n")

    first, second = Semaphore(1), Semaphore(0)
    _play(first, second, stream)
    stream.write("----------- Fin tercera fase -----------\n")

    s_ext = Semaphore(9)
    _run_threads(lambda: bulk_exchange(s_ext, stream))
    stream.write("----------- Fin cuarta fase  -----------\n")


def bounded_queue_demo(items: Callable[[int], T], out: TextIO | None = None) -> BoundedQueue[T]:
    """Exercise a bounded queue, building each stored item with ``items(i)``.

    Returns the clone made at the end of the run.
    """
    stream = _stream(out)

    def show(queue: BoundedQueue[T]) -> None:
        stream.write(f"{queue}\n\n")

    queue: BoundedQueue[T] = BoundedQueue(DEMO_CAPACITY)
    for i in range(1, DEMO_CAPACITY + 1):
        queue.enqueue(items(i))
    show(queue)

    stream.write(f"nEl: {len(queue)}\n")
    stream.write(f"pri: {queue.first()}\n")

    stream.write(f"{SEPARATOR}\nDesencolando ...\n")
    queue.dequeue()
    show(queue)

    stream.write(f"{SEPARATOR}\nEncolando el {EXTRA_INDEX} ...\n")
    queue.enqueue(items(EXTRA_INDEX))
    show(queue)

    stream.write(f"{SEPARATOR}\nDesencolando todos menos dos ...\n")
    for _ in range(len(queue) - 2):
        queue.dequeue()
    show(queue)

    stream.write(f"{SEPARATOR}\nClonando ...\n")
    copy = queue.clone()
    show(copy)
    stream.write(f"{SEPARATOR}\n")
    return copy


def _verse(i: int) -> str:
    return f"verso_{i}"


def insert_items(queue: ConcurrentBoundedQueue[int], count: int,
                 rng: random.Random | None = None, max_delay: float = 0.1) -> list[int]:
    """Add ``count`` random values below 100, pausing after each in proportion to it."""
    rng = random.Random() if rng is None else rng
    inserted = []
    for _ in range(count):
        value = rng.randrange(VALUE_RANGE)
        queue.enqueue(value)
        inserted.append(value)
        time.sleep(max_delay * value / VALUE_RANGE)
    return inserted


def extract_items(queue: ConcurrentBoundedQueue[T], count: int,
                  rng: random.Random | None = None, max_delay: float = 0.1) -> list[T]:
    """Take ``count`` items from the front, pausing a random time after each."""
    rng = random.Random() if rng is None else rng
    extracted = []
    for _ in range(count):
        extracted.append(queue.pop_first())
        time.sleep(max_delay * rng.randrange(VALUE_RANGE) / VALUE_RANGE)
    return extracted


def producer_consumer_demo(capacity: int = 10, items: int = 9, workers: int = 5,
                           seed: int | None = None, max_delay: float = 0.1,
                           out: TextIO | None = None) -> ConcurrentBoundedQueue[int]:
    """Run ``workers`` producers of ``items`` values and as many consumers of one fewer.

    The queue left over is printed and returned.
    """
    if workers > capacity:
        raise ValueError(
            f"{workers} leftover items cannot fit in a queue of capacity {capacity}"
        )
    master = random.Random(seed)
    queue: ConcurrentBoundedQueue[int] = ConcurrentBoundedQueue(capacity)
    threads = []
    for _ in range(workers):
        producer_rng = random.Random(master.random())
        consumer_rng = random.Random(master.random())
        threads.append(threading.Thread(
            target=insert_items, args=(queue, items, producer_rng, max_delay)))
        threads.append(threading.Thread(
            target=extract_items, args=(queue, items - 1, consumer_rng, max_delay)))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    queue.print(out)
    return queue


def main(argv: Sequence[str] | None = None) -> int:
    """Run one or all of the demonstrations."""
    parser = argparse.ArgumentParser(prog="ptlab-demos", description=main.__doc__)
    parser.add_argument(
        "demo", nargs="?", default="all",
        choices=("all", "semaphores", "bounded-queue", "producer-consumer"),
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-delay", type=float, default=0.1)
    args = parser.parse_args(argv)

    if args.demo in ("all", "semaphores"):
        semaphore_demo()
    if args.demo in ("all", "bounded-queue"):
        bounded_queue_demo(int)
        bounded_queue_demo(_verse)
    if args.demo in ("all", "producer-consumer"):
        producer_consumer_demo(seed=args.seed, max_delay=args.max_delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())