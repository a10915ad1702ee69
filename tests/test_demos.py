import io
import random
import threading

import pytest

from ptlab.concurrent_queue import ConcurrentBoundedQueue
from ptlab.demos import (
    bounded_queue_demo,
    bulk_exchange,
    extract_items,
    insert_items,
    main,
    ping,
    pong,
    producer_consumer_demo,
    semaphore_demo,
)
from ptlab.semaphore import Semaphore


def test_ping_pong_alternate():
    out = io.StringIO()
    s1, s2 = Semaphore(1), Semaphore(0)
    threads = [
        threading.Thread(target=ping, args=(4, s1, s2, out)),
        threading.Thread(target=pong, args=(4, s1, s2, out)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert out.getvalue().splitlines() == ["ping", "\tpong"] * 4
    assert s1.value == 1
    assert s2.value == 0


def test_bulk_exchange_restores_count():
    out = io.StringIO()
    sem = Semaphore(9)
    bulk_exchange(sem, out)
    assert sem.value == 9
    assert out.getvalue().splitlines() == [
        "Me he llevado 5 de golpe",
        "Dejo 3",
        "Dejo 2 y me quedo en paz",
    ]


def test_semaphore_demo_output():
    out = io.StringIO()
    semaphore_demo(out)
    lines = out.getvalue().splitlines()
    assert lines.count("ping") == 30
    assert lines.count("\tpong") == 30
    assert lines[:2] == ["ping", "\tpong"]
    assert "----------- Fin primera fase -----------" in lines
    assert lines[-1] == "----------- Fin cuarta fase  -----------"
    assert lines[-4] == "Me he llevado 5 de golpe"


def test_bounded_queue_demo_ints():
    out = io.StringIO()
    copy = bounded_queue_demo(int, out)
    assert list(copy) == [12, 1000]
    text = out.getvalue()
    assert "nEl: 12\n" in text
    assert "pri: 1\n" in text
    assert "Clonando ...\n12,1000\n" in text


def test_bounded_queue_demo_strings():
    out = io.StringIO()
    copy = bounded_queue_demo(lambda i: f"verso_{i}", out)
    assert list(copy) == ["verso_12", "verso_1000"]
    assert copy.capacity == 12
    assert "pri: verso_1\n" in out.getvalue()


def test_insert_items_values_in_range():
    queue = ConcurrentBoundedQueue(5)
    inserted = insert_items(queue, 5, random.Random(7), 0)
    assert len(inserted) == 5
    assert all(0 <= v < 100 for v in inserted)
    assert str(queue) == ",".join(str(v) for v in inserted)


def test_extract_items_fifo():
    queue = ConcurrentBoundedQueue(4)
    for item in ("a", "b", "c"):
        queue.enqueue(item)
    assert extract_items(queue, 2, random.Random(1), 0) == ["a", "b"]
    assert len(queue) == 1


def test_producer_consumer_leaves_one_per_worker():
    out = io.StringIO()
    queue = producer_consumer_demo(10, 9, 5, seed=3, max_delay=0, out=out)
    assert len(queue) == 5
    printed = out.getvalue().strip().split(",")
    assert len(printed) == 5
    assert all(0 <= int(v) < 100 for v in printed)


def test_producer_consumer_rejects_too_many_workers():
    with pytest.raises(ValueError):
        producer_consumer_demo(capacity=2, items=3, workers=3, max_delay=0)


def test_main_bounded_queue(capsys):
    assert main(["bounded-queue"]) == 0
    out = capsys.readouterr().out
    assert "verso_12,verso_1000" in out
    assert out.count("Clonando ...") == 2


def test_main_producer_consumer(capsys):
    assert main(["producer-consumer", "--seed", "2", "--max-delay", "0"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out.split(",")) == 5