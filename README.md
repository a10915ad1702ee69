# ptlab

Concurrency building blocks for multithreaded work: a counting semaphore
with multi-unit `wait` and `signal`, a bounded FIFO queue, a bounded queue
that many threads can share, and a logger that writes events to a CSV file
in strict arrival order. A few demonstration programs show them in use.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite with
`pytest`.

## Demos

```
ptlab-demos [all | semaphores | bounded-queue | producer-consumer] [--seed N] [--max-delay SECONDS]
```

- `semaphores` runs ping/pong exchanges between two threads over pairs of
  semaphores, then takes five units from a semaphore at once and gives
  them back as three and two.
- `bounded-queue` walks a queue of capacity 12 through filling, removing,
  adding, draining to two items and cloning, once with integers and once
  with strings.
- `producer-consumer` starts 5 producers that each add 9 random values
  below 100 and 5 consumers that each take 8, over a shared queue of
  capacity 10, then prints what is left. `--seed` makes the values
  repeatable; `--max-delay` (default 0.1) scales the pauses between
  operations.

With no argument all three are run.

## Library use

```python
from ptlab.semaphore import Semaphore
from ptlab.bounded_queue import BoundedQueue
from ptlab.concurrent_queue import ConcurrentBoundedQueue
from ptlab.logger import Logger

sem = Semaphore(1)
sem.wait()
sem.signal()

later = Semaphore()          # no value yet
later.set_init_value(3, "later")
later.wait(2)                # takes two units at once
print(later.value)           # 1

queue = BoundedQueue(3)
queue.enqueue("a")
queue.enqueue("b")
print(queue.first(), len(queue))   # a 2
print(queue.dequeue())             # a

shared = ConcurrentBoundedQueue(10)
shared.enqueue(42)
print(shared.pop_first())          # 42, blocks while the queue is empty

with Logger("events.log") as log:
    log.add_message("worker,BEGIN_FUNC_PROC,0;worker,END_FUNC_PROC,0")
```

### `ptlab.semaphore`

`Semaphore(value=None, info="NO_INFO", logger=None)`. Without a value the
semaphore must be given one with `set_init_value(n, info)` before use.
`wait(n=1)` blocks until `n` units are available; `signal(n=1)` adds `n`
units. `value` and `initialized` report the state. A negative initial
value, a second initialisation, use before initialisation or a
non-positive amount raise `SemaphoreError`. With a `Logger`, every wait
and signal records an `info,WAIT,count` or `info,SIGNAL,count` event.

### `ptlab.bounded_queue`

`BoundedQueue(capacity)` holds at most `capacity` items (a capacity below
1 raises `ValueError`). It offers `enqueue`, `dequeue` (returns the item),
`first`, `clear`, `clone`, `capacity`, `len()`, iteration from oldest to
newest, and `str()` giving the items separated by commas. Adding to a full
queue raises `QueueFullError`; reading from an empty one raises
`QueueEmptyError`.

### `ptlab.concurrent_queue`

`ConcurrentBoundedQueue(capacity, logger=None)` has the same operations,
guarded by a monitor: `enqueue` waits for room, `dequeue`, `first` and
`pop_first` wait for an item. `print(file=None)` writes the items and a
newline. With a `Logger`, operations record `name,BEGIN_FUNC_PROC,length`
and `name,END_FUNC_PROC,length` events.

### `ptlab.logger`

`Logger(path, echo=None)` creates (or empties) the file and writes the
header `threadID,sectionID,event,val,ts,ticket`. `add_message` splits its
argument on `;` and records each part as a line
`id_<thread>,<event>,<timestamp in ns>,<ticket>`; calls are served in the
order they arrived. Lines are buffered (up to 4096) and appended to the
file when the buffer fills, on `save()` and on `close()` or leaving a
`with` block. If `echo` is a text stream, each line is also written there.

## What this package does not do

It contains no renderer: there is no ray or path tracing, no scene
description and no image output, and no command other than `ptlab-demos`.