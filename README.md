# schedkit

Tools for running a batch of commands under user-space scheduling, plus the
small building blocks they rest on.

Everything that starts, stops or signals processes needs a POSIX system; the
memory report of the scheduler reads `/proc/<pid>/statm`, so it needs Linux.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Workload files

A workload is plain text with one command per line. Words are separated by
blanks or tabs; a word may be wrapped in single or double quotes to keep
blanks inside it. The first word is the program, found on `PATH`. Blank
lines are skipped.

```
schedkit-cpubound -m 1
schedkit-iobound -m 1
ls -l /tmp
```

The workload is read from the file named on the command line, or from
standard input when no file is given. A file that cannot be opened ends the
command with "File cannot be opened" and a usage line, exit status 1.

## The quantum

Every launcher needs a time quantum in milliseconds. It comes from
`-q <msec>` on the command line or, failing that, from the
`USPS_QUANTUM_MSEC` environment variable. Without either, the command stops
with "Quantum undefined" and exit status 1. The second command-line argument
is always read as the quantum's value, never as a file name.

## Commands

### Load generators

```
schedkit-cpubound [-m <minutes>] [-n <name>]
schedkit-iobound  [-m <minutes>] [-n <name>]
```

Both keep busy for the given number of minutes (default 1): the first by
spinning in a loop, the second by writing 1000-byte blocks to the null
device in batches. The time limit is checked between batches, so a run may
last somewhat longer than asked. A zero or negative number of minutes runs
until the process is killed. `-n` is accepted and names the run (by default
the process id in hexadecimal); it does not change what the run does. An
unknown option prints an error and a usage line and exits with status 1.

### Launching a workload

```
schedkit-launch [-q <msec>] [workload_file]
```

Starts every command of the workload at once and waits for all of them to
finish. The quantum must be present but is otherwise not used.

```
schedkit-launch-sync [-q <msec>] [workload_file]
```

Forks every command held back, then releases them together with `SIGUSR1`,
stops them all with `SIGSTOP`, resumes them all with `SIGCONT` and waits for
them to finish.

### Round-robin scheduling

```
schedkit-schedule [-q <msec>] [workload_file]
```

Runs the workload under a round-robin scheduler. The quantum's leading digits
are read as a number of milliseconds, which must lie between 20 and 2000,
otherwise the command stops with "Unreasonable quantum". It is rounded to a
whole number of 20 ms ticks. Only one command runs at a time; when its
quantum runs out it is stopped and put at the back of the queue, and the next
live command is started (with `SIGUSR1`) or resumed (with `SIGCONT`). At most
100 commands can be scheduled. The command returns when every command has
exited.

```
schedkit-schedule-stats [-q <msec>] [workload_file]
```

The same scheduler, but each time a command is preempted it prints
`PID: <pid> Statm: ` followed by the contents of its `/proc/<pid>/statm`.

## Library

The same pieces can be used from Python.

- `schedkit.text`: line reading and the quote-aware word splitting used for
  workload lines (`read_lines`, `next_word`, `split_words`), and small
  helpers (`parse_leading_int`, `format_int`, `pad`, `prefix_equal`,
  `format_error`).
- `schedkit.loadgen`: `LoadOptions`, `parse_load_args`, `run_cpu_bound` and
  `run_io_bound`.
- `schedkit.launcher`: `Options`, `UsageError`, `parse_command_line`,
  `read_workload`, `launch_all` and `launch_synchronized`; the launch
  functions return the exit codes of the commands in order.
- `schedkit.scheduler`: `quantum_ticks`, `QuantumError`, `read_statm`,
  `ProcessControlBlock` and `RoundRobinScheduler`. The scheduler can be
  driven tick by tick with `start`, `tick` and `reap`, or left to `run`,
  which sleeps 20 ms between ticks, reaps finished children and returns their
  exit codes. An optional `report` callable receives the pid of each
  preempted process.
- `schedkit.packets`: `PacketDescriptor` (a destination and a pid between 0
  and `MAX_PID`, cleared by `reset`), `FreePacketDescriptorStore`, a
  thread-safe pool with blocking `get`/`put` and non-blocking
  `try_get`/`try_put`, and `create_free_packet_descriptors` to fill a store.
- Containers: `ArrayQueue`, `ArrayStack`, `ArrayDeque`, `ArrayList` and
  `HeapPrioQueue` (ordered by a `cmp` function, equal priorities leaving in
  first-in, first-out order). Each takes a `free_value` callable, by default
  `schedkit.adt.do_nothing`, that is called on the elements it lets go of on
  `clear` (and for `ArrayList` also on `remove` and `set`). Taking from an
  empty container raises `IndexError`. All iterate in their natural order
  (a stack from top to bottom, a priority queue in removal order) over a
  snapshot made by `SnapshotIterator`.

```python
from schedkit.text import split_words
from schedkit.prioqueue import HeapPrioQueue

split_words("grep 'two words' file.txt")   # ['grep', 'two words', 'file.txt']

pq = HeapPrioQueue(lambda a, b: a - b)
pq.insert(2, "later")
pq.insert(1, "first")
pq.insert(2, "last")
pq.to_list()        # ['first', 'later', 'last']
pq.remove_min()     # (1, 'first')
```

## What it does not do

The package has packet descriptors and a store of free ones, but no packet
driver: nothing moves packets between applications and a network device,
there is no network device interface, and there are no per-application
receive buffers or general bounded buffer type.