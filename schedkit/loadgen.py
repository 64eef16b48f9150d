"""Synthetic workloads that keep the CPU or the I/O system busy for a while."""

from __future__ import annotations

import getopt
import os
import re
import sys
import time
from dataclasses import dataclass, field

_CPU_BATCH = 100_000
_IO_BLOCK = bytes(1000)
_SIGNED_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _default_name() -> str:
    return format(os.getpid(), "x")


@dataclass
class LoadOptions:
    """Options of a load generator: its run time and its name."""

    minutes: int = 1
    name: str = field(default_factory=_default_name)


def _atoi(text: str) -> int:
    match = _SIGNED_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_load_args(argv, program: str = "loadgen") -> LoadOptions:
    """Parse ``-m <minutes>`` and ``-n <name>``; raise ValueError otherwise."""
    try:
        opts, _ = getopt.getopt(list(argv), "m:n:")
    except getopt.GetoptError as exc:
        raise ValueError(
            f"illegal option: -{exc.opt}\n"
            f"usage: {program} [-m <minutes>] [-n <name>]"
        ) from None
    options = LoadOptions()
    for flag, value in opts:
        if flag == "-m":
            options.minutes = _atoi(value)
        else:
            options.name = value
    return options


def _deadline(minutes: float) -> float | None:
    seconds = 60 * minutes
    # A zero or negative run time never arms the timer: run until killed.
    return time.monotonic() + seconds if seconds > 0 else None


def _expired(deadline: float | None) -> bool:
    return deadline is not None and time.monotonic() >= deadline


def run_cpu_bound(minutes: float = 1) -> int:
    """Spin the processor for ``minutes``; return the number of spins made."""
    deadline = _deadline(minutes)
    spins = 0
    while True:
        for _ in range(_CPU_BATCH):
            pass
        spins += _CPU_BATCH
        if _expired(deadline):
            return spins


def run_io_bound(minutes: float = 1, number: int = 6_000_000) -> int:
    """Write batches of ``number`` blocks to the null device for ``minutes``.

    The time limit is checked after each batch; returns the batch count.
    """
    deadline = _deadline(minutes)
    batches = 0
    with open(os.devnull, "wb", buffering=0) as sink:
        while True:
            for _ in range(number):
                sink.write(_IO_BLOCK)
            batches += 1
            if _expired(deadline):
                return batches


def _main(argv, run) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    program = sys.argv[0] if sys.argv and sys.argv[0] else "loadgen"
    try:
        options = parse_load_args(args, program)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    run(options.minutes)
    return 0


def cpu_main(argv=None) -> int:
    """Command entry point for the processor-bound workload."""
    return _main(argv, run_cpu_bound)


def io_main(argv=None) -> int:
    """Command entry point for the I/O-bound workload."""
    return _main(argv, run_io_bound)