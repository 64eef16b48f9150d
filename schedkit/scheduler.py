"""Round-robin scheduling of workload commands with a fixed time quantum."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import IO, Callable, Iterable

from .launcher import EXEC_FAILED, UsageError, parse_command_line, read_workload
from .text import format_error, parse_leading_int

MAX_PCB = 100
MAX_Q = 2000
MIN_Q = 20
MS_PER_TICK = 20
USAGE = "USAGE: ./uspsv3 [-q <quantum in msec>] [workload_file]\n"


class QuantumError(ValueError):
    """The requested quantum lies outside the accepted range."""


def quantum_ticks(quantum_ms: int) -> int:
    """Return how many timer ticks make up a quantum of ``quantum_ms``.

    The quantum must lie between MIN_Q and MAX_Q milliseconds; it is rounded
    to a whole number of MS_PER_TICK ticks.
    """
    if not MIN_Q <= quantum_ms <= MAX_Q:
        raise QuantumError("Unreasonable quantum\n")
    rounded = MS_PER_TICK * ((quantum_ms + 1) // MS_PER_TICK)
    return rounded // MS_PER_TICK


def read_statm(pid: int) -> str:
    """Return the memory statistics line of process ``pid``, or "" if unreadable."""
    try:
        with open(f"/proc/{pid}/statm") as statm:
            return statm.read()
    except OSError:
        return ""


@dataclass(eq=False)
class ProcessControlBlock:
    """Bookkeeping for one scheduled command."""

    command: list[str]
    pid: int = 0
    ticks: int = 0
    alive: bool = False
    awaiting_start: bool = True
    exit_code: int | None = None


def _exec_when_released(command: list[str], mask) -> None:
    try:
        signal.sigwait({signal.SIGUSR1})
        signal.pthread_sigmask(signal.SIG_SETMASK, mask)
        os.execvp(command[0], command)
    except BaseException:
        pass
    os._exit(EXEC_FAILED)


class RoundRobinScheduler:
    """Run commands one at a time, each for a quantum of ``ticks`` ticks.

    ``report``, if given, is called with the pid of every process whose
    quantum has just run out and which has been stopped.
    """

    def __init__(
        self,
        commands: Iterable[list[str]],
        ticks: int,
        report: Callable[[int], object] | None = None,
    ):
        self.processes = [ProcessControlBlock(list(command)) for command in commands]
        if len(self.processes) > MAX_PCB:
            raise ValueError(f"at most {MAX_PCB} commands can be scheduled")
        if ticks < 1:
            raise ValueError("a quantum must last at least one tick")
        self.ticks = ticks
        self.report = report
        self.current: ProcessControlBlock | None = None
        self.active = 0
        self._ready: deque[ProcessControlBlock] = deque()
        self._started = False

    def start(self) -> None:
        """Fork every command, each held back until it is first scheduled."""
        if self._started:
            raise RuntimeError("scheduler already started")
        self._started = True
        old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
        try:
            for pcb in self.processes:
                pid = os.fork()
                if pid == 0:
                    _exec_when_released(pcb.command, old_mask)
                pcb.pid = pid
                pcb.alive = True
                pcb.awaiting_start = True
                self._ready.append(pcb)
                self.active += 1
        except OSError:
            self._kill_all()
            raise
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)

    def tick(self) -> None:
        """Account one timer tick, switching processes when the quantum expires."""
        current = self.current
        if current is not None:
            if current.alive:
                current.ticks -= 1
                if current.ticks > 0:
                    return
                os.kill(current.pid, signal.SIGSTOP)
                if self.report is not None:
                    self.report(current.pid)
                self._ready.append(current)
            self.current = None

        while self._ready:
            candidate = self._ready.popleft()
            if not candidate.alive:
                continue
            candidate.ticks = self.ticks
            if candidate.awaiting_start:
                candidate.awaiting_start = False
                os.kill(candidate.pid, signal.SIGUSR1)
            else:
                os.kill(candidate.pid, signal.SIGCONT)
            self.current = candidate
            return

    def reap(self) -> list[int]:
        """Collect children that have finished; return their pids."""
        reaped = []
        for pcb in self.processes:
            if not pcb.alive:
                continue
            try:
                pid, status = os.waitpid(pcb.pid, os.WNOHANG)
            except ChildProcessError:
                pcb.alive = False
                self.active -= 1
                reaped.append(pcb.pid)
                continue
            if pid == 0:
                continue
            pcb.alive = False
            pcb.exit_code = os.waitstatus_to_exitcode(status)
            self.active -= 1
            reaped.append(pcb.pid)
        return reaped

    def run(self) -> list[int | None]:
        """Schedule every command to completion; return their exit codes in order."""
        if not self._started:
            self.start()
        try:
            self.tick()
            while self.active > 0:
                time.sleep(MS_PER_TICK / 1000)
                self.reap()
                self.tick()
        except BaseException:
            self._kill_all()
            raise
        return [pcb.exit_code for pcb in self.processes]

    def _kill_all(self) -> None:
        for pcb in self.processes:
            if not pcb.alive:
                continue
            with contextlib.suppress(ProcessLookupError):
                os.kill(pcb.pid, signal.SIGKILL)
            with contextlib.suppress(ChildProcessError):
                _, status = os.waitpid(pcb.pid, 0)
                pcb.exit_code = os.waitstatus_to_exitcode(status)
            pcb.alive = False
            self.active -= 1
        self.current = None


def _print_statm(pid: int) -> None:
    sys.stdout.write(f"PID: {pid} Statm: {read_statm(pid)}")
    sys.stdout.flush()


def _run(argv, report) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    options = parse_command_line(args, os.environ)
    try:
        quantum = options.require_quantum()
        ticks = quantum_ticks(parse_leading_int(quantum))
    except (UsageError, QuantumError) as exc:
        sys.stderr.write(format_error(str(exc), 0))
        return 1

    with contextlib.ExitStack() as stack:
        stream: IO[str] = sys.stdin
        if options.filename is not None:
            try:
                stream = stack.enter_context(open(options.filename))
            except OSError as exc:
                sys.stderr.write(format_error("File cannot be opened\n", exc.errno or 0))
                sys.stderr.write(format_error(USAGE, exc.errno or 0))
                return 1
        commands = list(read_workload(stream))

    try:
        scheduler = RoundRobinScheduler(commands, ticks, report)
    except ValueError as exc:
        sys.stderr.write(format_error(f"{exc}\n", 0))
        return 1
    try:
        scheduler.run()
    except OSError as exc:
        sys.stderr.write(format_error("FORK FAILED\n", exc.errno or 0))
        return 1
    return 0


def main(argv=None) -> int:
    """Schedule the workload's commands round-robin."""
    return _run(argv, None)


def stats_main(argv=None) -> int:
    """Schedule round-robin, printing memory statistics at each switch."""
    return _run(argv, _print_statm)