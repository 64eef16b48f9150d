"""Launch the commands of a workload file, at once or behind a start signal."""

from __future__ import annotations

import contextlib
import errno
import os
import signal
import subprocess
import sys
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Mapping

from .text import format_error, prefix_equal, read_lines, split_words

QUANTUM_VARIABLE = "USPS_QUANTUM_MSEC"
USAGE = "USAGE: ./uspsv1 [-q <quantum in msec>] [workload_file]\n"
EXEC_FAILED = 127

_EXEC_ERRNOS = {errno.ENOENT, errno.EACCES, errno.ENOEXEC, errno.ENOTDIR, errno.ELOOP}


class UsageError(Exception):
    """The command line lacks something the launcher needs."""


@dataclass
class Options:
    """Quantum (in milliseconds, as given) and workload file name."""

    quantum: str | None = None
    filename: str | None = None

    def require_quantum(self) -> str:
        """Return the quantum, raising UsageError when none was given."""
        if self.quantum is None:
            raise UsageError("Quantum undefined\n")
        return self.quantum


def parse_command_line(argv, environ: Mapping[str, str] | None = None) -> Options:
    """Read ``[-q <quantum>] [workload_file]`` from the arguments.

    The quantum defaults to the environment variable; the second argument is
    always taken as the quantum's value and never as a file name.
    """
    env = os.environ if environ is None else environ
    args = list(argv)
    argc = len(args) + 1
    options = Options(quantum=env.get(QUANTUM_VARIABLE))
    for position, arg in enumerate(args, start=1):
        if prefix_equal(arg, "-q", 2) and argc >= 3:
            options.quantum = args[position] if position < len(args) else None
        elif position != 2:
            options.filename = arg
    return options


def read_workload(stream: IO[str]) -> Iterator[list[str]]:
    """Yield the argument list of each non-blank line of a workload."""
    for line in read_lines(stream):
        if line.endswith("\n"):
            line = line[:-1]
        if words := split_words(line):
            yield words


def launch_all(commands: Iterable[list[str]]) -> list[int]:
    """Start every command at once, then wait for all of them.

    Returns their exit codes in order; a command that cannot be executed
    counts as EXEC_FAILED and a signalled one as minus the signal number.
    """
    children: list[subprocess.Popen | None] = []
    for command in commands:
        try:
            children.append(subprocess.Popen(command))
        except OSError as exc:
            if exc.errno not in _EXEC_ERRNOS:
                for child in filter(None, children):
                    child.wait()
                raise
            children.append(None)
    return [EXEC_FAILED if child is None else child.wait() for child in children]


def _await_start_then_exec(command: list[str], mask) -> None:
    try:
        signal.sigwait({signal.SIGUSR1})
        signal.pthread_sigmask(signal.SIG_SETMASK, mask)
        os.execvp(command[0], command)
    except BaseException:
        pass
    os._exit(EXEC_FAILED)


def launch_synchronized(commands: Iterable[list[str]]) -> list[int]:
    """Fork every command held back until all exist, then release them.

    The children are sent SIGUSR1 to start, then stopped and continued
    together; returns their exit codes in order.
    """
    commands = [list(command) for command in commands]
    old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
    pids: list[int] = []
    try:
        for command in commands:
            pid = os.fork()
            if pid == 0:
                _await_start_then_exec(command, old_mask)
            pids.append(pid)
    except OSError:
        for pid in pids:
            os.kill(pid, signal.SIGKILL)
            os.waitpid(pid, 0)
        raise
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)

    for signum in (signal.SIGUSR1, signal.SIGSTOP, signal.SIGCONT):
        for pid in pids:
            os.kill(pid, signum)
    return [os.waitstatus_to_exitcode(os.waitpid(pid, 0)[1]) for pid in pids]


def _run(argv, launch) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    options = parse_command_line(args, os.environ)
    with contextlib.ExitStack() as stack:
        stream: IO[str] = sys.stdin
        if options.filename is not None:
            try:
                stream = stack.enter_context(open(options.filename))
            except OSError as exc:
                sys.stderr.write(format_error("File cannot be opened\n", exc.errno or 0))
                sys.stderr.write(format_error(USAGE, exc.errno or 0))
                return 1
        try:
            options.require_quantum()
        except UsageError as exc:
            sys.stderr.write(format_error(str(exc), 0))
            return 1
        try:
            launch(read_workload(stream))
        except OSError as exc:
            sys.stderr.write(format_error("FORK FAILED\n", exc.errno or 0))
            return 1
    return 0


def main(argv=None) -> int:
    """Run every workload command at once and wait for them all."""
    return _run(argv, launch_all)


def synchronized_main(argv=None) -> int:
    """Run every workload command, released together by a signal."""
    return _run(argv, launch_synchronized)