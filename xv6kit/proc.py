"""Process table: allocation, fork, exit, wait, sleep and scheduling."""

from __future__ import annotations

import enum
import errno
import threading
from dataclasses import dataclass, field
from typing import Any, Iterator

NPROC = 64
PGSIZE = 4096
KERNBASE = 0x80000000


class KernelPanic(RuntimeError):
    """An internal invariant of the process table was broken."""


class ProcState(enum.IntEnum):
    UNUSED = 0
    EMBRYO = 1
    SLEEPING = 2
    RUNNABLE = 3
    RUNNING = 4
    ZOMBIE = 5


_STATE_NAMES = {
    ProcState.UNUSED: "unused",
    ProcState.EMBRYO: "embryo",
    ProcState.SLEEPING: "sleep ",
    ProcState.RUNNABLE: "runble",
    ProcState.RUNNING: "run   ",
    ProcState.ZOMBIE: "zombie",
}


@dataclass(eq=False)
class Process:
    """One slot of the process table."""

    pid: int = 0
    state: ProcState = ProcState.UNUSED
    parent: Process | None = field(default=None, repr=False)
    name: str = ""
    killed: bool = False
    chan: Any = field(default=None, repr=False)
    sz: int = 0
    scheduler: int = 0
    files: list = field(default_factory=list, repr=False)
    cwd: str | None = None


class ProcessTable:
    """A fixed-size table of processes on a single simulated CPU."""

    def __init__(self, nproc: int = NPROC, mem_limit: int = KERNBASE) -> None:
        if nproc < 1:
            raise ValueError("the table needs at least one slot")
        self._procs = [Process() for _ in range(nproc)]
        self._lock = threading.RLock()
        self._nextpid = 1
        self._mem_limit = mem_limit
        self.initproc: Process | None = None
        self.current: Process | None = None

    def __iter__(self) -> Iterator[Process]:
        return iter(self._procs)

    def _allocproc(self) -> Process | None:
        with self._lock:
            for p in self._procs:
                if p.state is ProcState.UNUSED:
                    p.state = ProcState.EMBRYO
                    p.pid = self._nextpid
                    self._nextpid += 1
                    return p
        return None

    def userinit(self, name: str = "initcode") -> Process:
        """Create the first process, one page in size and ready to run."""
        p = self._allocproc()
        if p is None:
            raise KernelPanic("userinit: out of memory?")
        self.initproc = p
        p.sz = PGSIZE
        p.name = name[:15]
        p.cwd = "/"
        with self._lock:
            p.state = ProcState.RUNNABLE
        return p

    def fork(self, parent: Process) -> Process:
        """Create a runnable copy of ``parent`` and return it."""
        child = self._allocproc()
        if child is None:
            raise OSError(errno.EAGAIN, "no free process slot")
        child.sz = parent.sz
        child.parent = parent
        child.files = list(parent.files)
        child.cwd = parent.cwd
        child.name = parent.name
        child.scheduler = parent.scheduler
        with self._lock:
            child.state = ProcState.RUNNABLE
        return child

    def _wakeup1(self, chan: Any) -> int:
        woken = 0
        for p in self._procs:
            if p.state is ProcState.SLEEPING and p.chan is chan:
                p.state = ProcState.RUNNABLE
                woken += 1
        return woken

    def exit(self, proc: Process) -> None:
        """Turn ``proc`` into a zombie and hand its children to init."""
        if proc is self.initproc:
            raise KernelPanic("init exiting")
        proc.files.clear()
        proc.cwd = None
        with self._lock:
            self._wakeup1(proc.parent)
            for p in self._procs:
                if p.parent is proc:
                    p.parent = self.initproc
                    if p.state is ProcState.ZOMBIE:
                        self._wakeup1(self.initproc)
            proc.state = ProcState.ZOMBIE

    def wait(self, proc: Process) -> int | None:
        """Reap an exited child of ``proc`` and return its pid.

        If children exist but none has exited, ``proc`` goes to sleep and
        None is returned. Raises ChildProcessError if ``proc`` has no
        children or has been killed.
        """
        with self._lock:
            have_kids = False
            for p in self._procs:
                if p.parent is not proc:
                    continue
                have_kids = True
                if p.state is ProcState.ZOMBIE:
                    pid = p.pid
                    p.pid = 0
                    p.parent = None
                    p.name = ""
                    p.killed = False
                    p.sz = 0
                    p.state = ProcState.UNUSED
                    return pid
            if not have_kids:
                raise ChildProcessError("no children to wait for")
            if proc.killed:
                raise ChildProcessError("process was killed while waiting")
            self.sleep(proc, proc)
            return None

    def kill(self, pid: int) -> None:
        """Mark the process ``pid`` killed, waking it if asleep."""
        with self._lock:
            for p in self._procs:
                if p.pid == pid:
                    p.killed = True
                    if p.state is ProcState.SLEEPING:
                        p.state = ProcState.RUNNABLE
                    return
        raise ProcessLookupError(f"no process with pid {pid}")

    def sleep(self, proc: Process | None, chan: Any) -> None:
        """Put ``proc`` to sleep on ``chan``."""
        if proc is None:
            raise KernelPanic("sleep")
        with self._lock:
            proc.chan = chan
            proc.state = ProcState.SLEEPING

    def wakeup(self, chan: Any) -> int:
        """Make every process sleeping on ``chan`` runnable; return how many."""
        with self._lock:
            return self._wakeup1(chan)

    def yield_cpu(self, proc: Process) -> None:
        """Give up the CPU for one scheduling round."""
        with self._lock:
            proc.state = ProcState.RUNNABLE

    def schedule(self) -> Iterator[Process]:
        """Run one pass over the table, yielding each process as it runs.

        A yielded process is RUNNING; before the pass resumes it must have
        left that state (by yielding, sleeping or exiting).
        """
        for p in self._procs:
            if p.state is not ProcState.RUNNABLE:
                continue
            p.state = ProcState.RUNNING
            self.current = p
            try:
                yield p
            finally:
                self.current = None
            if p.state is ProcState.RUNNING:
                raise KernelPanic("sched running")

    def growproc(self, proc: Process, n: int) -> None:
        """Grow (or shrink, for negative ``n``) the memory of ``proc``."""
        new_size = proc.sz + n
        if n > 0 and new_size >= self._mem_limit:
            raise MemoryError(f"cannot grow process to {new_size} bytes")
        if n < 0 and new_size <= 0:
            raise ValueError(f"cannot shrink process to {new_size} bytes")
        proc.sz = new_size

    def procdump(self) -> list[str]:
        """Return one line per used slot: pid, state and name."""
        return [
            f"{p.pid} {_STATE_NAMES.get(p.state, '???')} {p.name}"
            for p in self._procs
            if p.state is not ProcState.UNUSED
        ]