"""Process-related system calls and the tick clock."""

from __future__ import annotations

import threading

from xv6kit.proc import Process, ProcessTable

_U32 = 0xFFFFFFFF


class Clock:
    """A 32-bit counter of timer ticks."""

    def __init__(self, ticks: int = 0) -> None:
        self._ticks = ticks & _U32
        self._lock = threading.Lock()

    def tick(self) -> int:
        """Advance the clock by one tick and return the new count."""
        with self._lock:
            self._ticks = (self._ticks + 1) & _U32
            return self._ticks

    def uptime(self) -> int:
        """Return the number of ticks so far."""
        with self._lock:
            return self._ticks

    def sleep_done(self, start: int, n: int) -> bool:
        """Return whether ``n`` ticks have passed since tick ``start``."""
        with self._lock:
            elapsed = (self._ticks - start) & _U32
        return elapsed >= (n & _U32)


def sbrk(table: ProcessTable, proc: Process, n: int) -> int:
    """Grow the memory of ``proc`` by ``n`` bytes; return the old break."""
    addr = proc.sz
    table.growproc(proc, n)
    return addr


def uthread_init(proc: Process, address: int) -> None:
    """Record the address of the user-level thread scheduler of ``proc``."""
    proc.scheduler = address & _U32