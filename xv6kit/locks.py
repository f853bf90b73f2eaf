"""Spin locks owned by a CPU and sleep locks owned by a process."""

from __future__ import annotations

import threading
from typing import Hashable


class LockError(RuntimeError):
    """A lock used in a way that breaks its ownership rules."""


class SpinLock:
    """A mutual-exclusion lock held by one CPU at a time.

    A CPU that already holds the lock may not acquire it again, and only
    the holding CPU may release it.
    """

    def __init__(self, name: str = "lock") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._cpu: Hashable | None = None

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @property
    def cpu(self) -> Hashable | None:
        """The CPU holding the lock, or None."""
        return self._cpu

    def holding(self, cpu: Hashable) -> bool:
        """Return whether ``cpu`` holds the lock."""
        return self._lock.locked() and self._cpu == cpu

    def acquire(self, cpu: Hashable) -> None:
        """Take the lock for ``cpu``, waiting until it is free."""
        if self.holding(cpu):
            raise LockError(f"acquire: {self.name} already held by cpu {cpu}")
        self._lock.acquire()
        self._cpu = cpu

    def release(self, cpu: Hashable) -> None:
        """Give the lock up; ``cpu`` must be holding it."""
        if not self.holding(cpu):
            raise LockError(f"release: {self.name} not held by cpu {cpu}")
        self._cpu = None
        self._lock.release()


class SleepLock:
    """A long-term lock; a process waiting for it sleeps instead of spinning."""

    def __init__(self, name: str = "sleep lock") -> None:
        self.name = name
        self._cond = threading.Condition()
        self._locked = False
        self._pid = 0

    @property
    def pid(self) -> int:
        """The pid of the holder, or 0 when the lock is free."""
        return self._pid

    def acquire(self, pid: int) -> None:
        """Take the lock for process ``pid``, sleeping while it is held."""
        with self._cond:
            while self._locked:
                self._cond.wait()
            self._locked = True
            self._pid = pid

    def release(self) -> None:
        """Free the lock and wake every process waiting for it."""
        with self._cond:
            self._locked = False
            self._pid = 0
            self._cond.notify_all()

    def holding(self) -> bool:
        """Return whether the lock is held by anyone."""
        with self._cond:
            return self._locked