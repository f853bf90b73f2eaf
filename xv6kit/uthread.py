"""Cooperative user-level threads driven by generators.

A thread body is a callable; if it returns an iterator (a generator
function does), each ``yield`` gives up the processor. The next thread is
the first runnable one in slot order other than the one that just ran;
the one that just ran continues only when nothing else can.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator

MAX_THREAD = 10


class ThreadState(enum.IntEnum):
    FREE = 0
    RUNNING = 1
    RUNNABLE = 2
    WAIT = 3


class NoRunnableThreads(RuntimeError):
    """Threads remain but every one of them is waiting."""


@dataclass(eq=False)
class _Thread:
    tid: int = 0
    state: ThreadState = ThreadState.FREE
    body: Iterator[Any] | None = None


def _run_body(func: Callable[[], Any]) -> Iterator[Any]:
    result = func()
    if isinstance(result, Iterator):
        yield from result


class Scheduler:
    """A table of threads; one of ``max_threads`` slots belongs to the caller."""

    def __init__(self, max_threads: int = MAX_THREAD) -> None:
        if max_threads < 2:
            raise ValueError("need room for at least one thread besides the caller")
        self._slots = [_Thread() for _ in range(max_threads - 1)]
        self._next_tid = 1
        self._finished: set[int] = set()
        self.current_tid = 0

    def _find(self, tid: int) -> _Thread | None:
        if tid <= 0:
            return None
        return next((t for t in self._slots if t.tid == tid), None)

    def create(self, func: Callable[[], Any]) -> int:
        """Add a runnable thread running ``func`` and return its id."""
        if not callable(func):
            raise TypeError("thread body must be callable")
        slot = next((t for t in self._slots if t.state is ThreadState.FREE), None)
        if slot is None:
            raise RuntimeError("no free thread slot")
        if slot.tid:
            self._finished.add(slot.tid)
        slot.tid = self._next_tid
        self._next_tid += 1
        slot.body = _run_body(func)
        slot.state = ThreadState.RUNNABLE
        return slot.tid

    def suspend(self, tid: int) -> bool:
        """Stop a runnable or running thread from being scheduled."""
        t = self._find(tid)
        if t is not None and t.state in (ThreadState.RUNNABLE, ThreadState.RUNNING):
            t.state = ThreadState.WAIT
            return True
        return False

    def resume(self, tid: int) -> bool:
        """Make a suspended thread runnable again."""
        t = self._find(tid)
        if t is not None and t.state is ThreadState.WAIT:
            t.state = ThreadState.RUNNABLE
            return True
        return False

    def state(self, tid: int) -> ThreadState:
        """Return the state of thread ``tid``."""
        t = self._find(tid)
        if t is not None:
            return t.state
        if tid in self._finished:
            return ThreadState.FREE
        raise LookupError(f"no thread with tid {tid}")

    def join(self, tid: int) -> Iterator[None]:
        """Yield until thread ``tid`` has finished; use with ``yield from``."""
        while self.state(tid) is not ThreadState.FREE:
            yield

    def _pick(self, current: _Thread | None) -> _Thread | None:
        for t in self._slots:
            if t.state is ThreadState.RUNNABLE and t is not current:
                return t
        if current is not None and current.state is ThreadState.RUNNABLE:
            return current
        return None

    def _retire(self, t: _Thread) -> None:
        t.state = ThreadState.FREE
        t.body = None
        self._finished.add(t.tid)

    def run(self) -> None:
        """Run threads until every one has finished.

        Raises NoRunnableThreads if only waiting threads are left.
        """
        current: _Thread | None = None
        while True:
            nxt = self._pick(current)
            if nxt is None:
                waiting = [t.tid for t in self._slots if t.state is ThreadState.WAIT]
                if waiting:
                    raise NoRunnableThreads(f"threads waiting: {waiting}")
                return
            assert nxt.body is not None
            nxt.state = ThreadState.RUNNING
            self.current_tid = nxt.tid
            try:
                next(nxt.body)
            except StopIteration:
                self._retire(nxt)
            except BaseException:
                self._retire(nxt)
                raise
            else:
                if nxt.state is ThreadState.RUNNING:
                    nxt.state = ThreadState.RUNNABLE
            finally:
                self.current_tid = 0
            current = nxt