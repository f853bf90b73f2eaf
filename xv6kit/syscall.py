"""System call numbers, argument fetching from user memory, and dispatch."""

from __future__ import annotations

import enum
from typing import Callable, Mapping

_U32 = 0xFFFFFFFF


class Syscall(enum.IntEnum):
    FORK = 1
    EXIT = 2
    WAIT = 3
    PIPE = 4
    READ = 5
    KILL = 6
    EXEC = 7
    FSTAT = 8
    CHDIR = 9
    DUP = 10
    GETPID = 11
    SBRK = 12
    SLEEP = 13
    UPTIME = 14
    OPEN = 15
    WRITE = 16
    MKNOD = 17
    UNLINK = 18
    LINK = 19
    MKDIR = 20
    CLOSE = 21
    UTHREAD_INIT = 22


class BadAddress(ValueError):
    """A user address outside the process's memory."""

    def __init__(self, addr: int, message: str = "bad user address") -> None:
        super().__init__(f"{message}: {addr:#x}")
        self.addr = addr


class UserMemory:
    """The first ``sz`` bytes of ``memory`` are a process's address space."""

    def __init__(self, memory: bytes | bytearray, sz: int | None = None) -> None:
        self.memory = memory
        self.sz = len(memory) if sz is None else sz
        if not 0 <= self.sz <= len(memory):
            raise ValueError("process size exceeds the memory given")

    def fetch_int(self, addr: int) -> int:
        """Return the signed 32-bit integer at ``addr``."""
        addr &= _U32
        if addr >= self.sz or addr + 4 > self.sz:
            raise BadAddress(addr)
        return int.from_bytes(self.memory[addr:addr + 4], "little", signed=True)

    def fetch_str(self, addr: int) -> bytes:
        """Return the NUL-terminated string at ``addr``, without the NUL."""
        addr &= _U32
        if addr >= self.sz:
            raise BadAddress(addr)
        end = self.memory.find(b"\0", addr, self.sz)
        if end < 0:
            raise BadAddress(addr, "unterminated string")
        return bytes(self.memory[addr:end])

    def arg_int(self, esp: int, n: int) -> int:
        """Return the ``n``-th 32-bit argument above the saved stack pointer."""
        return self.fetch_int(esp + 4 + 4 * n)

    def arg_ptr(self, esp: int, n: int, size: int) -> int:
        """Return the ``n``-th argument as a pointer to ``size`` valid bytes."""
        ptr = self.arg_int(esp, n) & _U32
        if size < 0 or ptr >= self.sz or ptr + size > self.sz:
            raise BadAddress(ptr)
        return ptr

    def arg_str(self, esp: int, n: int) -> bytes:
        """Return the ``n``-th argument as a NUL-terminated string."""
        return self.fetch_str(self.arg_int(esp, n))


class Dispatcher:
    """Maps system call numbers to their handlers."""

    def __init__(self, handlers: Mapping[int, Callable[[], int]] | None = None) -> None:
        self._handlers: dict[int, Callable[[], int]] = {}
        for num, handler in (handlers or {}).items():
            self.register(num, handler)

    def register(self, num: int, handler: Callable[[], int]) -> None:
        """Install ``handler`` for call number ``num``."""
        num = int(num)
        if num <= 0:
            raise ValueError(f"system call numbers start at 1, got {num}")
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers[num] = handler

    def dispatch(self, num: int) -> int:
        """Run the handler for ``num`` and return its result."""
        handler = self._handlers.get(int(num)) if num > 0 else None
        if handler is None:
            raise ValueError(f"unknown sys call {num}")
        return handler()