"""Trap and interrupt dispatch for the simulated kernel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from xv6kit.fmt import sprintf
from xv6kit.proc import KernelPanic, Process, ProcessTable, ProcState
from xv6kit.syscall import Dispatcher
from xv6kit.sysproc import Clock

T_SYSCALL = 64
T_IRQ0 = 32
IRQ_TIMER = 0
IRQ_KBD = 1
IRQ_COM1 = 4
IRQ_NIC = 0xB
IRQ_IDE = 14
IRQ_SPURIOUS = 31
DPL_USER = 3

_U32 = 0xFFFFFFFF
_RESERVED = frozenset({
    T_SYSCALL,
    T_IRQ0 + IRQ_TIMER,
    T_IRQ0 + IRQ_IDE + 1,
    T_IRQ0 + IRQ_SPURIOUS,
})

PushWord = Callable[[Process, int, int], None]


@dataclass
class TrapFrame:
    """The registers saved when a trap is taken."""

    trapno: int
    cs: int = 0
    eip: int = 0
    esp: int = 0
    eax: int = 0
    err: int = 0
    cr2: int = 0

    @property
    def user_mode(self) -> bool:
        """Whether the trap came from user space."""
        return (self.cs & 3) == DPL_USER


@dataclass
class TrapOutcome:
    """What handling one trap did to the current process."""

    exited: bool = False
    yielded: bool = False
    redirected: bool = False
    messages: list[str] = field(default_factory=list)


class TrapHandler:
    """Routes system calls, the timer and device interrupts.

    ``push_word(proc, address, value)`` stores a word on a user stack; it
    is used when the timer hands control to a user-level scheduler.
    """

    def __init__(
        self,
        table: ProcessTable,
        clock: Clock | None = None,
        syscalls: Dispatcher | None = None,
        cpu: int = 0,
        push_word: PushWord | None = None,
    ) -> None:
        self.table = table
        self.clock = clock if clock is not None else Clock()
        self.syscalls = syscalls if syscalls is not None else Dispatcher()
        self.cpu = cpu
        self.push_word = push_word
        self._handlers: dict[int, Callable[[], None]] = {}

    def register(self, vector: int, handler: Callable[[], None]) -> None:
        """Install ``handler`` for a device interrupt vector."""
        if vector in _RESERVED:
            raise ValueError(f"vector {vector} is handled by the kernel itself")
        if not 0 <= vector < 256:
            raise ValueError(f"vector out of range: {vector}")
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers[vector] = handler

    def _exit(self, proc: Process, outcome: TrapOutcome) -> TrapOutcome:
        self.table.exit(proc)
        outcome.exited = True
        return outcome

    def _syscall(self, frame: TrapFrame, proc: Process, outcome: TrapOutcome) -> None:
        try:
            frame.eax = self.syscalls.dispatch(frame.eax)
        except (ValueError, LookupError, OSError, MemoryError) as exc:
            outcome.messages.append(sprintf("%d %s: %s\n", proc.pid, proc.name, str(exc)))
            frame.eax = -1

    def handle(self, frame: TrapFrame, proc: Process | None = None) -> TrapOutcome:
        """Handle one trap taken while ``proc`` (or no process) was running."""
        outcome = TrapOutcome()
        if frame.trapno == T_SYSCALL:
            if proc is None:
                raise KernelPanic("system call without a process")
            if proc.killed:
                return self._exit(proc, outcome)
            self._syscall(frame, proc, outcome)
            if proc.killed:
                return self._exit(proc, outcome)
            return outcome

        vector = frame.trapno
        if vector == T_IRQ0 + IRQ_TIMER:
            if self.cpu == 0:
                self.clock.tick()
                self.table.wakeup(self.clock)
            if (
                proc is not None
                and frame.user_mode
                and proc.state is ProcState.RUNNING
                and proc.scheduler
            ):
                return_address = frame.eip
                frame.esp = (frame.esp - 4) & _U32
                if self.push_word is not None:
                    self.push_word(proc, frame.esp, return_address)
                frame.eip = proc.scheduler
                outcome.redirected = True
        elif vector == T_IRQ0 + IRQ_IDE + 1:
            pass  # spurious secondary IDE interrupts
        elif vector == T_IRQ0 + IRQ_SPURIOUS:
            outcome.messages.append(
                sprintf("cpu%d: spurious interrupt at %x:%x\n", self.cpu, frame.cs, frame.eip)
            )
        elif vector in self._handlers:
            self._handlers[vector]()
        else:
            if proc is None or (frame.cs & 3) == 0:
                raise KernelPanic(sprintf(
                    "unexpected trap %d from cpu %d eip %x (cr2=0x%x)",
                    vector, self.cpu, frame.eip, frame.cr2,
                ))
            outcome.messages.append(sprintf(
                "pid %d %s: trap %d err %d on cpu %d eip 0x%x addr 0x%x--kill proc\n",
                proc.pid, proc.name, vector, frame.err, self.cpu, frame.eip, frame.cr2,
            ))
            proc.killed = True

        if proc is not None and proc.killed and frame.user_mode:
            return self._exit(proc, outcome)
        if (
            proc is not None
            and proc.state is ProcState.RUNNING
            and vector == T_IRQ0 + IRQ_TIMER
        ):
            self.table.yield_cpu(proc)
            outcome.yielded = True
        if proc is not None and proc.killed and frame.user_mode:
            return self._exit(proc, outcome)
        return outcome