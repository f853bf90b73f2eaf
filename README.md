# xv6kit

Pure-Python models of the parts of a small Unix-like teaching kernel and
its user-space library. Each module models one piece with its limits,
orderings, defaults and failure cases. Failures are raised as exceptions
rather than returned as status codes.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Two small utilities are installed as commands.

Count lines, words and bytes in files, or in standard input when no file
is given. Each result is printed as `lines words bytes name`:

```
xv6-wc notes.txt other.txt
```

Delete files (and empty directories). It stops at the first path that
cannot be removed:

```
xv6-rm old.log scratch.txt
```

## What is inside

| Module | Contents |
| --- | --- |
| `xv6kit.font` | A 95-glyph bitmap font for printable ASCII, 15 pixels wide and 30 tall: `glyph`, `glyph_rows`, `render` |
| `xv6kit.segments` | x86 segment descriptor encoding: `SegmentType`, `null_segment`, `encode_segment` |
| `xv6kit.strutil` | C-style string helpers: `memcmp`, `memmove`, `strcmp`, `strncmp`, `strncpy`, `safestrcpy`, `strlen`, `strchr`, `atoi`, `gets` |
| `xv6kit.fmt` | A minimal formatter for `%d %x %p %s %c %%`: `format_int`, `sprintf`, `fprintf` |
| `xv6kit.wc` | Word counting: `Counts`, `count`, `main` |
| `xv6kit.rm` | File removal: `main` |
| `xv6kit.shell` | The shell tokenizer and parser: `tokenize`, `parse`, the command nodes `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd`, `BackCmd`, plus `OpenMode` and `ShellSyntaxError` |
| `xv6kit.umalloc` | A first-fit free-list allocator over a simulated heap: `Allocator`, `OutOfMemory` |
| `xv6kit.pipe` | A 512-byte blocking pipe: `Pipe`, `PipeError` |
| `xv6kit.locks` | `SpinLock`, `SleepLock`, `LockError` |
| `xv6kit.proc` | The process table: `ProcessTable`, `Process`, `ProcState`, `KernelPanic` |
| `xv6kit.sysproc` | Process system calls: `Clock`, `sbrk`, `uthread_init` |
| `xv6kit.vm` | Two-level paging over simulated memory: `PhysicalMemory`, `AddressSpace`, `VMError`, `pg_round_up`, `pg_round_down` |
| `xv6kit.elf` | 32-bit ELF headers: `ElfHeader`, `ProgramHeader`, `ProgFlags`, `program_headers`, `ElfFormatError` |
| `xv6kit.pci` | PCI configuration space: `config_address`, `PciDevice`, `scan` |
| `xv6kit.syscall` | System call numbers, argument fetching and dispatch: `Syscall`, `UserMemory`, `Dispatcher`, `BadAddress` |
| `xv6kit.tcp` | A tiny TCP responder: `TcpFlags`, `TcpResponder`, `ipv4_checksum`, `tcp_checksum`, `build_packet` |
| `xv6kit.trap` | Trap and interrupt dispatch: `TrapFrame`, `TrapOutcome`, `TrapHandler` |
| `xv6kit.uthread` | Cooperative user-level threads built on generators: `Scheduler`, `ThreadState`, `NoRunnableThreads` |

## A few examples

Parse a shell line into a command tree:

```python
from xv6kit.shell import parse

tree = parse("cat < input.txt | wc ; echo done &")
# ListCmd(left=PipeCmd(...), right=BackCmd(...))
```

Move bytes through a pipe:

```python
from xv6kit.pipe import Pipe

p = Pipe()
p.write(b"hello")
p.close_write()
assert p.read(10) == b"hello"
```

Allocate and free memory with the free-list allocator:

```python
from xv6kit.umalloc import Allocator

heap = Allocator()
addr = heap.malloc(100)
heap.free(addr)
```

Format output the way the user-space `printf` does:

```python
from xv6kit.fmt import sprintf

sprintf("%d %x %s", -5, 255, "ok")   # '-5 FF ok'
```

Build a process table, fork a child and reap it:

```python
from xv6kit.proc import ProcessTable

table = ProcessTable()
init = table.userinit("initcode")
child = table.fork(init)
table.exit(child)
assert table.wait(init) == child.pid
```

Run cooperative threads:

```python
from xv6kit.uthread import Scheduler

sched = Scheduler()

def worker():
    for _ in range(3):
        yield

sched.create(worker)
sched.create(worker)
sched.run()
```

## What it does not do

This package models pieces of an operating system; it is not one and
does not boot or run programs. In particular:

- There is no file system, disk or buffer cache. `xv6kit.rm` and
  `xv6kit.wc` work on the files of the host system.
- `xv6kit.shell` only tokenizes and parses command lines; it does not
  run the commands, and there is no interactive shell command.
- `xv6kit.tcp` builds and answers frames in memory; it has no network
  card driver and sends nothing over a real network. The reply payload
  comes from the callable you pass to `TcpResponder`.
- `xv6kit.pci.scan` and `PciDevice.probe` read configuration registers
  through a function you supply; they do not touch real hardware.
- There is no console, keyboard, serial port or graphics output; the
  font is available only as bitmaps and text renderings.