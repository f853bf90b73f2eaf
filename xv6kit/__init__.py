"""Pure-Python models of a small teaching kernel and its user-space library."""

__version__ = "0.1.0"

__all__ = [
    "elf",
    "fmt",
    "font",
    "locks",
    "pci",
    "pipe",
    "proc",
    "rm",
    "segments",
    "shell",
    "strutil",
    "syscall",
    "sysproc",
    "tcp",
    "trap",
    "umalloc",
    "uthread",
    "vm",
    "wc",
]