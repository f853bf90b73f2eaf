"""First-fit free-list allocator over a simulated, growable heap.

Blocks are measured in header units of ``UNIT`` bytes. The free list is
kept in address order and adjacent free blocks are coalesced.
"""

from __future__ import annotations

UNIT = 8
MIN_GROWTH = 4096
_SENTINEL = -UNIT  # lies below every heap address


class OutOfMemory(MemoryError):
    """The heap cannot grow enough to satisfy a request."""


class Allocator:
    """A malloc/free pair whose heap starts at ``base`` and grows upward.

    ``capacity`` bounds the heap size in bytes; None means unbounded.
    Addresses handed out point just past their block header.
    """

    def __init__(self, capacity: int | None = None, base: int = 0) -> None:
        if base < 0:
            raise ValueError("heap base must not be negative")
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._base = base
        self._brk = base
        self._capacity = capacity
        self._size: dict[int, int] = {}
        self._next: dict[int, int] = {}
        self._freep: int | None = None
        self._allocated: set[int] = set()

    @property
    def base(self) -> int:
        return self._base

    @property
    def brk(self) -> int:
        """Current top of the heap."""
        return self._brk

    def _sbrk(self, nbytes: int) -> int:
        if self._capacity is not None and self._brk + nbytes > self._base + self._capacity:
            raise OutOfMemory(f"cannot grow heap by {nbytes} bytes")
        start = self._brk
        self._brk += nbytes
        return start

    def _morecore(self, nunits: int) -> int:
        nunits = max(nunits, MIN_GROWTH)
        header = self._sbrk(nunits * UNIT)
        self._size[header] = nunits
        self._release(header)
        assert self._freep is not None
        return self._freep

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` and return the address of the new block."""
        if nbytes < 0:
            raise ValueError("cannot allocate a negative size")
        nunits = (nbytes + UNIT - 1) // UNIT + 1
        if self._freep is None:
            self._next[_SENTINEL] = _SENTINEL
            self._size[_SENTINEL] = 0
            self._freep = _SENTINEL
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p] * UNIT
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return p + UNIT
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def free(self, addr: int) -> None:
        """Return a block obtained from :meth:`malloc` to the free list."""
        header = addr - UNIT
        if header not in self._allocated:
            raise ValueError(f"address {addr:#x} was not allocated")
        self._allocated.remove(header)
        self._release(header)

    def _release(self, bp: int) -> None:
        assert self._freep is not None
        nxt = self._next
        size = self._size
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        after = nxt[p]
        if bp + size[bp] * UNIT == after:
            size[bp] += size.pop(after)
            nxt[bp] = nxt.pop(after)
        else:
            nxt[bp] = after
        if p + size[p] * UNIT == bp:
            size[p] += size.pop(bp)
            nxt[p] = nxt.pop(bp)
        else:
            nxt[p] = bp
        self._freep = p

    def free_blocks(self) -> list[tuple[int, int]]:
        """Return (header address, size in bytes) of each free block, by address."""
        if self._freep is None:
            return []
        blocks = []
        p = self._next[_SENTINEL]
        while p != _SENTINEL:
            blocks.append((p, self._size[p] * UNIT))
            p = self._next[p]
        return blocks