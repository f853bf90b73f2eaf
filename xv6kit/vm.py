"""Two-level x86 page tables for user address spaces over simulated memory."""

from __future__ import annotations

PGSIZE = 4096
NPDENTRIES = 1024
NPTENTRIES = 1024
PTXSHIFT = 12
PDXSHIFT = 22
KERNBASE = 0x80000000

PTE_P = 0x001  # present
PTE_W = 0x002  # writeable
PTE_U = 0x004  # user


class VMError(RuntimeError):
    """A page-table invariant was broken or an address is not mapped."""


def pg_round_up(addr: int) -> int:
    """Round ``addr`` up to a page boundary."""
    return (addr + PGSIZE - 1) & ~(PGSIZE - 1)


def pg_round_down(addr: int) -> int:
    """Round ``addr`` down to a page boundary."""
    return addr & ~(PGSIZE - 1)


def _pdx(va: int) -> int:
    return (va >> PDXSHIFT) & 0x3FF


def _ptx(va: int) -> int:
    return (va >> PTXSHIFT) & 0x3FF


def _pte_addr(pte: int) -> int:
    return pte & ~0xFFF


def _pte_flags(pte: int) -> int:
    return pte & 0xFFF


class PhysicalMemory:
    """A pool of ``npages`` physical pages starting at address ``start``."""

    def __init__(self, npages: int = 1024, start: int = 0x100000) -> None:
        if npages < 0:
            raise ValueError("page count must not be negative")
        if start <= 0 or start % PGSIZE:
            raise ValueError("start must be a positive page-aligned address")
        self._start = start
        self._end = start + npages * PGSIZE
        self._total = npages
        self._pages: dict[int, bytearray] = {}
        self._free = [start + i * PGSIZE for i in reversed(range(npages))]

    @property
    def total(self) -> int:
        """Number of pages in the pool."""
        return self._total

    @property
    def free_count(self) -> int:
        """Number of pages not allocated."""
        return len(self._free)

    def kalloc(self) -> int:
        """Allocate one zeroed page and return its physical address."""
        if not self._free:
            raise MemoryError("out of physical memory")
        pa = self._free.pop()
        self._pages[pa] = bytearray(PGSIZE)
        return pa

    def kfree(self, page: int) -> None:
        """Return the page at physical address ``page`` to the pool."""
        if page % PGSIZE or not self._start <= page < self._end:
            raise VMError("kfree")
        if page not in self._pages:
            raise VMError(f"kfree: page {page:#x} is not allocated")
        del self._pages[page]
        self._free.append(page)

    def page(self, pa: int) -> bytearray:
        """Return the contents of the allocated page at ``pa``."""
        try:
            return self._pages[pa]
        except KeyError:
            raise VMError(f"no allocated page at {pa:#x}") from None


class AddressSpace:
    """The user part of a page directory, with page tables drawn from ``memory``."""

    def __init__(self, memory: PhysicalMemory) -> None:
        self.memory = memory
        self._dir_pa = memory.kalloc()
        self._tables: dict[int, tuple[int, list[int]]] = {}
        self._freed = False

    def _slot(self, va: int, alloc: bool) -> tuple[list[int], int] | None:
        if self._freed:
            raise VMError("address space has been freed")
        pdx = _pdx(va)
        entry = self._tables.get(pdx)
        if entry is None:
            if not alloc:
                return None
            entry = (self.memory.kalloc(), [0] * NPTENTRIES)
            self._tables[pdx] = entry
        return entry[1], _ptx(va)

    def walk(self, va: int, alloc: bool = False) -> int | None:
        """Return the page-table entry for ``va``, or None if it has no page table.

        With ``alloc`` set, a missing page table is created.
        """
        slot = self._slot(va, alloc)
        if slot is None:
            return None
        table, index = slot
        return table[index]

    def map_pages(self, va: int, size: int, pa: int, perm: int) -> None:
        """Map the pages covering ``size`` bytes at ``va`` to physical ``pa`` onwards."""
        if size <= 0:
            raise ValueError("mapping size must be positive")
        a = pg_round_down(va)
        last = pg_round_down(va + size - 1)
        while True:
            slot = self._slot(a, True)
            assert slot is not None
            table, index = slot
            if table[index] & PTE_P:
                raise VMError("remap")
            table[index] = pa | perm | PTE_P
            if a == last:
                break
            a += PGSIZE
            pa += PGSIZE

    def alloc_uvm(self, oldsz: int, newsz: int) -> int:
        """Grow user memory from ``oldsz`` to ``newsz`` bytes; return the new size."""
        if newsz >= KERNBASE:
            raise MemoryError(f"cannot grow user memory to {newsz:#x}")
        if newsz < oldsz:
            return oldsz
        for a in range(pg_round_up(oldsz), newsz, PGSIZE):
            try:
                mem = self.memory.kalloc()
            except MemoryError:
                self.dealloc_uvm(newsz, oldsz)
                raise
            try:
                self.map_pages(a, PGSIZE, mem, PTE_W | PTE_U)
            except MemoryError:
                self.dealloc_uvm(newsz, oldsz)
                self.memory.kfree(mem)
                raise
        return newsz

    def dealloc_uvm(self, oldsz: int, newsz: int) -> int:
        """Free user pages to shrink from ``oldsz`` to ``newsz``; return the new size."""
        if newsz >= oldsz:
            return oldsz
        a = pg_round_up(newsz)
        while a < oldsz:
            slot = self._slot(a, False)
            if slot is None:
                a = ((_pdx(a) + 1) << PDXSHIFT) - PGSIZE
            else:
                table, index = slot
                pte = table[index]
                if pte & PTE_P:
                    pa = _pte_addr(pte)
                    if pa == 0:
                        raise VMError("kfree")
                    self.memory.kfree(pa)
                    table[index] = 0
            a += PGSIZE
        return newsz

    def copy(self, sz: int) -> AddressSpace:
        """Return a new address space holding a copy of the first ``sz`` bytes."""
        child = AddressSpace(self.memory)
        try:
            for va in range(0, sz, PGSIZE):
                pte = self.walk(va)
                if pte is None:
                    raise VMError("copyuvm: pte should exist")
                if not pte & PTE_P:
                    raise VMError("copyuvm: page not present")
                mem = self.memory.kalloc()
                self.memory.page(mem)[:] = self.memory.page(_pte_addr(pte))
                try:
                    child.map_pages(va, PGSIZE, mem, _pte_flags(pte))
                except MemoryError:
                    self.memory.kfree(mem)
                    raise
        except MemoryError:
            child.free()
            raise
        return child

    def uva2ka(self, va: int) -> int | None:
        """Return the physical page behind user address ``va``, or None."""
        pte = self.walk(va)
        if pte is None or not pte & PTE_P or not pte & PTE_U:
            return None
        return _pte_addr(pte)

    def copyout(self, va: int, data: bytes) -> None:
        """Copy ``data`` to user address ``va``; every page must be a user page."""
        buf = memoryview(bytes(data))
        while buf:
            va0 = pg_round_down(va)
            pa0 = self.uva2ka(va0)
            if pa0 is None:
                raise VMError(f"copyout: {va0:#x} is not a user page")
            offset = va - va0
            n = min(PGSIZE - offset, len(buf))
            self.memory.page(pa0)[offset:offset + n] = buf[:n]
            buf = buf[n:]
            va = va0 + PGSIZE

    def clear_user(self, va: int) -> None:
        """Make the page at ``va`` inaccessible from user mode."""
        slot = self._slot(va, False)
        if slot is None:
            raise VMError("clearpteu")
        table, index = slot
        table[index] &= ~PTE_U

    def free(self) -> None:
        """Free every user page, every page table and the directory."""
        if self._freed:
            raise VMError("freevm: no pgdir")
        self.dealloc_uvm(KERNBASE, 0)
        for pa, _ in self._tables.values():
            self.memory.kfree(pa)
        self._tables.clear()
        self.memory.kfree(self._dir_pa)
        self._freed = True