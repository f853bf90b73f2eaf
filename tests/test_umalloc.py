import pytest

from xv6kit import umalloc
from xv6kit.umalloc import Allocator, OutOfMemory


def _free_total(alloc):
    return sum(size for _, size in alloc.free_blocks())


def test_new_allocator_has_no_free_blocks():
    alloc = Allocator()
    assert alloc.free_blocks() == []
    assert alloc.brk == alloc.base


def test_first_allocation_grows_heap_by_minimum():
    alloc = Allocator(base=4096)
    addr = alloc.malloc(1)
    assert alloc.brk - alloc.base == umalloc.MIN_GROWTH * umalloc.UNIT
    assert alloc.base < addr < alloc.brk
    assert addr % umalloc.UNIT == 0


def test_allocations_do_not_overlap():
    alloc = Allocator()
    sizes = [1, 10, 100, 1000, 7]
    spans = sorted((alloc.malloc(n), n) for n in sizes)
    for (a, n), (b, _) in zip(spans, spans[1:]):
        assert a + n <= b - umalloc.UNIT
    for addr, n in spans:
        assert alloc.base < addr and addr + n <= alloc.brk


def test_free_everything_coalesces_to_one_block():
    alloc = Allocator()
    addrs = [alloc.malloc(n) for n in (16, 300, 5, 4000)]
    for addr in (addrs[1], addrs[3], addrs[0], addrs[2]):
        alloc.free(addr)
    assert alloc.free_blocks() == [(alloc.base, alloc.brk - alloc.base)]


def test_free_restores_free_space():
    alloc = Allocator()
    first = alloc.malloc(8)
    before = _free_total(alloc)
    second = alloc.malloc(64)
    assert _free_total(alloc) < before
    alloc.free(second)
    assert _free_total(alloc) == before
    alloc.free(first)
    assert _free_total(alloc) == alloc.brk - alloc.base


def test_large_request_grows_past_minimum():
    alloc = Allocator()
    nbytes = umalloc.MIN_GROWTH * umalloc.UNIT * 3
    addr = alloc.malloc(nbytes)
    assert addr + nbytes <= alloc.brk


def test_capacity_exhausted():
    alloc = Allocator(capacity=1000)
    with pytest.raises(OutOfMemory):
        alloc.malloc(1)


def test_invalid_and_double_free():
    alloc = Allocator()
    addr = alloc.malloc(10)
    with pytest.raises(ValueError):
        alloc.free(addr + umalloc.UNIT)
    alloc.free(addr)
    with pytest.raises(ValueError):
        alloc.free(addr)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Allocator().malloc(-1)


def test_exhaust_then_free_all_then_allocate_again():
    alloc = Allocator(capacity=5 * umalloc.MIN_GROWTH * umalloc.UNIT)
    held = []
    with pytest.raises(OutOfMemory):
        while True:
            held.append(alloc.malloc(10001))
    assert held
    for addr in reversed(held):
        alloc.free(addr)
    assert alloc.free_blocks() == [(alloc.base, alloc.brk - alloc.base)]
    addr = alloc.malloc(1024 * 20)
    assert alloc.base < addr < alloc.brk
    alloc.free(addr)