import pytest

from xv6kit.vm import (
    KERNBASE,
    PGSIZE,
    PTE_P,
    PTE_U,
    PTE_W,
    AddressSpace,
    PhysicalMemory,
    VMError,
)


@pytest.fixture
def mem():
    return PhysicalMemory(npages=64)


@pytest.fixture
def space(mem):
    return AddressSpace(mem)


def test_alloc_maps_user_writable_pages(space):
    assert space.alloc_uvm(0, 2 * PGSIZE) == 2 * PGSIZE
    pte = space.walk(PGSIZE)
    assert pte & (PTE_P | PTE_U | PTE_W) == PTE_P | PTE_U | PTE_W


def test_alloc_consumes_data_and_table_pages(mem, space):
    before = mem.free_count
    space.alloc_uvm(0, 3 * PGSIZE)
    assert mem.free_count == before - 3 - 1


def test_alloc_smaller_returns_old_size(space):
    space.alloc_uvm(0, PGSIZE)
    assert space.alloc_uvm(PGSIZE, 10) == PGSIZE


def test_alloc_at_kernbase_fails(space):
    with pytest.raises(MemoryError):
        space.alloc_uvm(0, KERNBASE)


def test_dealloc_frees_pages(mem, space):
    space.alloc_uvm(0, 3 * PGSIZE)
    before = mem.free_count
    assert space.dealloc_uvm(3 * PGSIZE, PGSIZE) == PGSIZE
    assert mem.free_count == before + 2
    assert space.walk(PGSIZE) == 0
    assert space.walk(0) & PTE_P


def test_dealloc_growing_returns_old_size(space):
    assert space.dealloc_uvm(PGSIZE, 2 * PGSIZE) == PGSIZE


def test_out_of_memory_rolls_back():
    mem = PhysicalMemory(npages=4)
    space = AddressSpace(mem)
    with pytest.raises(MemoryError):
        space.alloc_uvm(0, 4 * PGSIZE)
    assert mem.free_count == mem.total - 2
    assert space.walk(0) == 0


def test_copyout_writes_user_memory(mem, space):
    space.alloc_uvm(0, PGSIZE)
    space.copyout(100, b"hello")
    page = mem.page(space.uva2ka(100))
    assert page[100:105] == b"hello"


def test_copyout_spans_pages(mem, space):
    space.alloc_uvm(0, 2 * PGSIZE)
    space.copyout(PGSIZE - 2, b"abcd")
    assert mem.page(space.uva2ka(0))[-2:] == b"ab"
    assert mem.page(space.uva2ka(PGSIZE))[:2] == b"cd"


def test_copyout_unmapped_raises(space):
    with pytest.raises(VMError):
        space.copyout(0, b"x")


def test_uva2ka_unmapped_is_none(space):
    assert space.uva2ka(5 * PGSIZE) is None


def test_copy_is_independent(mem, space):
    space.alloc_uvm(0, 2 * PGSIZE)
    space.copyout(10, b"data")
    child = space.copy(2 * PGSIZE)
    parent_pa = space.uva2ka(0)
    child_pa = child.uva2ka(0)
    assert child_pa != parent_pa
    assert mem.page(child_pa)[10:14] == b"data"
    space.copyout(10, b"XXXX")
    assert mem.page(child_pa)[10:14] == b"data"


def test_copy_missing_page_raises(space):
    with pytest.raises(VMError):
        space.copy(PGSIZE)


def test_clear_user_blocks_user_access(space):
    space.alloc_uvm(0, PGSIZE)
    space.clear_user(0)
    assert space.uva2ka(0) is None
    assert space.walk(0) & PTE_P
    with pytest.raises(VMError):
        space.copyout(0, b"x")


def test_clear_user_unmapped_raises(space):
    with pytest.raises(VMError):
        space.clear_user(0)


def test_remap_raises(mem, space):
    pa = mem.kalloc()
    space.map_pages(0, PGSIZE, pa, PTE_U)
    with pytest.raises(VMError):
        space.map_pages(0, PGSIZE, pa, PTE_U)


def test_map_pages_covers_unaligned_range(mem, space):
    pa = mem.kalloc()
    mem.kalloc()
    space.map_pages(PGSIZE - 1, 2, pa, PTE_U)
    assert space.uva2ka(0) == pa
    assert space.uva2ka(PGSIZE) == pa + PGSIZE


def test_free_returns_all_pages(mem, space):
    space.alloc_uvm(0, 5 * PGSIZE)
    space.free()
    assert mem.free_count == mem.total
    with pytest.raises(VMError):
        space.free()


def test_kfree_misaligned_raises(mem):
    pa = mem.kalloc()
    with pytest.raises(VMError):
        mem.kfree(pa + 1)


def test_kalloc_exhaustion():
    mem = PhysicalMemory(npages=1)
    mem.kalloc()
    with pytest.raises(MemoryError):
        mem.kalloc()