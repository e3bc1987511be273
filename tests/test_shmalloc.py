import pytest

from tm2c.shmalloc import SharedAllocator


def test_bump_allocation_is_contiguous():
    heap = SharedAllocator(1024)
    offsets = [heap.alloc(16) for _ in range(4)]
    assert offsets == [0, 16, 32, 48]
    assert heap.used == 64


def test_region_is_zeroed_bytearray_of_size():
    heap = SharedAllocator(128)
    assert heap.memory == bytearray(128)


def test_few_frees_are_not_reused():
    heap = SharedAllocator(1024)
    a = heap.alloc(8)
    b = heap.alloc(8)
    heap.free(a)
    heap.free(b)
    assert heap.free_count == 2
    assert heap.alloc(8) == 16


def test_reuse_oldest_after_three_frees():
    heap = SharedAllocator(1024)
    a, b, c = (heap.alloc(8) for _ in range(3))
    for offset in (a, b, c):
        heap.free(offset)
    assert heap.alloc(8) == a
    assert heap.free_count == 2
    # Back at two waiting blocks: the bump pointer is used again.
    assert heap.alloc(8) == 24


def test_reuse_continues_in_fifo_order():
    heap = SharedAllocator(1024)
    blocks = [heap.alloc(8) for _ in range(5)]
    for offset in blocks:
        heap.free(offset)
    reused = [heap.alloc(8) for _ in range(3)]
    assert reused == blocks[:3]
    assert heap.free_count == 2


def test_exhaustion_raises_memory_error():
    heap = SharedAllocator(32)
    heap.alloc(24)
    with pytest.raises(MemoryError):
        heap.alloc(16)
    assert heap.used == 24


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        SharedAllocator(-1)
    heap = SharedAllocator(16)
    with pytest.raises(ValueError):
        heap.alloc(-4)


def test_free_outside_region_rejected():
    heap = SharedAllocator(16)
    with pytest.raises(ValueError):
        heap.free(16)
    with pytest.raises(ValueError):
        heap.free(-1)