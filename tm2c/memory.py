"""Transactional memory management: allocations undone on abort, frees deferred to commit."""

from __future__ import annotations

from .shmalloc import SharedAllocator

__all__ = ["MemInfo"]


class MemInfo:
    """Tracks memory allocated and freed within one transaction.

    Private blocks are ``bytearray`` objects; shared blocks are offsets into
    ``shared_heap``. Blocks allocated during the transaction are released if
    it aborts, and blocks freed during it are released only when it commits.
    """

    def __init__(self, shared_heap: SharedAllocator) -> None:
        self.shared_heap = shared_heap
        self.allocated: list[bytearray] = []
        self.allocated_shmem: list[int] = []
        self.freed: list[bytearray] = []
        self.freed_shmem: list[int] = []

    def malloc(self, size: int) -> bytearray:
        """Allocate a private block, released again if the transaction aborts."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size!r}")
        block = bytearray(size)
        self.allocated.append(block)
        return block

    def shmalloc(self, size: int) -> int:
        """Allocate shared memory and return its offset; released on abort."""
        offset = self.shared_heap.alloc(size)
        self.allocated_shmem.append(offset)
        return offset

    def free(self, block: bytearray) -> None:
        """Schedule a private block for release at commit."""
        self.freed.append(block)

    def shfree(self, offset: int) -> None:
        """Schedule a shared block for release at commit."""
        self.freed_shmem.append(offset)

    def _release_shared(self, offsets: list[int]) -> None:
        # Most recent first, as the pending blocks are kept as a stack.
        for offset in reversed(offsets):
            self.shared_heap.free(offset)

    def on_commit(self) -> None:
        """Keep what was allocated and release what was freed."""
        self.allocated.clear()
        self.allocated_shmem.clear()
        self.freed.clear()
        freed_shmem, self.freed_shmem = self.freed_shmem, []
        self._release_shared(freed_shmem)

    def on_abort(self) -> None:
        """Release what was allocated and keep what was freed."""
        self.allocated.clear()
        allocated_shmem, self.allocated_shmem = self.allocated_shmem, []
        self._release_shared(allocated_shmem)
        self.freed.clear()
        self.freed_shmem.clear()