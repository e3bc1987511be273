"""A very simple object allocator over one shared region, handing out offsets."""

from __future__ import annotations

__all__ = ["FREE_LIST_SIZE", "SharedAllocator"]

FREE_LIST_SIZE = 256


class SharedAllocator:
    """Bump allocator with a small ring of freed blocks for reuse.

    Freed offsets go into a ring of 256 slots. Once more than two are
    waiting, allocation reuses the oldest one regardless of requested size,
    which assumes callers allocate objects of one size.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size!r}")
        self.size = size
        self.memory = bytearray(size)
        self._next = 0
        self._free_list: list[int] = [0] * FREE_LIST_SIZE
        self._free_cur = 0
        self._free_num = 0

    @property
    def used(self) -> int:
        """Bytes consumed by the bump pointer so far."""
        return self._next

    @property
    def free_count(self) -> int:
        """Number of freed blocks waiting for reuse."""
        return self._free_num

    def alloc(self, size: int) -> int:
        """Allocate ``size`` bytes and return their offset in the region."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size!r}")
        if self._free_num > 2:
            spot = (self._free_cur - self._free_num) % FREE_LIST_SIZE
            self._free_num -= 1
            return self._free_list[spot]
        if self._next + size > self.size:
            raise MemoryError(
                f"shared region of {self.size} bytes exhausted "
                f"({self._next} used, {size} requested)"
            )
        offset = self._next
        self._next += size
        return offset

    def free(self, offset: int) -> None:
        """Return the block at ``offset`` to the ring of reusable blocks."""
        if not 0 <= offset < max(self.size, 1):
            raise ValueError(f"offset {offset!r} lies outside the shared region")
        self._free_num = (self._free_num + 1) % FREE_LIST_SIZE
        self._free_list[self._free_cur] = offset
        self._free_cur = (self._free_cur + 1) % FREE_LIST_SIZE