"""Buckets and lock entries of the service cores' lock hash table."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Union

from .core import RW
from .rwentry import BitRwEntry
from .sshtlog import SshtLogSet

__all__ = [
    "ADDR_PER_CL",
    "ENTRY_PER_CL",
    "NUM_BUCKETS",
    "MAX_READERS",
    "SSHT_NO_WRITER",
    "RwEntry",
    "Bucket",
    "ssht_new",
    "ssht_remove",
    "ht_format",
]

ADDR_PER_CL = 3
ENTRY_PER_CL = ADDR_PER_CL
NUM_BUCKETS = 64
MAX_READERS = 64
SSHT_NO_WRITER = 0xFF


class RwEntry:
    """Lock entry with one flag per possible reader and a reader count."""

    def __init__(self, max_readers: int = MAX_READERS) -> None:
        if max_readers <= 0:
            raise ValueError(f"max_readers must be positive, got {max_readers!r}")
        self.nr = 0
        self.reader = [0] * max_readers
        self.writer = SSHT_NO_WRITER

    def _check(self, node_id: int) -> int:
        if not 0 <= node_id < len(self.reader):
            raise ValueError(f"node id {node_id!r} outside 0..{len(self.reader) - 1}")
        return node_id

    def has_readers(self) -> bool:
        """Return whether at least one reader holds the entry."""
        return self.nr > 0

    def is_member(self, node_id: int) -> bool:
        """Return whether ``node_id`` holds a read lock."""
        return bool(self.reader[self._check(node_id)])

    def set(self, node_id: int) -> None:
        """Add ``node_id`` as a reader."""
        if not self.reader[self._check(node_id)]:
            self.reader[node_id] = 1
            self.nr += 1

    def unset(self, node_id: int) -> None:
        """Remove ``node_id`` as a reader, decrementing the reader count."""
        self.reader[self._check(node_id)] = 0
        self.nr -= 1

    def is_empty(self) -> bool:
        """Return whether there are neither readers nor a writer."""
        return self.nr == 0 and self.writer == SSHT_NO_WRITER

    def __repr__(self) -> str:
        ids = [i for i, flag in enumerate(self.reader) if flag]
        return f"RwEntry(nr={self.nr}, readers={ids}, writer={self.writer})"


Entry = Union[RwEntry, BitRwEntry]


def _reader_ids(entry: Entry) -> list[int]:
    if isinstance(entry, BitRwEntry):
        return [i for i, flag in enumerate(entry.fetch_readers(MAX_READERS)) if flag]
    return [i for i, flag in enumerate(entry.reader) if flag]


class Bucket:
    """A group of address slots with their lock entries, chained on overflow.

    An address of 0 marks a free slot.
    """

    def __init__(self, bit_opts: bool = False, max_readers: int = MAX_READERS) -> None:
        self.addr: list[int] = [0] * ADDR_PER_CL
        self.next: Optional[Bucket] = None
        self.entry: list[Entry] = [
            BitRwEntry() if bit_opts else RwEntry(max_readers) for _ in range(ENTRY_PER_CL)
        ]

    def chain(self) -> Iterator["Bucket"]:
        """Yield this bucket and every bucket chained after it."""
        bucket: Optional[Bucket] = self
        while bucket is not None:
            yield bucket
            bucket = bucket.next

    def remove_index(self, slot: int, node_id: int) -> bool:
        """Release ``node_id``'s lock in ``slot``; free the slot once it is unused."""
        entry = self.entry[slot]
        if entry.writer == node_id:
            entry.writer = SSHT_NO_WRITER
        else:
            entry.unset(node_id)
        if entry.is_empty():
            self.addr[slot] = 0
        return True

    def __str__(self) -> str:
        parts = []
        for bucket in self.chain():
            for address, entry in zip(bucket.addr, bucket.entry):
                if address:
                    parts.append(
                        f"{address:#x} (w: {entry.writer}, r: {_reader_ids(entry)})"
                    )
        return " | ".join(parts) if parts else "-"


def ssht_new(bit_opts: bool = False) -> list[Bucket]:
    """Create an empty table of ``NUM_BUCKETS`` buckets."""
    return [Bucket(bit_opts) for _ in range(NUM_BUCKETS)]


def ssht_remove(log: SshtLogSet, node_id: int, address: int, rw: RW) -> bool:
    """Release ``node_id``'s ``rw`` lock on ``address`` found through ``log``.

    The matching log record is dropped; the slot's address is left in place.
    Return whether a record for ``address`` was found.
    """
    for index, log_entry in enumerate(log):
        if log_entry.address == address:
            entry = log_entry.entry
            if rw == RW.WRITE:
                if entry.writer == node_id:
                    entry.writer = SSHT_NO_WRITER
            else:
                entry.unset(node_id)
            log.swap_remove(index)
            return True
    return False


def ht_format(buckets: Sequence[Bucket]) -> str:
    """Return one line per bucket, each prefixed with its index."""
    return "".join(f"[{i:02d}]: {bucket}\n" for i, bucket in enumerate(buckets))