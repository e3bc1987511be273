"""Lock entry that keeps its readers as a 64-bit mask (up to 64 readers)."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["NO_READERS", "NO_WRITER", "MAX_READERS", "BitRwEntry"]

NO_READERS = 0x0
NO_WRITER = 0xFF
MAX_READERS = 64


def _check_reader(node_id: int) -> int:
    if not 0 <= node_id < MAX_READERS:
        raise ValueError(f"node id {node_id!r} outside 0..{MAX_READERS - 1}")
    return node_id


@dataclass
class BitRwEntry:
    """Readers as a bit mask and a single writer id (``NO_WRITER`` if none)."""

    readers: int = NO_READERS
    writer: int = NO_WRITER

    def is_member(self, node_id: int) -> bool:
        """Return whether ``node_id`` holds a read lock."""
        return bool((self.readers >> _check_reader(node_id)) & 0x1)

    def set(self, node_id: int) -> None:
        """Add ``node_id`` as a reader."""
        self.readers |= 1 << _check_reader(node_id)

    def unset(self, node_id: int) -> None:
        """Remove ``node_id`` from the readers."""
        self.readers &= ~(1 << _check_reader(node_id))

    def clear(self) -> None:
        """Drop all readers and the writer."""
        self.readers = NO_READERS
        self.writer = NO_WRITER

    def is_empty(self) -> bool:
        """Return whether there are neither readers nor a writer."""
        return self.readers == NO_READERS and self.writer == NO_WRITER

    def has_readers(self) -> bool:
        """Return whether at least one reader holds the entry."""
        return self.readers != NO_READERS

    def is_unique_reader(self, node_id: int) -> bool:
        """Return whether ``node_id`` is the one and only reader."""
        return self.readers == 1 << _check_reader(node_id)

    def fetch_readers(self, num_ues: int) -> list[bool]:
        """Return, for each of the first ``num_ues`` nodes, whether it reads."""
        if num_ues < 0:
            raise ValueError(f"number of nodes must not be negative, got {num_ues!r}")
        return [bool((self.readers >> i) & 0x1) for i in range(num_ues)]

    def set_writer(self, node_id: int) -> None:
        """Make ``node_id`` the writer."""
        if not 0 <= node_id < NO_WRITER:
            raise ValueError(f"writer id {node_id!r} outside 0..{NO_WRITER - 1}")
        self.writer = node_id

    def unset_writer(self) -> None:
        """Remove the writer."""
        self.writer = NO_WRITER

    def has_writer(self) -> bool:
        """Return whether a writer holds the entry."""
        return self.writer != NO_WRITER

    def is_writer(self, node_id: int) -> bool:
        """Return whether ``node_id`` is the writer."""
        return self.writer == node_id

    def readers_str(self) -> str:
        """Return the readers as a chain such as ``"0 -> 2 -> NULL\\n"``."""
        ids = [i for i in range(MAX_READERS) if (self.readers >> i) & 0x1]
        return "".join(f"{i} -> " for i in ids) + "NULL\n"