"""Per-node log of the lock-table slots a node holds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

__all__ = ["SSHT_LOG_SET_SIZE", "LogEntry", "SshtLogSet"]

SSHT_LOG_SET_SIZE = 8


@dataclass
class LogEntry:
    """Points at one slot of a bucket: its address and its lock entry."""

    bucket: Any
    slot: int

    @property
    def address(self) -> int:
        """The address currently stored in the slot."""
        return self.bucket.addr[self.slot]

    @property
    def entry(self) -> Any:
        """The lock entry of the slot."""
        return self.bucket.entry[self.slot]


class SshtLogSet:
    """Ordered collection of ``LogEntry`` records; removal swaps in the last."""

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def insert(self, bucket: Any, slot: int) -> LogEntry:
        """Record ``slot`` of ``bucket`` and return the new log entry."""
        log_entry = LogEntry(bucket, slot)
        self._entries.append(log_entry)
        return log_entry

    def empty(self) -> "SshtLogSet":
        """Forget all entries and return this log."""
        self._entries.clear()
        return self

    def swap_remove(self, index: int) -> LogEntry:
        """Remove the entry at ``index``, moving the last entry into its place."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"log index {index!r} out of range")
        removed = self._entries[index]
        last = self._entries.pop()
        if index < len(self._entries):
            self._entries[index] = last
        return removed

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)