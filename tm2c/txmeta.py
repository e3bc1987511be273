"""Transaction metadata: the buffered write set, per-transaction and per-node statistics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, Optional

from .memory import MemInfo
from .shmalloc import SharedAllocator

__all__ = [
    "WRITE_SET_SIZE",
    "DataType",
    "WriteEntry",
    "WriteSet",
    "TxState",
    "Transaction",
    "NodeStats",
]

WRITE_SET_SIZE = 4

_TX_HEADER = "TX Statistics ------------------------------------------------\n"
_NODE_HEADER = "TXs Statistics for node --------------------------------------\n"
_FOOTER = "--------------------------------------------------------------\n"


class DataType(IntEnum):
    """Width of a buffered write."""

    TYPE_INT = 0
    TYPE_INT64 = 1


_RANGES = {
    DataType.TYPE_INT: (-(2**31), 2**31 - 1),
    DataType.TYPE_INT64: (-(2**63), 2**63 - 1),
}


def _check_value(datatype: DataType, value: int) -> int:
    low, high = _RANGES[datatype]
    if not low <= value <= high:
        raise ValueError(f"value {value!r} does not fit in {datatype.name}")
    return value


@dataclass
class WriteEntry:
    """One buffered write: internal address, data type and value."""

    address: int
    type: DataType
    value: int


class WriteSet:
    """Writes buffered by a transaction until it commits, one entry per address."""

    def __init__(self) -> None:
        self._entries: list[WriteEntry] = []

    def insert(self, datatype: DataType, value: int, address: int) -> WriteEntry:
        """Buffer a write of ``value`` to ``address``; a later write replaces an earlier one."""
        datatype = DataType(datatype)
        _check_value(datatype, value)
        existing = self.contains(address)
        if existing is not None:
            existing.type = datatype
            existing.value = value
            return existing
        entry = WriteEntry(address, datatype, value)
        self._entries.append(entry)
        return entry

    def contains(self, address: int) -> Optional[WriteEntry]:
        """Return the buffered write to ``address``, or ``None``."""
        return next((e for e in self._entries if e.address == address), None)

    def empty(self) -> "WriteSet":
        """Drop every buffered write and return this set."""
        self._entries.clear()
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WriteEntry]:
        return iter(self._entries)

    def __str__(self) -> str:
        return "".join(
            f"{e.address:#x} : {e.value} ({e.type.name})\n" for e in self._entries
        )


class TxState(Enum):
    """Life-cycle state of a transaction."""

    IDLE = 0
    RUNNING = 1
    ABORTED = 2
    COMMITTED = 3


class Transaction:
    """Descriptor of the running transaction of one node."""

    def __init__(self, shared_heap: Optional[SharedAllocator] = None) -> None:
        heap = shared_heap if shared_heap is not None else SharedAllocator(0)
        self.write_set = WriteSet()
        self.mem_info = MemInfo(heap)
        self.start_ts = 0
        self.retries = 0
        self.aborts = 0
        self.aborts_war = 0
        self.aborts_raw = 0
        self.aborts_waw = 0

    def reset(self) -> "Transaction":
        """Empty the write set and zero the counters; return this transaction."""
        self.write_set.empty()
        self.retries = 0
        self.aborts = 0
        self.aborts_war = 0
        self.aborts_raw = 0
        self.aborts_waw = 0
        return self

    def report(self) -> str:
        """Return the transaction's statistics as a text block."""
        return (
            _TX_HEADER
            + f"Retries     \t: {self.retries}\n"
            + f"Aborts      \t: {self.aborts}\n"
            + f"Aborts WAR  \t: {self.aborts_war}\n"
            + f"Aborts RAW  \t: {self.aborts_raw}\n"
            + f"Aborts WAW  \t: {self.aborts_waw}\n"
            + _FOOTER
        )


@dataclass
class NodeStats:
    """Transaction statistics accumulated by one node."""

    tx_starts: int = 0
    tx_committed: int = 0
    tx_aborted: int = 0
    max_retries: int = 0
    aborts_war: int = 0
    aborts_raw: int = 0
    aborts_waw: int = 0
    tx_duration: int = 1

    def report(self) -> str:
        """Return the node's statistics as a text block."""
        return (
            _NODE_HEADER
            + f"Starts      \t: {self.tx_starts}\n"
            + f"Commits     \t: {self.tx_committed}\n"
            + f"Aborts      \t: {self.tx_aborted}\n"
            + f"Max Retries \t: {self.max_retries}\n"
            + f"Aborts WAR  \t: {self.aborts_war}\n"
            + f"Aborts RAW  \t: {self.aborts_raw}\n"
            + f"Aborts WAW  \t: {self.aborts_waw}\n"
            + _FOOTER
        )