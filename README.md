# tm2c

Data structures and helpers behind a distributed software transactional
memory in which application nodes ask lock-service nodes for read and write
locks on addresses.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## What is inside

- `tm2c.core` — conflict kinds (`Conflict`), read/write requests (`RW`),
  RPC message types (`RpcRequestType`, `RpcReplyType`), platform settings
  (`Platform`, `cache_line_size`, `ref_speed_ghz`) and helpers that locate
  application and lock-service nodes given a predicate telling whether a
  node is an application node (`min_app_id`, `min_dsl_id`, `app_id_seq`,
  `dsl_id_seq`).
- `tm2c.hashing` — 32-bit integer hashes: `hash_tw`, `hash_32`, `hash_ptr`.
  Inputs outside the unsigned 32-bit range raise `ValueError`.
- `tm2c.util` — `XorShift96`, an iterator producing 64-bit xorshift values;
  `rand_range(r, rng=None)`, a value in `[1, r]`; `pow2roundup`, rounding a
  32-bit value up to a power of two (0 gives 1).
- `tm2c.shmalloc` — `SharedAllocator`, a bump allocator over a `bytearray`
  region that hands out offsets. Freed offsets go into a 256-slot ring; once
  more than two are waiting, `alloc` reuses the oldest regardless of size.
  Running past the end of the region raises `MemoryError`.
- `tm2c.memory` — `MemInfo`, transactional allocation: blocks from `malloc`
  and `shmalloc` are released by `on_abort`, blocks passed to `free` and
  `shfree` are released by `on_commit`. Shared blocks go back to the
  `SharedAllocator` it was given.
- `tm2c.profiler` — `Profiler`, 16 timing slots fed by `start`/`stop` or the
  `measure` context manager, with text reports from `report_ticks` and
  `report_secs`. The clock is pluggable (default `time.perf_counter_ns`).
- `tm2c.rwentry` — `BitRwEntry`, a lock entry holding readers as a 64-bit
  mask and a single writer id.
- `tm2c.ssht` — `RwEntry` (per-reader flags and a count), `Bucket` (three
  address slots with their entries, chained through `next`), `ssht_new`,
  `ssht_remove` and `ht_format`.
- `tm2c.sshtlog` — `SshtLogSet` and `LogEntry`, a node's log of the bucket
  slots it holds; `swap_remove` moves the last record into the removed place.
- `tm2c.txmeta` — `WriteSet`, `WriteEntry`, `DataType`, `Transaction`,
  `TxState` and `NodeStats` for transaction bookkeeping, with text reports
  from `Transaction.report` and `NodeStats.report`.

## Example

```python
from tm2c.hashing import hash_32
from tm2c.memory import MemInfo
from tm2c.shmalloc import SharedAllocator
from tm2c.txmeta import DataType, WriteSet
from tm2c.util import XorShift96, pow2roundup

bucket = hash_32(0x1000, 6)         # one of 64 buckets

ws = WriteSet()
ws.insert(DataType.TYPE_INT, 42, 0x1000)
entry = ws.contains(0x1000)         # the buffered write, or None
assert entry.value == 42

heap = SharedAllocator(1024)
mem = MemInfo(heap)
offset = mem.shmalloc(64)
mem.on_abort()                      # the 64 bytes go back to the heap's free ring

rng = XorShift96(1, 2, 3)
first = next(rng)

assert pow2roundup(100) == 128
```

## What the package does not do

It provides the pieces, not a running system. There is no message passing
between nodes, no lock-service loop that inserts into the lock table and
answers requests, no contention manager, and no driver that starts, retries,
aborts or commits transactions. `Transaction` and `WriteSet` hold state; they
do not write buffered values anywhere. There is no command-line tool.