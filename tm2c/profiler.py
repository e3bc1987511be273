"""A small tick-based profiler with a fixed number of measurement slots."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

__all__ = ["ENTRY_TIMES_SIZE", "Profiler"]

ENTRY_TIMES_SIZE = 16
_DEFAULT_REF_SPEED_GHZ = 2.1


class Profiler:
    """Accumulates ticks spent between ``start`` and ``stop`` for each slot.

    ``clock`` returns the current tick count. ``correction`` is the cost of
    reading the clock, subtracted from every sample.
    """

    def __init__(
        self,
        ref_speed_ghz: float = _DEFAULT_REF_SPEED_GHZ,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if ref_speed_ghz <= 0:
            raise ValueError(f"reference speed must be positive, got {ref_speed_ghz!r}")
        self.ref_speed_ghz = ref_speed_ghz
        self.clock: Callable[[], int] = clock if clock is not None else time.perf_counter_ns
        self.correction = 0
        self._entry = [0] * ENTRY_TIMES_SIZE
        self._total = [0] * ENTRY_TIMES_SIZE
        self._samples = [0] * ENTRY_TIMES_SIZE
        self._messages: list[str] = [""] * ENTRY_TIMES_SIZE

    @staticmethod
    def _check(pos: int) -> int:
        if not 0 <= pos < ENTRY_TIMES_SIZE:
            raise IndexError(f"slot {pos!r} outside 0..{ENTRY_TIMES_SIZE - 1}")
        return pos

    @property
    def samples(self) -> tuple[int, ...]:
        """Number of samples recorded in each slot."""
        return tuple(self._samples)

    @property
    def total_ticks(self) -> tuple[int, ...]:
        """Ticks accumulated in each slot."""
        return tuple(self._total)

    def set_message(self, pos: int, msg: str) -> None:
        """Label slot ``pos`` with ``msg`` for reports."""
        self._messages[self._check(pos)] = msg

    def start(self, pos: int = 0) -> None:
        """Record the entry time of slot ``pos``."""
        self._entry[self._check(pos)] = self.clock()

    def stop(self, pos: int = 0) -> None:
        """Add the ticks since the last ``start`` of slot ``pos`` as one sample."""
        self._check(pos)
        now = self.clock()
        self._total[pos] += now - self._entry[pos] - self.correction
        self._samples[pos] += 1

    def exclude(self, pos: int = 0) -> None:
        """Drop slot ``pos`` from reports by zeroing its sample count."""
        self._samples[self._check(pos)] = 0

    @contextmanager
    def measure(self, pos: int = 0) -> Iterator["Profiler"]:
        """Time the enclosed block in slot ``pos``."""
        self.start(pos)
        try:
            yield self
        finally:
            self.stop(pos)

    def _active(self) -> Iterator[tuple[int, str, int, int]]:
        for pos, (msg, samples, total) in enumerate(
            zip(self._messages, self._samples, self._total)
        ):
            if samples:
                yield pos, msg, samples, total

    def report_ticks(self) -> str:
        """Return a report of samples, total ticks and average ticks per slot."""
        lines = []
        for pos, msg, samples, total in self._active():
            lines.append(f"[{pos:02d}]{msg}:")
            lines.append(
                f"  samples: {samples:<16}| ticks: {total:<16}| avg ticks: {total // samples:<16}"
            )
        return "".join(line + "\n" for line in lines)

    def report_secs(self) -> str:
        """Return a report of samples, total seconds and average seconds per slot."""
        scale = self.ref_speed_ghz * 1.0e9
        lines = []
        for pos, msg, samples, total in self._active():
            lines.append(f"[{pos:02d}]{msg}:")
            lines.append(
                f"  samples: {samples:<16} | secs: {total / scale:<4.10f} "
                f"| avg ticks: {(total // samples) / scale:<4.10f}"
            )
        return "".join(line + "\n" for line in lines)