"""Helpers for applications: random numbers and power-of-two rounding."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Protocol

__all__ = ["RAND_MAX", "XorShift96", "rand_range", "pow2roundup"]

RAND_MAX = 2**31 - 1
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class XorShift96:
    """Marsaglia's xorshift generator on three 64-bit words, period 2**96 - 1."""

    def __init__(self, x: int, y: int, z: int) -> None:
        self.x = x & _MASK64
        self.y = y & _MASK64
        self.z = z & _MASK64

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        x = self.x
        x ^= (x << 16) & _MASK64
        x ^= x >> 5
        x ^= (x << 1) & _MASK64
        t = x
        self.x = self.y
        self.y = self.z
        self.z = t ^ self.x ^ self.y
        return self.z


def rand_range(r: int, rng: Optional[_RandInt] = None) -> int:
    """Return a pseudo-random value in ``[1, r]``.

    Ranges wider than ``RAND_MAX`` are covered by summing several draws.
    ``rng`` must offer ``randint(a, b)``; the ``random`` module is used by default.
    """
    source = rng if rng is not None else random
    m = RAND_MAX
    v = 0
    while True:
        d = min(m, r)
        v += 1 + int(d * (source.randint(0, m) / (m + 1.0)))
        r -= m
        if r <= 0:
            return v


def pow2roundup(x: int) -> int:
    """Round a 32-bit value up to the next power of two (0 maps to 1).

    As with 32-bit arithmetic, values above ``2**31`` wrap round to 0.
    """
    if not 0 <= x <= _MASK32:
        raise ValueError(f"value {x!r} is not an unsigned 32-bit integer")
    if x == 0:
        return 1
    x -= 1
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return (x + 1) & _MASK32