"""Integer hash functions on 32-bit words."""

from __future__ import annotations

__all__ = ["GOLDEN_RATIO_PRIME_32", "hash_tw", "hash_32", "hash_ptr"]

GOLDEN_RATIO_PRIME_32 = 0x9E370001
_MASK32 = 0xFFFFFFFF


def _check_u32(value: int) -> int:
    if not 0 <= value <= _MASK32:
        raise ValueError(f"value {value!r} is not an unsigned 32-bit integer")
    return value


def hash_tw(key: int) -> int:
    """Thomas Wang's 32-bit integer mix."""
    key = _check_u32(key)
    key = (key + (~(key << 15) & _MASK32)) & _MASK32
    key ^= key >> 10
    key = (key + (key << 3)) & _MASK32
    key ^= key >> 6
    key = (key + (~(key << 11) & _MASK32)) & _MASK32
    key ^= key >> 16
    return key


def hash_32(val: int, bits: int) -> int:
    """Multiplicative hash of ``val`` keeping the top ``bits`` bits."""
    val = _check_u32(val)
    if not 1 <= bits <= 32:
        raise ValueError(f"bits must be between 1 and 32, got {bits!r}")
    return ((val * GOLDEN_RATIO_PRIME_32) & _MASK32) >> (32 - bits)


def hash_ptr(ptr: int, bits: int) -> int:
    """Hash an address; only its low 32 bits take part."""
    if ptr < 0:
        raise ValueError(f"address {ptr!r} is negative")
    return hash_32(ptr & _MASK32, bits)