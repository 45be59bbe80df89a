"""Bob Jenkins' one-at-a-time hash."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def hash_one_at_a_time(key) -> int:
    """One-at-a-time hash; key bytes are read as signed chars."""
    value = 0
    for byte in bytes(memoryview(key)):
        signed = byte - 256 if byte >= 0x80 else byte
        value = (value + (signed & _MASK32)) & _MASK32
        value = (value + (value << 10)) & _MASK32
        value ^= value >> 6
    value = (value + (value << 3)) & _MASK32
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK32
    return value