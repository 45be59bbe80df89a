"""Bob Jenkins' lookup3 hash (``hashlittle``) with a fixed initial value."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_INITVAL = 13


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK32


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK32; a ^= _rot(c, 4); c = (c + b) & _MASK32
    b = (b - a) & _MASK32; b ^= _rot(a, 6); a = (a + c) & _MASK32
    c = (c - b) & _MASK32; c ^= _rot(b, 8); b = (b + a) & _MASK32
    a = (a - c) & _MASK32; a ^= _rot(c, 16); c = (c + b) & _MASK32
    b = (b - a) & _MASK32; b ^= _rot(a, 19); a = (a + c) & _MASK32
    c = (c - b) & _MASK32; c ^= _rot(b, 4); b = (b + a) & _MASK32
    return a, b, c


def _final(a: int, b: int, c: int) -> tuple[int, int, int]:
    c ^= b; c = (c - _rot(b, 14)) & _MASK32
    a ^= c; a = (a - _rot(c, 11)) & _MASK32
    b ^= a; b = (b - _rot(a, 25)) & _MASK32
    c ^= b; c = (c - _rot(b, 16)) & _MASK32
    a ^= c; a = (a - _rot(c, 4)) & _MASK32
    b ^= a; b = (b - _rot(a, 14)) & _MASK32
    c ^= b; c = (c - _rot(b, 24)) & _MASK32
    return a, b, c


def hash_jenkins(key) -> int:
    """32-bit lookup3 hash of the key, reading words little-endian."""
    data = bytes(memoryview(key))
    length = len(data)
    a = b = c = (0xDEADBEEF + (length & _MASK32) + _INITVAL) & _MASK32

    if not data:
        return c

    tail_len = length % 12 or 12
    split = length - tail_len

    for x, y, z in struct.iter_unpack("<III", data[:split]):
        a = (a + x) & _MASK32
        b = (b + y) & _MASK32
        c = (c + z) & _MASK32
        a, b, c = _mix(a, b, c)

    x, y, z = struct.unpack("<III", data[split:].ljust(12, b"\0"))
    a = (a + x) & _MASK32
    b = (b + y) & _MASK32
    c = (c + z) & _MASK32

    _, _, c = _final(a, b, c)
    return c