"""MurmurHash2 with a length-derived seed."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_M = 0x5BD1E995
_R = 24


def hash_murmur(key) -> int:
    """MurmurHash2 of the key, reading 4-byte blocks little-endian."""
    data = bytes(memoryview(key))
    length = len(data) & _MASK32
    seed = (0xDEADBEEF * length) & _MASK32
    value = seed ^ length

    rem = len(data) & 3
    body = len(data) - rem
    for (block,) in struct.iter_unpack("<I", data[:body]):
        block = (block * _M) & _MASK32
        block ^= block >> _R
        block = (block * _M) & _MASK32
        value = (value * _M) & _MASK32
        value ^= block

    tail = data[body:]
    if rem == 3:
        value ^= tail[2] << 16
    if rem >= 2:
        value ^= tail[1] << 8
    if rem >= 1:
        value ^= tail[0]
        value = (value * _M) & _MASK32

    value ^= value >> 13
    value = (value * _M) & _MASK32
    value ^= value >> 15
    return value