"""Paul Hsieh's SuperFastHash."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF


def hash_hsieh(key) -> int:
    """SuperFastHash of the key; an empty key hashes to 0."""
    data = bytes(memoryview(key))
    if not data:
        return 0

    rem = len(data) & 3
    body = len(data) - rem
    value = 0

    for low, high in struct.iter_unpack("<HH", data[:body]):
        value = (value + low) & _MASK32
        tmp = ((high << 11) ^ value) & _MASK32
        value = ((value << 16) ^ tmp) & _MASK32
        value = (value + (value >> 11)) & _MASK32

    tail = data[body:]
    if rem == 3:
        value = (value + (tail[0] | tail[1] << 8)) & _MASK32
        value ^= (value << 16) & _MASK32
        signed = tail[2] - 256 if tail[2] >= 0x80 else tail[2]
        value ^= (signed << 18) & _MASK32
        value = (value + (value >> 11)) & _MASK32
    elif rem == 2:
        value = (value + (tail[0] | tail[1] << 8)) & _MASK32
        value ^= (value << 11) & _MASK32
        value = (value + (value >> 17)) & _MASK32
    elif rem == 1:
        value = (value + tail[0]) & _MASK32
        value ^= (value << 10) & _MASK32
        value = (value + (value >> 1)) & _MASK32

    value ^= (value << 3) & _MASK32
    value = (value + (value >> 5)) & _MASK32
    value ^= (value << 4) & _MASK32
    value = (value + (value >> 17)) & _MASK32
    value ^= (value << 25) & _MASK32
    value = (value + (value >> 6)) & _MASK32
    return value