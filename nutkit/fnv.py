"""Fowler-Noll-Vo key hashes in the variants used by memcached clients.

Key bytes are treated as signed chars, so bytes of 0x80 and above are
sign-extended before they are mixed in.
"""

from __future__ import annotations

FNV_64_INIT = 0xCBF29CE484222325
FNV_64_PRIME = 0x100000001B3
FNV_32_INIT = 2166136261
FNV_32_PRIME = 16777619

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed_bytes(key):
    for byte in bytes(memoryview(key)):
        yield byte - 256 if byte >= 0x80 else byte


def hash_fnv1_64(key) -> int:
    """64-bit FNV-1, truncated to its low 32 bits."""
    value = FNV_64_INIT
    for byte in _signed_bytes(key):
        value = (value * FNV_64_PRIME) & _MASK64
        value ^= byte & _MASK64
    return value & _MASK32


def hash_fnv1a_64(key) -> int:
    """FNV-1a computed in 32 bits with the 64-bit constants truncated."""
    value = FNV_64_INIT & _MASK32
    prime = FNV_64_PRIME & _MASK32
    for byte in _signed_bytes(key):
        value ^= byte & _MASK32
        value = (value * prime) & _MASK32
    return value


def hash_fnv1_32(key) -> int:
    """32-bit FNV-1."""
    value = FNV_32_INIT
    for byte in _signed_bytes(key):
        value = (value * FNV_32_PRIME) & _MASK32
        value ^= byte & _MASK32
    return value


def hash_fnv1a_32(key) -> int:
    """32-bit FNV-1a."""
    value = FNV_32_INIT
    for byte in _signed_bytes(key):
        value ^= byte & _MASK32
        value = (value * FNV_32_PRIME) & _MASK32
    return value