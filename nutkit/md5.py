"""MD5 digest of a key and the 32-bit key hash built from it."""

from __future__ import annotations

import hashlib


def md5_signature(key) -> bytes:
    """Return the 16-byte MD5 digest of the key."""
    return hashlib.md5(bytes(memoryview(key)), usedforsecurity=False).digest()


def hash_md5(key) -> int:
    """First four digest bytes of the key's MD5, read little-endian."""
    return int.from_bytes(md5_signature(key)[:4], "little")