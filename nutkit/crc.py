"""CRC based key hashes: CRC-16 (XMODEM table) and two CRC-32 variants."""

from __future__ import annotations

import zlib

_MASK32 = 0xFFFFFFFF


def _build_crc16_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            crc = (crc << 1) ^ 0x1021 if crc & 0x8000 else crc << 1
        table.append(crc & 0xFFFF)
    return tuple(table)


_CRC16_TABLE = _build_crc16_table()


def _as_bytes(key) -> bytes:
    return bytes(memoryview(key))


def hash_crc16(key) -> int:
    """CRC-16 with polynomial 0x1021 and zero seed.

    The running value is kept at 32 bits rather than 16, so longer keys
    carry bits above the low 16 into the result.
    """
    crc = 0
    for byte in _as_bytes(key):
        crc = ((crc << 8) & _MASK32) ^ _CRC16_TABLE[((crc >> 8) ^ byte) & 0xFF]
    return crc


def hash_crc32(key) -> int:
    """CRC-32 as computed by libmemcached: bits 16..30 of the standard CRC-32."""
    return (zlib.crc32(_as_bytes(key)) >> 16) & 0x7FFF


def hash_crc32a(key) -> int:
    """Standard CRC-32 (IEEE 802.3) of the key."""
    return zlib.crc32(_as_bytes(key)) & _MASK32