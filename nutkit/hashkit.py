"""Registry of key hash functions and key distribution strategies."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .crc import hash_crc16, hash_crc32, hash_crc32a
from .fnv import hash_fnv1_32, hash_fnv1_64, hash_fnv1a_32, hash_fnv1a_64
from .hsieh import hash_hsieh
from .jenkins import hash_jenkins
from .md5 import hash_md5
from .murmur import hash_murmur
from .one_at_a_time import hash_one_at_a_time

HashFunc = Callable[[bytes], int]


class HashType(Enum):
    """Key hash functions, valued by their configuration name."""

    ONE_AT_A_TIME = "one_at_a_time"
    MD5 = "md5"
    CRC16 = "crc16"
    CRC32 = "crc32"
    CRC32A = "crc32a"
    FNV1_64 = "fnv1_64"
    FNV1A_64 = "fnv1a_64"
    FNV1_32 = "fnv1_32"
    FNV1A_32 = "fnv1a_32"
    HSIEH = "hsieh"
    MURMUR = "murmur"
    JENKINS = "jenkins"


class DistType(Enum):
    """Key distribution strategies, valued by their configuration name."""

    KETAMA = "ketama"
    MODULA = "modula"
    RANDOM = "random"


_HASH_FUNCTIONS: dict[HashType, HashFunc] = {
    HashType.ONE_AT_A_TIME: hash_one_at_a_time,
    HashType.MD5: hash_md5,
    HashType.CRC16: hash_crc16,
    HashType.CRC32: hash_crc32,
    HashType.CRC32A: hash_crc32a,
    HashType.FNV1_64: hash_fnv1_64,
    HashType.FNV1A_64: hash_fnv1a_64,
    HashType.FNV1_32: hash_fnv1_32,
    HashType.FNV1A_32: hash_fnv1a_32,
    HashType.HSIEH: hash_hsieh,
    HashType.MURMUR: hash_murmur,
    HashType.JENKINS: hash_jenkins,
}


def hash_function(hash_type) -> HashFunc:
    """Return the hash function for a HashType or its configuration name.

    Raises ValueError for an unknown name.
    """
    return _HASH_FUNCTIONS[HashType(hash_type)]


def hash_key(hash_type, key) -> int:
    """Hash the key with the given hash type."""
    return hash_function(hash_type)(key)