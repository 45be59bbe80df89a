import pytest

from nutkit.crc import hash_crc32a
from nutkit.fnv import hash_fnv1a_32
from nutkit.hashkit import DistType, HashType, hash_function, hash_key
from nutkit.jenkins import hash_jenkins
from nutkit.md5 import hash_md5
from nutkit.murmur import hash_murmur

HASH_NAMES = [
    "one_at_a_time",
    "md5",
    "crc16",
    "crc32",
    "crc32a",
    "fnv1_64",
    "fnv1a_64",
    "fnv1_32",
    "fnv1a_32",
    "hsieh",
    "murmur",
    "jenkins",
]


def test_hash_type_order_and_names():
    assert [HashType(name) for name in HASH_NAMES] == list(HashType)
    assert [hash_function(name) for name in HASH_NAMES] == [
        hash_function(t) for t in HashType
    ]


def test_dist_type_order_and_names():
    names = ["ketama", "modula", "random"]
    assert [DistType(name) for name in names] == list(DistType)


def test_hash_function_by_member():
    assert hash_function(HashType.MD5) is hash_md5
    assert hash_function(HashType.JENKINS) is hash_jenkins
    assert hash_function(HashType.MURMUR) is hash_murmur


def test_hash_function_by_name():
    assert hash_function("fnv1a_32") is hash_fnv1a_32
    assert hash_function("crc32a") is hash_crc32a


def test_every_hash_type_has_a_function():
    for hash_type in HashType:
        assert 0 <= hash_key(hash_type, b"probe") <= 0xFFFFFFFF


def test_hash_key_crc32a_check_value():
    assert hash_key(HashType.CRC32A, b"123456789") == 0xCBF43926


def test_hash_key_matches_direct_call():
    key = b"user:1000"
    assert hash_key("md5", key) == hash_md5(key)
    assert hash_key(HashType.FNV1A_32, key) == hash_fnv1a_32(key)


def test_unknown_hash_name_raises():
    with pytest.raises(ValueError):
        hash_function("sha1")
    with pytest.raises(ValueError):
        hash_key("nope", b"key")