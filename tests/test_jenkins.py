import pytest

from nutkit.jenkins import hash_jenkins


def test_empty_key_returns_initial_state():
    # 0xdeadbeef + length 0 + initval 13
    assert hash_jenkins(b"") == 0xDEADBEFC


@pytest.mark.parametrize(
    "key",
    [b"a", b"foo", b"hello world", b"x" * 12, b"y" * 13, b"z" * 25, bytes(range(256))],
)
def test_result_is_32_bit_and_deterministic(key):
    first = hash_jenkins(key)
    assert 0 <= first <= 0xFFFFFFFF
    assert hash_jenkins(key) == first


def test_bytes_like_inputs_agree():
    key = b"memcached-key-42"
    assert hash_jenkins(bytearray(key)) == hash_jenkins(key)
    assert hash_jenkins(memoryview(key)) == hash_jenkins(key)


@pytest.mark.parametrize("length", [1, 5, 11, 12, 13, 24, 25, 40])
def test_single_byte_change_alters_hash(length):
    key = bytearray(b"k" * length)
    original = hash_jenkins(key)
    key[-1] ^= 0x01
    assert hash_jenkins(key) != original


@pytest.mark.parametrize("length", [3, 12, 23])
def test_trailing_zero_byte_changes_hash(length):
    key = b"q" * length
    assert hash_jenkins(key + b"\0") != hash_jenkins(key)


def test_distinct_keys_spread():
    values = {hash_jenkins(f"key:{n}".encode()) for n in range(1000)}
    assert len(values) == 1000