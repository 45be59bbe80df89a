import pytest

from nutkit.md5 import hash_md5, md5_signature


@pytest.mark.parametrize(
    "key, digest",
    [
        (b"", "d41d8cd98f00b204e9800998ecf8427e"),
        (b"a", "0cc175b9c0f1b6a831c399e269772661"),
        (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
        (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
        (
            b"abcdefghijklmnopqrstuvwxyz",
            "c3fcd3d76192e4007dfb496cca67e13b",
        ),
    ],
)
def test_signature_matches_rfc1321_vectors(key, digest):
    assert md5_signature(key) == bytes.fromhex(digest)


def test_signature_is_sixteen_bytes_for_long_input():
    assert len(md5_signature(b"x" * 1000)) == 16


def test_hash_md5_of_empty_key():
    assert hash_md5(b"") == 0xD98C1DD4


@pytest.mark.parametrize("key", [b"abc", b"server-0", b"\xff\x00\x80"])
def test_hash_md5_uses_leading_digest_bytes(key):
    assert hash_md5(key) == int.from_bytes(md5_signature(key)[:4], "little")


def test_bytes_like_inputs_agree():
    key = b"some key"
    assert hash_md5(bytearray(key)) == hash_md5(key)
    assert md5_signature(memoryview(key)) == md5_signature(key)