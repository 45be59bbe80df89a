import pytest

from nutkit.assoc import HashTable
from nutkit.fnv import hash_fnv1a_32


def constant_hash(key):
    return 0


@pytest.mark.parametrize("size,nbuckets", [(1, 1), (2, 2), (5, 8), (8, 8), (9, 16)])
def test_size_rounds_up_to_power_of_two(size, nbuckets):
    table = HashTable(hash_fnv1a_32, size)
    assert table.nbuckets == nbuckets
    assert table.mask == nbuckets - 1


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        HashTable(hash_fnv1a_32, 0)


def test_set_and_find():
    table = HashTable(hash_fnv1a_32, 16)
    table.set(b"alpha", 1)
    table.set("beta", 2)
    assert table.find("alpha") == 1
    assert table.find(b"beta") == 2
    assert table.find(b"gamma") is None
    assert len(table) == 2


def test_set_replaces_existing():
    table = HashTable(hash_fnv1a_32, 4)
    table.set(b"key", "first")
    table.set(b"key", "second")
    assert table.find(b"key") == "second"
    assert len(table) == 1


def test_insert_duplicate_raises():
    table = HashTable(hash_fnv1a_32, 4)
    table.insert(b"key", 1)
    with pytest.raises(KeyError):
        table.insert(b"key", 2)
    assert table.find(b"key") == 1


def test_collisions_in_one_bucket():
    table = HashTable(constant_hash, 4)
    keys = [b"a", b"bb", b"ccc", b"dddd"]
    for number, key in enumerate(keys):
        table.insert(key, number)
    assert [table.find(key) for key in keys] == [0, 1, 2, 3]
    assert list(table) == list(reversed(keys))


def test_delete_removes_only_that_key():
    table = HashTable(constant_hash, 2)
    table.set(b"one", 1)
    table.set(b"two", 2)
    table.delete(b"one")
    assert table.find(b"one") is None
    assert table.find(b"two") == 2
    assert len(table) == 1


def test_delete_missing_is_ignored():
    table = HashTable(hash_fnv1a_32, 2)
    table.set(b"one", 1)
    table.delete(b"absent")
    assert len(table) == 1


def test_key_length_matters():
    table = HashTable(constant_hash, 1)
    table.set(b"ab", 1)
    assert table.find(b"a") is None
    assert table.find(b"abc") is None


def test_empty_key_rejected():
    table = HashTable(hash_fnv1a_32, 2)
    with pytest.raises(ValueError):
        table.set(b"", 1)


def test_none_data_rejected():
    table = HashTable(hash_fnv1a_32, 2)
    with pytest.raises(ValueError):
        table.insert(b"key", None)


def test_contains():
    table = HashTable(hash_fnv1a_32, 8)
    table.set("present", object())
    assert "present" in table
    assert "missing" not in table