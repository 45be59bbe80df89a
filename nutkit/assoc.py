"""Fixed-size chained hash table keyed by byte strings.

The bucket count is the requested size rounded up to a power of two, and
a bucket is chosen by masking the key's hash with ``nbuckets - 1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Union

Key = Union[str, bytes, bytearray, memoryview]


@dataclass
class _Item:
    key: bytes
    data: Any


def _key_bytes(key: Key) -> bytes:
    data = key.encode() if isinstance(key, str) else bytes(memoryview(key))
    if not data:
        raise ValueError("key must not be empty")
    return data


class HashTable:
    """Hash table with a caller-supplied 32-bit hash function.

    New entries are placed at the head of their bucket. Stored data may not
    be ``None``, which ``find`` uses to report a missing key.
    """

    def __init__(self, hash_func: Callable[[bytes], int], size: int) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        power = 0
        while (1 << power) < size:
            power += 1
        self.nbuckets = 1 << power
        self.mask = self.nbuckets - 1
        self.hash = hash_func
        self._buckets: list[list[_Item]] = [[] for _ in range(self.nbuckets)]
        self._count = 0

    def _bucket(self, key: bytes) -> list[_Item]:
        return self._buckets[self.hash(key) & self.mask]

    @staticmethod
    def _lookup(bucket: list[_Item], key: bytes) -> Optional[_Item]:
        return next((item for item in bucket if item.key == key), None)

    def find(self, key: Key) -> Any:
        """Return the data stored under the key, or None if it is absent."""
        raw = _key_bytes(key)
        item = self._lookup(self._bucket(raw), raw)
        return None if item is None else item.data

    def set(self, key: Key, data: Any) -> None:
        """Store data under the key, replacing any existing value."""
        if data is None:
            raise ValueError("data must not be None")
        raw = _key_bytes(key)
        bucket = self._bucket(raw)
        item = self._lookup(bucket, raw)
        if item is not None:
            item.data = data
            return
        bucket.insert(0, _Item(raw, data))
        self._count += 1

    def insert(self, key: Key, data: Any) -> None:
        """Store data under a key that must not already be present."""
        if data is None:
            raise ValueError("data must not be None")
        raw = _key_bytes(key)
        bucket = self._bucket(raw)
        if self._lookup(bucket, raw) is not None:
            raise KeyError(raw)
        bucket.insert(0, _Item(raw, data))
        self._count += 1

    def delete(self, key: Key) -> None:
        """Remove the key if present; a missing key is ignored."""
        raw = _key_bytes(key)
        bucket = self._bucket(raw)
        for position, item in enumerate(bucket):
            if item.key == raw:
                del bucket[position]
                self._count -= 1
                return

    def __contains__(self, key: object) -> bool:
        try:
            return self.find(key) is not None  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[bytes]:
        for bucket in self._buckets:
            for item in bucket:
                yield item.key

    def __len__(self) -> int:
        return self._count