"""A hash table of string keys to floats with separately chained synonyms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


def get_hash(key: str, size: int) -> int:
    """Map key to a bucket index in 0..size-1: one plus the character codes, modulo size."""
    return (1 + sum(ord(char) for char in key)) % size


@dataclass
class _Item:
    key: str
    value: float


class HashTable:
    """Hash table whose colliding items are chained, newest first."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self._size = size
        self._buckets: list[list[_Item]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of buckets."""
        return self._size

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def __iter__(self) -> Iterator[tuple[str, float]]:
        """Yield (key, value) pairs bucket by bucket, each chain newest first."""
        for bucket in self._buckets:
            for item in bucket:
                yield item.key, item.value

    def _bucket(self, key: str) -> list[_Item]:
        return self._buckets[get_hash(key, self._size)]

    def search(self, key: str) -> _Item | None:
        """Return the item stored under key, or None."""
        return next((item for item in self._bucket(key) if item.key == key), None)

    def insert(self, key: str, value: float) -> None:
        """Store value under key, replacing an existing value; new keys go first in their chain."""
        item = self.search(key)
        if item is not None:
            item.value = value
        else:
            self._bucket(key).insert(0, _Item(key, value))

    def get(self, key: str) -> float | None:
        """Return the value stored under key, or None."""
        item = self.search(key)
        return None if item is None else item.value

    def delete(self, key: str) -> None:
        """Remove the item stored under key; nothing if there is none."""
        bucket = self._bucket(key)
        for position, item in enumerate(bucket):
            if item.key == key:
                del bucket[position]
                return

    def delete_all(self) -> None:
        """Remove every item, leaving the table as after creation."""
        for bucket in self._buckets:
            bucket.clear()