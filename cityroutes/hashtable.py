"""A separate-chaining hash table for strings and integers."""

from __future__ import annotations

from typing import Any

from cityroutes.linkedlist import LinkedList


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime (meant for positive ``n``)."""
    if n in (2, 3):
        return True
    if n == 1 or n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def next_prime(n: int) -> int:
    """Return the first odd prime at least as large as ``n``."""
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n


class HashTable:
    """Hash table of strings or integers using chained buckets."""

    def __init__(self, not_found: Any, size: int = 101) -> None:
        self._not_found = not_found
        self._lists = [LinkedList() for _ in range(next_prime(size))]

    @property
    def not_found(self) -> Any:
        return self._not_found

    @property
    def table_size(self) -> int:
        return len(self._lists)

    def _bucket(self, x: Any) -> LinkedList:
        return self._lists[self.hash(x, len(self._lists))]

    def insert(self, x: Any) -> None:
        """Insert ``x``; nothing happens if it is already present."""
        bucket = self._bucket(x)
        if bucket.find(x).is_past_end():
            bucket.insert(x, bucket.zeroth())

    def remove(self, x: Any) -> None:
        self._bucket(x).remove(x)

    def find(self, x: Any) -> Any:
        """Return the stored item equal to ``x``, or the not-found value."""
        position = self._bucket(x).find(x)
        return self._not_found if position.is_past_end() else position.retrieve()

    def make_empty(self) -> None:
        for bucket in self._lists:
            bucket.make_empty()

    def hash(self, key: Any, table_size: int) -> int:
        """Return the bucket index of a string or integer key."""
        if isinstance(key, str):
            return sum(ord(ch) for ch in key) % table_size
        if isinstance(key, int):
            return abs(key) % table_size
        raise TypeError(f"unhashable key type: {type(key).__name__}")

    def copy(self) -> HashTable:
        duplicate = HashTable.__new__(HashTable)
        duplicate._not_found = self._not_found
        duplicate._lists = [bucket.copy() for bucket in self._lists]
        return duplicate

    def __contains__(self, x: Any) -> bool:
        return not self._bucket(x).find(x).is_past_end()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._lists)