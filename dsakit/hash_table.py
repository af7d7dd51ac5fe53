"""A fixed-size hash table that resolves collisions by separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_SIZE = 7
_MULTIPLIER = 23


class HashTable:
    """Hash table with string keys, a fixed number of buckets and chained entries.

    Setting a key always adds a new entry to the end of its bucket; lookups
    return the first entry whose key matches.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"a hash table needs at least one bucket, got {size}")
        self.size = size
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(size)]

    def __repr__(self) -> str:
        return f"HashTable(size={self.size}, items={list(self.items())!r})"

    def hash(self, key: str) -> int:
        """Return the bucket index for ``key``."""
        index = 0
        for byte in key.encode("utf-8"):
            index = (index + byte * _MULTIPLIER) % self.size
        return index

    def set(self, key: str, value: Any) -> None:
        """Add the entry ``key -> value`` to the end of its bucket."""
        self._buckets[self.hash(key)].append((key, value))

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of the first entry for ``key``, or ``default``."""
        return next(
            (value for stored, value in self._buckets[self.hash(key)] if stored == key),
            default,
        )

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield every ``(key, value)`` entry, bucket by bucket."""
        for bucket in self._buckets:
            yield from bucket

    def keys(self) -> list[str]:
        """Return every key, bucket by bucket, in insertion order within a bucket."""
        return [key for key, _ in self.items()]

    def format_table(self) -> str:
        """Return a listing of every bucket and the entries chained in it."""
        lines: list[str] = []
        for index, bucket in enumerate(self._buckets):
            lines.append(f"{index}:")
            lines.extend(f"   {{{key}, {value}}}" for key, value in bucket)
        return "\n".join(lines)