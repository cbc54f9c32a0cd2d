"""A separately chained hash map that grows when its load factor is exceeded."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")

MAX_LOAD_FACTOR = 2.0
DEFAULT_BUCKET_COUNT = 10


@dataclass(slots=True)
class _Entry:
    key: Any
    value: Any


class HashMap(Generic[K, V]):
    """Hash map with chained buckets; doubles its buckets past a load of 2.0."""

    def __init__(
        self,
        items: Union[Mapping[K, V], Iterable[tuple[K, V]]] = (),
        bucket_count: Optional[int] = None,
    ) -> None:
        if isinstance(items, Mapping):
            pairs = list(items.items())
        else:
            pairs = list(items)
        if bucket_count is None:
            bucket_count = 2 * len(pairs) if pairs else DEFAULT_BUCKET_COUNT
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self._buckets: list[list[_Entry]] = [[] for _ in range(bucket_count)]
        self._size = 0
        for key, value in pairs:
            self.insert(key, value)

    # internals

    def _bucket(self, key: object) -> list[_Entry]:
        return self._buckets[hash(key) % len(self._buckets)]

    def _find(self, key: object) -> Optional[_Entry]:
        return next((e for e in self._bucket(key) if e.key == key), None)

    def _rehash_if_needed(self) -> None:
        if self.load_factor() > MAX_LOAD_FACTOR:
            self._rehash(len(self._buckets) * 2)

    def _rehash(self, new_bucket_count: int) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(new_bucket_count)]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry.key).append(entry)

    # modifiers

    def insert(self, key: K, value: V) -> None:
        """Insert ``key`` with ``value``, overwriting an existing value."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._bucket(key).append(_Entry(key, value))
        self._size += 1
        self._rehash_if_needed()

    # lookup

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def get_or_insert(self, key: K, default: Any = None) -> V:
        """Return the value for ``key``, inserting ``default`` if absent."""
        entry = self._find(key)
        if entry is not None:
            return entry.value
        self.insert(key, default)
        return default

    # removal and query

    def erase(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._size -= 1
                return True
        return False

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    # capacity

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Remove every entry, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def bucket_count(self) -> int:
        return len(self._buckets)

    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    # iteration and utilities

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def __str__(self) -> str:
        body = ", ".join(f'"{key}": {value}' for key, value in self.items())
        return "{" + body + "}"

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"

    def copy(self) -> "HashMap[K, V]":
        """Return an independent shallow copy with the same bucket count."""
        clone: HashMap[K, V] = HashMap(bucket_count=len(self._buckets))
        for key, value in self.items():
            clone.insert(key, value)
        return clone