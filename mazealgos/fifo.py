"""A first-in first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """FIFO queue: elements leave in the order they arrived."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("Cannot dequeue from an empty queue!")
        return self._items.popleft()

    def front(self) -> T:
        """Return the front element without removing it."""
        if not self._items:
            raise IndexError("front on empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back."""
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"