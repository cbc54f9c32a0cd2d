"""A binary heap priority queue with a pluggable ordering."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary heap; ``less(a, b)`` true means ``a`` comes out before ``b``.

    With the default ordering this is a min-heap.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        less: Optional[Callable[[T, T], bool]] = None,
    ) -> None:
        self._less: Callable[[T, T], bool] = less or operator.lt
        self._data: list[T] = list(items)
        for idx in reversed(range(len(self._data) // 2)):
            self._sift_down(idx)

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if not self._less(data[idx], data[parent]):
                break
            data[idx], data[parent] = data[parent], data[idx]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data = self._data
        n = len(data)
        while True:
            best = idx
            for child in (2 * idx + 1, 2 * idx + 2):
                if child < n and self._less(data[child], data[best]):
                    best = child
            if best == idx:
                return
            data[idx], data[best] = data[best], data[idx]
            idx = best

    def push(self, value: T) -> None:
        """Add ``value`` to the queue."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T:
        """Remove and return the highest-priority element."""
        if not self._data:
            raise IndexError("pop() on an empty queue!")
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return root

    def top(self) -> T:
        """Return the highest-priority element without removing it."""
        if not self._data:
            raise IndexError("Peeking an empty queue!")
        return self._data[0]

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()