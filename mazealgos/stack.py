"""A last-in first-out stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack; the last element pushed is the first popped."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("Cannot pop from an empty stack!")
        return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top on empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[T]:
        """Iterate from bottom to top."""
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def copy(self) -> "Stack[T]":
        """Return an independent shallow copy."""
        return Stack(self._items)