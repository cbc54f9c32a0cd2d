"""A growable array that tracks an explicit capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Vector(Generic[T]):
    """Dynamic array whose capacity doubles when it fills up."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, count: int, value: Any = None) -> "Vector[Any]":
        """Create a vector holding ``count`` copies of ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        return cls([value] * count)

    def _grow(self) -> None:
        self.reserve(self._capacity * 2 if self._capacity else 1)

    # modifiers

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._grow()
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("popping on an empty vector!")
        return self._items.pop()

    # access

    def at(self, idx: int) -> T:
        """Return the element at ``idx``, checking the range."""
        if not 0 <= idx < len(self._items):
            raise IndexError("[Vector.at()] idx is out of range in vector!")
        return self._items[idx]

    def __getitem__(self, idx: int) -> T:
        return self._items[idx]

    def __setitem__(self, idx: int, value: T) -> None:
        self._items[idx] = value

    def front(self) -> T:
        """Return the first element."""
        if not self._items:
            raise IndexError("[Vector.front()] This vector is empty!")
        return self._items[0]

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("[Vector.back()] This vector is empty!")
        return self._items[-1]

    # capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        """Number of elements the vector can hold before growing."""
        return self._capacity

    def reserve(self, new_cap: int) -> None:
        """Raise the capacity to at least ``new_cap``."""
        if new_cap > self._capacity:
            self._capacity = new_cap

    def shrink_fit(self) -> None:
        """Reduce the capacity to the current length."""
        if self._capacity > len(self._items):
            self._capacity = len(self._items)

    def clear(self) -> None:
        """Remove all elements, keeping the capacity."""
        self._items.clear()

    # utilities

    def debug_vec(self) -> str:
        """Render the elements as ``[a, b, c]``."""
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __str__(self) -> str:
        return self.debug_vec()

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "Vector[T]":
        """Return an independent shallow copy."""
        return Vector(self._items)