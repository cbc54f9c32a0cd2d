"""A doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class LinkedList(Generic[T]):
    """Doubly linked list with positional and value-based operations."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _unlink(self, node: _Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    # capacity

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    # indexing

    def at(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._node_at(index).data

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).data

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(index).data = value

    def front(self) -> T:
        if self._head is None:
            raise IndexError("front on empty list")
        return self._head.data

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("back on empty list")
        return self._tail.data

    # modifiers

    def prepend(self, value: T) -> None:
        node = _Node(value, None, self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: T) -> None:
        node = _Node(value, self._tail, None)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def pop_front(self) -> T:
        if self._head is None:
            raise IndexError("Cannot pop front an empty list!")
        node = self._head
        self._unlink(node)
        return node.data

    def pop_back(self) -> T:
        if self._tail is None:
            raise IndexError("Cannot pop back from an empty list!")
        node = self._tail
        self._unlink(node)
        return node.data

    def insert(self, index: int, value: T) -> None:
        """Insert before ``index``; an index past the end appends."""
        if index <= 0:
            self.prepend(value)
            return
        if index >= self._size:
            self.append(value)
            return
        after = self._node_at(index)
        before = after.prev
        node = _Node(value, before, after)
        before.next = node  # type: ignore[union-attr]
        after.prev = node
        self._size += 1

    def delete(self, index: int) -> None:
        """Delete the element at ``index``; past the end deletes the last."""
        if self._size == 0:
            return
        if index <= 0:
            self.pop_front()
        elif index >= self._size - 1:
            self.pop_back()
        else:
            self._unlink(self._node_at(index))

    def remove(self, value: T) -> int:
        """Remove every occurrence of ``value`` and return how many."""
        count = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.data == value:
                self._unlink(node)
                count += 1
            node = following
        return count

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    # lookup

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    # utilities

    def reverse(self) -> None:
        """Reverse the list in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def __str__(self) -> str:
        return " <=> ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other)
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "LinkedList[T]":
        """Return an independent shallow copy."""
        return LinkedList(self)