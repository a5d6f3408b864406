"""
Singly linked list used as the storage layer for every other container.

Elements are compared by value (``==``), never by identity, so two records
that share an id are treated as the same element.
"""

from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T):
        self.value = value
        self.next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """
    Minimal singly linked list.

    ``append`` walks to the tail (O(n)), lookups by index or value are linear
    scans and ``len()`` is O(1) thanks to a running counter.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._head: Optional[_Node[T]] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.append(item)

    def append(self, value: T) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def prepend(self, value: T) -> None:
        """Add a value at the front of the list in O(1)."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        self._size += 1

    def remove(self, value: T) -> bool:
        """
        Remove the first element equal to ``value``.

        Args:
            value: Value to remove

        Returns:
            True if an element was removed, False if none matched
        """
        previous: Optional[_Node[T]] = None
        current = self._head
        while current is not None:
            if current.value == value:
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                self._size -= 1
                return True
            previous = current
            current = current.next
        return False

    def get(self, index: int) -> T:
        """
        Return the element at ``index``.

        Negative indices count from the end, like a Python list.

        Raises:
            IndexError: If the index is out of range
        """
        if index < 0:
            index += self._size
        if index < 0 or index >= self._size:
            raise IndexError(f"list index out of range: {index}")
        current = self._head
        for _ in range(index):
            current = current.next
        return current.value

    def reversed_copy(self) -> "LinkedList[T]":
        """Return a new list with the elements in reverse order."""
        result: LinkedList[T] = LinkedList()
        for value in self:
            result.prepend(value)
        return result

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def to_list(self) -> list:
        return list(self)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __contains__(self, value: Any) -> bool:
        for item in self:
            if item == value:
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedList):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
