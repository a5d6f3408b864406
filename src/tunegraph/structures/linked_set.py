"""
Unordered set built on top of :class:`LinkedList`.

Duplicates are rejected with a linear scan using value equality, and
iteration follows insertion order.
"""

from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from tunegraph.structures.linked_list import LinkedList

T = TypeVar("T")


class LinkedSet(Generic[T]):
    """Set semantics over a linked list: O(n) add, contains and remove."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: LinkedList[T] = LinkedList()
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, value: T) -> bool:
        """
        Add ``value`` unless an equal element is already present.

        Returns:
            True if the value was inserted
        """
        if value in self._items:
            return False
        self._items.append(value)
        return True

    def remove(self, value: T) -> bool:
        """Remove ``value``; returns False (and does nothing) if absent."""
        return self._items.remove(value)

    # Mirrors the builtin set API
    discard = remove

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> list:
        return list(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (LinkedSet, set, frozenset)):
            return len(self) == len(other) and all(item in other for item in self)
        return NotImplemented

    def __repr__(self) -> str:
        return f"LinkedSet({list(self._items)!r})"
