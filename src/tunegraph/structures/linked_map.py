"""
Key/value map backed by a singly linked chain of entries.

``put`` overwrites the value of an existing key in place, otherwise the new
entry is prepended, so iteration yields the most recently added keys first.
"""

from __future__ import annotations
from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar

from tunegraph.structures.linked_list import LinkedList
from tunegraph.structures.linked_set import LinkedSet

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V):
        self.key = key
        self.value = value

    def __eq__(self, other: object) -> bool:
        # Entries are located by key only, so removal works with a bare key
        if isinstance(other, _Entry):
            return self.key == other.key
        return self.key == other

    def __repr__(self) -> str:
        return f"{self.key!r}: {self.value!r}"


class LinkedMap(Generic[K, V]):
    """Map with O(n) lookups and value-equality keys."""

    def __init__(self):
        self._entries: LinkedList[_Entry[K, V]] = LinkedList()

    def _find(self, key: Any) -> Optional[_Entry[K, V]]:
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite the value stored under ``key``."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._entries.prepend(_Entry(key, value))

    def put_if_absent(self, key: K, value: V) -> V:
        """Store ``value`` only if ``key`` is missing; return the stored value."""
        entry = self._find(key)
        if entry is not None:
            return entry.value
        self._entries.prepend(_Entry(key, value))
        return value

    def get(self, key: Any, default: Optional[V] = None) -> Optional[V]:
        entry = self._find(key)
        return entry.value if entry is not None else default

    def get_or_default(self, key: Any, default: V) -> V:
        value = self.get(key)
        return value if value is not None else default

    def remove(self, key: Any) -> bool:
        """Drop ``key``; returns False (and does nothing) if it is absent."""
        return self._entries.remove(key)

    def key_set(self) -> LinkedSet[K]:
        """Return a new set holding every key."""
        return LinkedSet(entry.key for entry in self._entries)

    def keys(self) -> Iterator[K]:
        return (entry.key for entry in self._entries)

    def values(self) -> Iterator[V]:
        return (entry.value for entry in self._entries)

    def items(self) -> Iterator[Tuple[K, V]]:
        return ((entry.key, entry.value) for entry in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __getitem__(self, key: Any) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return len(self._entries) > 0

    def __repr__(self) -> str:
        return "LinkedMap({" + ", ".join(repr(e) for e in self._entries) + "})"
