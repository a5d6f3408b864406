"""
Tests for the linked list, set and map primitives.
"""

import pytest

from tunegraph.models import Genre, Song, User
from tunegraph.structures import LinkedList, LinkedMap, LinkedSet


class TestLinkedList:
    """Tests for LinkedList."""

    def test_append_and_iterate_in_order(self):
        """Appended values come back in insertion order."""
        lst = LinkedList()
        for v in [3, 1, 2]:
            lst.append(v)

        assert list(lst) == [3, 1, 2]
        assert len(lst) == 3

    def test_get_by_index(self):
        """Indexed access walks the chain, negative indices count from the end."""
        lst = LinkedList(["a", "b", "c"])

        assert lst.get(0) == "a"
        assert lst[2] == "c"
        assert lst[-1] == "c"

    def test_get_out_of_range(self):
        """Out of range indices raise IndexError."""
        lst = LinkedList([1])

        with pytest.raises(IndexError):
            lst.get(1)
        with pytest.raises(IndexError):
            LinkedList().get(0)

    def test_remove_first_match_only(self):
        """remove drops the first equal element and keeps the rest."""
        lst = LinkedList([1, 2, 1, 3])

        assert lst.remove(1) is True
        assert list(lst) == [2, 1, 3]
        assert len(lst) == 3

    def test_remove_missing_is_noop(self):
        """Removing an absent value changes nothing."""
        lst = LinkedList([1, 2])

        assert lst.remove(5) is False
        assert list(lst) == [1, 2]
        assert len(lst) == 2

    def test_remove_uses_value_equality(self):
        """Two song records with the same id are the same element."""
        lst = LinkedList([Song(1, "A", Genre.ROCK, 1)])

        lst.remove(Song(1, "Renamed", Genre.POP, 9))
        assert len(lst) == 0

    def test_reversed_copy(self):
        """reversed_copy leaves the original untouched."""
        lst = LinkedList([1, 2, 3])

        assert list(lst.reversed_copy()) == [3, 2, 1]
        assert list(lst) == [1, 2, 3]

    def test_prepend_and_contains(self):
        lst = LinkedList([2])
        lst.prepend(1)

        assert list(lst) == [1, 2]
        assert 1 in lst
        assert 5 not in lst


class TestLinkedSet:
    """Tests for LinkedSet."""

    def test_rejects_duplicates(self):
        """Adding an equal value twice keeps one copy."""
        s = LinkedSet()

        assert s.add("x") is True
        assert s.add("x") is False
        assert len(s) == 1

    def test_value_equality_for_users(self):
        """Users are deduplicated by username."""
        s = LinkedSet()
        s.add(User(1, "ana"))
        s.add(User(2, "ana"))

        assert len(s) == 1
        assert User(99, "ana") in s

    def test_insertion_order(self):
        s = LinkedSet([3, 1, 3, 2])

        assert list(s) == [3, 1, 2]

    def test_remove(self):
        """remove delegates to the list and ignores missing values."""
        s = LinkedSet([1, 2])
        s.remove(1)
        s.remove(42)

        assert list(s) == [2]

    def test_equality_with_builtin_set(self):
        assert LinkedSet([1, 2]) == {2, 1}
        assert LinkedSet([1, 2]) != {1}


class TestLinkedMap:
    """Tests for LinkedMap."""

    def test_put_and_get(self):
        m = LinkedMap()
        m.put("a", 1)

        assert m.get("a") == 1
        assert m["a"] == 1
        assert m.get("missing") is None

    def test_put_overwrites_existing_key(self):
        """A second put on the same key replaces the value without adding an entry."""
        m = LinkedMap()
        m.put("a", 1)
        m.put("a", 2)

        assert m.get("a") == 2
        assert len(m) == 1

    def test_new_keys_are_prepended(self):
        """New entries go to the front of the chain."""
        m = LinkedMap()
        for key in ["a", "b", "c"]:
            m.put(key, key.upper())

        assert list(m.keys()) == ["c", "b", "a"]

    def test_remove(self):
        m = LinkedMap()
        m.put("a", 1)
        m.put("b", 2)

        assert m.remove("a") is True
        assert m.remove("a") is False
        assert "a" not in m
        assert list(m.items()) == [("b", 2)]

    def test_key_set_is_derived_copy(self):
        """key_set returns a LinkedSet that does not track later changes."""
        m = LinkedMap()
        m.put(1, "x")
        keys = m.key_set()
        m.put(2, "y")

        assert isinstance(keys, LinkedSet)
        assert keys == {1}

    def test_get_or_default(self):
        m = LinkedMap()
        m.put("a", 0.0)

        assert m.get_or_default("a", 5.0) == 0.0
        assert m.get_or_default("b", 5.0) == 5.0

    def test_getitem_missing_raises_key_error(self):
        with pytest.raises(KeyError):
            LinkedMap()["nope"]

    def test_put_if_absent(self):
        m = LinkedMap()

        assert m.put_if_absent("a", 1) == 1
        assert m.put_if_absent("a", 2) == 1
        assert m["a"] == 1

    def test_song_keys_compare_by_id(self):
        """Two copies of a song are one key."""
        m = LinkedMap()
        m.put(Song(1, "A", Genre.ROCK, 1), 0.5)
        m.put(Song(1, "A (live)", Genre.ROCK, 1), 0.7)

        assert len(m) == 1
        assert m[Song(1, "", Genre.POP, 0)] == 0.7
