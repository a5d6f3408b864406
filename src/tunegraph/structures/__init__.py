"""
Container primitives for tunegraph.

Linked list, set and map with value-equality semantics. They back the
similarity graph, the social graph and the prefix trie results.
"""

from .linked_list import LinkedList
from .linked_set import LinkedSet
from .linked_map import LinkedMap

__all__ = ["LinkedList", "LinkedSet", "LinkedMap"]
