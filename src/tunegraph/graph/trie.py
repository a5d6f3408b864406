"""
Prefix tree for title and artist-name autocompletion.

Words are case-folded to lowercase on insert and lookup.
"""

from __future__ import annotations
import threading
from typing import Dict, List


class TrieNode:
    __slots__ = ("children", "is_end_of_word")

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.is_end_of_word = False


class PrefixTrie:
    """
    Character trie.

    ``autocomplete`` returns every stored word under a prefix, without ranking
    or limit. Enumeration uses an explicit stack so long words cannot exhaust
    the interpreter's recursion limit.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0
        self._lock = threading.RLock()

    def insert(self, word: str) -> None:
        """Insert ``word``; inserting an existing word is a no-op."""
        with self._lock:
            node = self.root
            for ch in word.lower():
                node = node.children.setdefault(ch, TrieNode())
            if not node.is_end_of_word:
                node.is_end_of_word = True
                self._size += 1

    def autocomplete(self, prefix: str) -> List[str]:
        """
        Return every stored word starting with ``prefix``.

        Args:
            prefix: Prefix to complete; the empty string matches every word

        Returns:
            Lowercase matches, or an empty list if the prefix is not present
        """
        prefix = prefix.lower()
        with self._lock:
            node = self.root
            for ch in prefix:
                node = node.children.get(ch)
                if node is None:
                    return []

            results: List[str] = []
            stack = [(node, prefix)]
            while stack:
                current, word = stack.pop()
                if current.is_end_of_word:
                    results.append(word)
                # Reversed so children pop in insertion order
                for ch, child in reversed(list(current.children.items())):
                    stack.append((child, word + ch))
            return results

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        with self._lock:
            self.root = TrieNode()
            self._size = 0

    def __contains__(self, word: str) -> bool:
        with self._lock:
            node = self.root
            for ch in word.lower():
                node = node.children.get(ch)
                if node is None:
                    return False
            return node.is_end_of_word

    def __len__(self) -> int:
        return self._size
