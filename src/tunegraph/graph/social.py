"""
Unweighted social graph over users.

Following is collapsed into symmetric adjacency: the graph does not
distinguish "A follows B" from "B follows A".
"""

from __future__ import annotations
import threading
from collections import deque
from typing import Any, Hashable, List

from tunegraph.structures import LinkedMap, LinkedSet


class SocialGraph:
    """Undirected graph whose nodes are user keys (the services use usernames)."""

    def __init__(self):
        self._adjacency: LinkedMap[Hashable, LinkedSet[Hashable]] = LinkedMap()
        self._lock = threading.RLock()

    def add_node(self, user: Hashable) -> None:
        """Add ``user`` with no connections; no-op if already present."""
        with self._lock:
            self._adjacency.put_if_absent(user, LinkedSet())

    def remove_node(self, user: Hashable) -> None:
        """Disconnect ``user`` from everyone and drop it; no-op if unknown."""
        with self._lock:
            neighbors = self._adjacency.get(user)
            if neighbors is None:
                return
            for neighbor in neighbors.to_list():
                self.disconnect(user, neighbor)
            self._adjacency.remove(user)

    def connect(self, a: Hashable, b: Hashable) -> None:
        """Connect two users, adding either one if missing. Self-links are ignored."""
        if a == b:
            return
        with self._lock:
            self.add_node(a)
            self.add_node(b)
            self._adjacency[a].add(b)
            self._adjacency[b].add(a)

    def disconnect(self, a: Hashable, b: Hashable) -> None:
        with self._lock:
            if a in self._adjacency:
                self._adjacency[a].remove(b)
            if b in self._adjacency:
                self._adjacency[b].remove(a)

    def neighbors(self, user: Hashable) -> LinkedSet:
        with self._lock:
            found = self._adjacency.get(user)
            return found if found is not None else LinkedSet()

    def adjacency(self) -> LinkedMap:
        return self._adjacency

    def all_nodes(self) -> LinkedSet:
        with self._lock:
            return self._adjacency.key_set()

    def friends_of_friends(self, origin: Hashable) -> List[Any]:
        """
        Users at exactly two hops from ``origin``.

        Breadth-first search that never expands past distance 2. Direct
        neighbors are visited but not returned.

        Args:
            origin: User to start from

        Returns:
            Distance-2 users in discovery order; empty if origin is unknown
        """
        with self._lock:
            if origin not in self._adjacency:
                return []

            distance: LinkedMap[Hashable, int] = LinkedMap()
            distance.put(origin, 0)
            queue = deque([origin])
            suggestions: List[Any] = []

            while queue:
                current = queue.popleft()
                level = distance[current]
                if level >= 2:
                    continue
                for neighbor in self._adjacency.get_or_default(current, LinkedSet()):
                    if neighbor in distance:
                        continue
                    distance.put(neighbor, level + 1)
                    queue.append(neighbor)
                    if level + 1 == 2:
                        suggestions.append(neighbor)
            return suggestions

    def edge_count(self) -> int:
        with self._lock:
            return sum(len(n) for n in self._adjacency.values()) // 2

    def __contains__(self, user: Any) -> bool:
        with self._lock:
            return user in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)
