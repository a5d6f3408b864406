"""
Weighted similarity graph over songs.

Edges are undirected and carry a *cost*: ``1 - similarity``, so a lower
weight means two songs are closer. Shortest paths are found with Dijkstra
over a linear-scan frontier, which is O(V^2) and fine at catalog scale.
"""

from __future__ import annotations
import math
import threading
from typing import Any, Hashable, List, Optional, Sequence

from tunegraph.models import Song
from tunegraph.structures import LinkedList, LinkedMap, LinkedSet

GENRE_WEIGHT = 0.6
ARTIST_WEIGHT = 0.4


def similarity_cost(a: Song, b: Song, genre_weight: float = GENRE_WEIGHT,
                    artist_weight: float = ARTIST_WEIGHT) -> float:
    """
    Edge cost between two songs.

    A shared genre contributes ``genre_weight`` and a shared primary artist
    ``artist_weight`` to the similarity; the cost is one minus that sum.

    Args:
        a: First song
        b: Second song
        genre_weight: Similarity credited for equal genres
        artist_weight: Similarity credited for equal primary artists

    Returns:
        Cost in [0, 1]; 0 for same genre and artist, 1 for nothing in common
    """
    similarity = 0.0
    if a.genre == b.genre:
        similarity += genre_weight
    if a.artist_id == b.artist_id:
        similarity += artist_weight
    return min(1.0, max(0.0, round(1.0 - similarity, 10)))


class SimilarityGraph:
    """
    Undirected weighted graph.

    Nodes are any value-comparable keys (the services use song ids). Every
    edge is stored in both adjacency maps with the same weight.
    """

    def __init__(self):
        self._adjacency: LinkedMap[Hashable, LinkedMap[Hashable, float]] = LinkedMap()
        self._lock = threading.RLock()

    def add_node(self, node: Hashable) -> None:
        """Add ``node`` with no edges; no-op if it is already present."""
        with self._lock:
            self._adjacency.put_if_absent(node, LinkedMap())

    def remove_node(self, node: Hashable) -> None:
        """Remove ``node`` and every edge touching it; no-op if unknown."""
        with self._lock:
            neighbors = self._adjacency.get(node)
            if neighbors is None:
                return
            for neighbor in neighbors.keys():
                back = self._adjacency.get(neighbor)
                if back is not None:
                    back.remove(node)
            self._adjacency.remove(node)

    def connect(self, a: Hashable, b: Hashable, weight: float) -> None:
        """
        Set the edge ``a <-> b`` to ``weight``.

        Missing nodes are added. Connecting a node to itself is ignored and
        reconnecting overwrites the previous weight.
        """
        if a == b:
            return
        with self._lock:
            self.add_node(a)
            self.add_node(b)
            self._adjacency[a].put(b, weight)
            self._adjacency[b].put(a, weight)

    def neighbors(self, node: Hashable) -> LinkedMap:
        """Return the adjacency map of ``node`` (empty if the node is unknown)."""
        with self._lock:
            found = self._adjacency.get(node)
            return found if found is not None else LinkedMap()

    def edge_weight(self, a: Hashable, b: Hashable) -> Optional[float]:
        with self._lock:
            return self.neighbors(a).get(b)

    def all_nodes(self) -> LinkedSet:
        with self._lock:
            return self._adjacency.key_set()

    def edge_count(self) -> int:
        with self._lock:
            return sum(len(n) for n in self._adjacency.values()) // 2

    def shortest_path(self, origin: Hashable, destination: Hashable) -> List[Any]:
        """
        Dijkstra from ``origin``, stopping once ``destination`` is settled.

        Among frontier nodes with equal distance the first one met in the
        scan is expanded first.

        Args:
            origin: Start node
            destination: Target node

        Returns:
            Nodes from origin to destination. If the destination cannot be
            reached the result is ``[destination]``; a single-element result
            therefore means "no path" unless origin == destination.
        """
        with self._lock:
            dist: LinkedMap[Hashable, float] = LinkedMap()
            prev: LinkedMap[Hashable, Hashable] = LinkedMap()
            for node in self._adjacency.keys():
                dist.put(node, math.inf)
            dist.put(origin, 0.0)

            visited: LinkedSet[Hashable] = LinkedSet()
            frontier: LinkedSet[Hashable] = LinkedSet([origin])

            while True:
                current = None
                best = math.inf
                for candidate in frontier:
                    d = dist.get(candidate)
                    if current is None or d < best:
                        best = d
                        current = candidate
                if current is None:
                    break

                frontier.remove(current)
                visited.add(current)
                if current == destination:
                    break

                neighbors = self._adjacency.get(current)
                if neighbors is None:
                    continue
                for neighbor, weight in neighbors.items():
                    if neighbor in visited:
                        continue
                    candidate_dist = dist.get(current) + weight
                    known = dist.get(neighbor)
                    if known is None or candidate_dist < known:
                        dist.put(neighbor, candidate_dist)
                        prev.put(neighbor, current)
                        frontier.add(neighbor)

            backwards: LinkedList[Hashable] = LinkedList()
            step = destination
            while step is not None:
                backwards.append(step)
                step = prev.get(step)
            return backwards.reversed_copy().to_list()

    def path_cost(self, path: Sequence[Hashable]) -> float:
        """Sum of edge weights along ``path``; ``inf`` if a hop is not an edge."""
        with self._lock:
            total = 0.0
            for a, b in zip(path, path[1:]):
                weight = self.neighbors(a).get(b)
                if weight is None:
                    return math.inf
                total += weight
            return total

    def __contains__(self, node: Any) -> bool:
        with self._lock:
            return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)
