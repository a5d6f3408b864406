"""
Radio queues and weekly discovery playlists built from the similarity graph.
"""

from __future__ import annotations
from typing import List

from loguru import logger

from tunegraph.catalog import Catalog
from tunegraph.services.records import Playlist, RadioQueue, SongSummary
from tunegraph.services.similarity import SimilarityIndex
from tunegraph.structures import LinkedSet


class RecommendationService:
    """
    Recommendation artifacts over a :class:`SimilarityIndex`.

    Existence checks run against the catalog before the graph is consulted;
    the graph itself never reports missing songs.
    """

    def __init__(self, catalog: Catalog, index: SimilarityIndex,
                 radio_size: int = 10, discovery_size: int = 15,
                 discovery_name: str = "Weekly Discovery"):
        self.catalog = catalog
        self.index = index
        self.radio_size = radio_size
        self.discovery_size = discovery_size
        self.discovery_name = discovery_name

    def radio_queue(self, song_id: int) -> RadioQueue:
        """
        Build a radio queue from a seed song.

        The seed's direct neighbors are ranked by ascending cost (ties broken
        by song id) and the first ``radio_size`` are returned.

        Args:
            song_id: Seed song id

        Returns:
            RadioQueue with the most similar songs first

        Raises:
            NotFoundError: If the seed song is not in the catalog
        """
        seed = self.catalog.require_song(song_id)
        neighbors = self.index.graph.neighbors(seed.id)

        ranked = sorted(neighbors.items(), key=lambda item: (item[1], item[0]))
        queue: List[SongSummary] = []
        for neighbor_id, _ in ranked[:self.radio_size]:
            song = self.catalog.get_song(neighbor_id)
            if song is not None:
                queue.append(SongSummary.from_song(song))

        logger.debug(f"Radio for song {seed.id}: {len(queue)} tracks")
        return RadioQueue(seed_song_id=seed.id, queue=queue)

    def weekly_discovery(self, user_id: int) -> Playlist:
        """
        Build the weekly discovery playlist for a user.

        For each favorite, a shortest path is computed towards every other
        non-favorite song in the graph; the first hop of each path is a
        candidate. Candidates are deduplicated in discovery order, songs the
        user already favorites are skipped, and the list is capped at
        ``discovery_size``.

        Raises:
            NotFoundError: If the user is not in the catalog
        """
        user = self.catalog.require_user(user_id)
        favorites = list(user.favorite_song_ids)
        if not favorites:
            logger.debug(f"User {user.username} has no favorites, discovery is empty")
            return Playlist(name=self.discovery_name)

        graph = self.index.graph
        favorite_set = set(favorites)
        candidates: LinkedSet[int] = LinkedSet()
        all_songs = graph.all_nodes()

        for favorite in favorites:
            if favorite not in graph:
                logger.warning(f"Favorite song {favorite} of {user.username} is not in the similarity graph")
                continue
            for target in all_songs:
                if target == favorite or target in favorite_set:
                    continue
                path = graph.shortest_path(favorite, target)
                if len(path) > 1:
                    step = path[1]
                    if step not in favorite_set:
                        candidates.add(step)

        songs: List[SongSummary] = []
        for song_id in candidates:
            if len(songs) >= self.discovery_size:
                break
            song = self.catalog.get_song(song_id)
            if song is not None:
                songs.append(SongSummary.from_song(song))

        logger.info(f"Weekly discovery for {user.username}: {len(songs)} songs "
                    f"from {len(candidates)} candidates")
        return Playlist(name=self.discovery_name, songs=songs)
