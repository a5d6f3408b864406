"""
Keeps the song similarity graph in sync with the catalog.
"""

from __future__ import annotations
from typing import Iterable

from loguru import logger

from tunegraph.graph.similarity import (
    ARTIST_WEIGHT,
    GENRE_WEIGHT,
    SimilarityGraph,
    similarity_cost,
)
from tunegraph.models import Song


class SimilarityIndex:
    """
    Owner of a :class:`SimilarityGraph` keyed by song id.

    The graph is complete: every pair of songs is connected with the cost
    given by :func:`similarity_cost`.
    """

    def __init__(self, graph: SimilarityGraph | None = None,
                 genre_weight: float = GENRE_WEIGHT, artist_weight: float = ARTIST_WEIGHT):
        self.graph = graph if graph is not None else SimilarityGraph()
        self.genre_weight = genre_weight
        self.artist_weight = artist_weight

    def cost(self, a: Song, b: Song) -> float:
        return similarity_cost(a, b, self.genre_weight, self.artist_weight)

    def rebuild(self, songs: Iterable[Song]) -> None:
        """Replace the graph contents with every song and every pairwise edge."""
        songs = list(songs)
        logger.info(f"Building similarity graph for {len(songs)} songs")

        graph = SimilarityGraph()
        for song in songs:
            graph.add_node(song.id)
        for i, a in enumerate(songs):
            for b in songs[i + 1:]:
                if a != b:
                    graph.connect(a.id, b.id, self.cost(a, b))
        self.graph = graph

        logger.success(f"Similarity graph built: {len(self.graph)} nodes, "
                       f"{self.graph.edge_count()} edges")

    def add_song(self, song: Song, others: Iterable[Song]) -> None:
        """Add ``song`` and connect it to each of ``others``."""
        self.graph.add_node(song.id)
        connected = 0
        for other in others:
            if other == song:
                continue
            self.graph.connect(song.id, other.id, self.cost(song, other))
            connected += 1
        logger.debug(f"Song {song.id} added to similarity graph with {connected} edges")

    def remove_song(self, song_id: int) -> None:
        self.graph.remove_node(song_id)
        logger.debug(f"Song {song_id} removed from similarity graph")
