"""
Wiring of the catalog, graphs and services into one owned component.

Nothing here is a module-level singleton: each :class:`TuneGraph` owns its
own graphs, and every create/delete goes through it so the catalog, the
graphs and the tries stay consistent.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from loguru import logger

from tunegraph.catalog import Catalog
from tunegraph.config import Settings
from tunegraph.graph.export import graph_stats, similarity_to_networkx, social_to_networkx
from tunegraph.models import Song, User
from tunegraph.services import (
    RecommendationService,
    SearchService,
    SimilarityIndex,
    SocialService,
)


class TuneGraph:
    def __init__(self, catalog: Catalog, settings: Optional[Settings] = None):
        self.catalog = catalog
        self.settings = settings or Settings()
        self.similarity = SimilarityIndex(
            genre_weight=self.settings.genre_weight,
            artist_weight=self.settings.artist_weight,
        )
        self.social = SocialService(catalog)
        self.recommendations = RecommendationService(
            catalog,
            self.similarity,
            radio_size=self.settings.radio_size,
            discovery_size=self.settings.discovery_size,
            discovery_name=self.settings.discovery_name,
        )
        self.search = SearchService(catalog)

    def build(self) -> "TuneGraph":
        """Rebuild both graphs from the full catalog."""
        self.similarity.rebuild(self.catalog.songs())
        self.social.rebuild(self.catalog.users())
        self.search.invalidate()
        return self

    def create_song(self, song: Song) -> Song:
        others = self.catalog.songs()
        self.catalog.add_song(song)
        self.similarity.add_song(song, others)
        self.search.invalidate()
        logger.info(f"Song {song.id} '{song.title}' created")
        return song

    def delete_song(self, song_id: int) -> Song:
        song = self.catalog.remove_song(song_id)
        self.similarity.remove_song(song_id)
        self.search.invalidate()
        logger.info(f"Song {song_id} '{song.title}' deleted")
        return song

    def create_user(self, user: User) -> User:
        self.catalog.add_user(user)
        self.social.register_user(user)
        logger.info(f"User '{user.username}' created")
        return user

    def delete_user(self, user_id: int) -> User:
        user = self.catalog.remove_user(user_id)
        self.social.remove_user(user.username)
        logger.info(f"User '{user.username}' deleted")
        return user

    def stats(self) -> Dict[str, Any]:
        return {
            "similarity": graph_stats(similarity_to_networkx(self.similarity.graph)),
            "social": graph_stats(social_to_networkx(self.social.graph)),
            "songs": len(self.catalog.songs()),
            "users": len(self.catalog.users()),
        }


def build_app(catalog: Catalog, settings: Optional[Settings] = None) -> TuneGraph:
    """Create a :class:`TuneGraph` and build its graphs."""
    return TuneGraph(catalog, settings).build()
