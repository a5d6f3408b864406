"""
Autocompletion of song titles and artist names.
"""

from __future__ import annotations
from typing import List

from loguru import logger

from tunegraph.catalog import Catalog
from tunegraph.graph.trie import PrefixTrie
from tunegraph.services.records import SongSummary


class SearchService:
    """
    Prefix search backed by two tries.

    Each trie is filled lazily from the catalog the first time a lookup finds
    it empty; call :meth:`invalidate` after catalog changes.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.titles = PrefixTrie()
        self.artists = PrefixTrie()

    # Tries are filled off to the side and swapped in whole, so a lookup
    # never reads one that is only partly populated.
    def _ensure_titles(self) -> PrefixTrie:
        trie = self.titles
        if trie.is_empty():
            trie = PrefixTrie()
            for song in self.catalog.songs():
                trie.insert(song.title)
            self.titles = trie
            logger.debug(f"Title trie rebuilt with {len(trie)} titles")
        return trie

    def _ensure_artists(self) -> PrefixTrie:
        trie = self.artists
        if trie.is_empty():
            trie = PrefixTrie()
            for artist in self.catalog.artists():
                trie.insert(artist.name)
            self.artists = trie
            logger.debug(f"Artist trie rebuilt with {len(trie)} names")
        return trie

    def autocomplete_titles(self, prefix: str) -> List[SongSummary]:
        """Songs whose title starts with ``prefix`` (case-insensitive), ordered by id."""
        matches = self._ensure_titles().autocomplete(prefix)
        if not matches:
            return []
        songs = sorted(self.catalog.songs_by_title(matches), key=lambda s: s.id)
        return [SongSummary.from_song(s) for s in songs]

    def autocomplete_artists(self, prefix: str) -> List[str]:
        """Artist names (as stored in the catalog) starting with ``prefix``."""
        matches = set(self._ensure_artists().autocomplete(prefix))
        return sorted(a.name for a in self.catalog.artists() if a.name.lower() in matches)

    def songs_by_artist_prefix(self, prefix: str) -> List[SongSummary]:
        """Songs by any artist whose name starts with ``prefix``."""
        matches = self._ensure_artists().autocomplete(prefix)
        if not matches:
            return []
        songs = sorted(self.catalog.songs_by_artist_name(matches), key=lambda s: s.id)
        return [SongSummary.from_song(s) for s in songs]

    def invalidate(self) -> None:
        self.titles = PrefixTrie()
        self.artists = PrefixTrie()
