"""
In-memory entity arena.

The catalog owns every artist, song and user record. Graphs only ever hold
keys (song ids, usernames), and relationships between entities are id sets,
so there are no object back-references to keep in sync.
"""

from __future__ import annotations
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from loguru import logger

from tunegraph.exceptions import ConfigError, NotFoundError, ValidationError
from tunegraph.models import Artist, Genre, Song, User


class Catalog:
    """
    Arena of artists, songs and users indexed by id.

    Lookups by username are served from a secondary index.
    """

    def __init__(self):
        self._artists: Dict[int, Artist] = {}
        self._songs: Dict[int, Song] = {}
        self._users: Dict[int, User] = {}
        self._usernames: Dict[str, int] = {}

    # Artists

    def add_artist(self, artist: Artist) -> Artist:
        if artist.id in self._artists:
            raise ValidationError(f"Artist {artist.id} already exists")
        self._artists[artist.id] = artist
        return artist

    def get_artist(self, artist_id: int) -> Optional[Artist]:
        return self._artists.get(artist_id)

    def artists(self) -> List[Artist]:
        return list(self._artists.values())

    # Songs

    def add_song(self, song: Song) -> Song:
        """
        Register a song.

        Raises:
            ValidationError: If the id is taken or the artist is unknown
        """
        if song.id in self._songs:
            raise ValidationError(f"Song {song.id} already exists")
        if song.artist_id not in self._artists:
            raise ValidationError(f"Song {song.id} references unknown artist {song.artist_id}")
        self._songs[song.id] = song
        return song

    def remove_song(self, song_id: int) -> Song:
        """Remove a song and drop it from every user's favorites."""
        song = self.require_song(song_id)
        del self._songs[song_id]
        for user in self._users.values():
            user.remove_favorite(song_id)
        return song

    def get_song(self, song_id: int) -> Optional[Song]:
        return self._songs.get(song_id)

    def require_song(self, song_id: int) -> Song:
        song = self._songs.get(song_id)
        if song is None:
            raise NotFoundError(f"Song with id {song_id} not found")
        return song

    def songs(self) -> List[Song]:
        return list(self._songs.values())

    def songs_by_title(self, titles: Iterable[str]) -> List[Song]:
        """Return songs whose title matches any of ``titles`` ignoring case."""
        wanted = {t.lower() for t in titles}
        return [s for s in self._songs.values() if s.title.lower() in wanted]

    def songs_by_artist_name(self, names: Iterable[str]) -> List[Song]:
        wanted = {n.lower() for n in names}
        artist_ids = {a.id for a in self._artists.values() if a.name.lower() in wanted}
        return [s for s in self._songs.values() if s.artist_id in artist_ids]

    # Users

    def add_user(self, user: User) -> User:
        if user.id in self._users:
            raise ValidationError(f"User {user.id} already exists")
        if user.username in self._usernames:
            raise ValidationError(f"Username '{user.username}' is already taken")
        self._users[user.id] = user
        self._usernames[user.username] = user.id
        return user

    def remove_user(self, user_id: int) -> User:
        """Remove a user and drop it from every other user's follow set."""
        user = self.require_user(user_id)
        del self._users[user_id]
        del self._usernames[user.username]
        for other in self._users.values():
            other.unfollow(user.username)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def require_user(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found")
        return user

    def get_user_by_username(self, username: str) -> Optional[User]:
        user_id = self._usernames.get(username)
        return self._users.get(user_id) if user_id is not None else None

    def users(self) -> List[User]:
        return list(self._users.values())

    def __len__(self) -> int:
        return len(self._songs)


def _parse_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def catalog_from_dict(data: Dict[str, Any]) -> Catalog:
    """
    Build a catalog from a plain mapping with ``artists``, ``songs`` and
    ``users`` lists. Users reference favorites by song id and follows by
    username.

    Raises:
        ConfigError: If an entry is malformed
    """
    catalog = Catalog()
    try:
        for a in data.get("artists") or []:
            catalog.add_artist(Artist(id=int(a["id"]), name=a["name"]))

        for s in data.get("songs") or []:
            catalog.add_song(Song(
                id=int(s["id"]),
                title=s["title"],
                genre=Genre.parse(s["genre"]),
                artist_id=int(s["artist_id"]),
                release_date=_parse_date(s.get("release_date")),
                duration=s.get("duration"),
                cover_url=s.get("cover_url"),
                audio_url=s.get("audio_url"),
            ))

        for u in data.get("users") or []:
            user = User(id=int(u["id"]), username=u["username"], name=u.get("name", ""))
            for song_id in u.get("favorites") or []:
                if catalog.get_song(int(song_id)) is None:
                    raise ValidationError(f"User '{user.username}' favorites unknown song {song_id}")
                user.add_favorite(int(song_id))
            for username in u.get("following") or []:
                user.follow(username)
            catalog.add_user(user)
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Malformed catalog entry: {e!r}") from e

    known = {u.username for u in catalog.users()}
    for user in catalog.users():
        unknown = user.following - known
        if unknown:
            logger.warning(f"User '{user.username}' follows unknown users {sorted(unknown)}, ignoring")
            user.following -= unknown

    return catalog


def load_catalog(path: str | Path) -> Catalog:
    """Load a YAML catalog file."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Catalog file not found: {path}")
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    catalog = catalog_from_dict(data)
    logger.info(f"Catalog loaded from {path}: {len(catalog.artists())} artists, "
                f"{len(catalog.songs())} songs, {len(catalog.users())} users")
    return catalog
