"""
Domain records supplied to the graphs.

Songs are identified by their integer id and users by their username; both
compare and hash on that identity only so that containers built on value
equality treat two copies of the same entity as one node. Relationships are
stored as ids rather than object references.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, List, Optional, Set


class Genre(str, Enum):
    POP = "POP"
    ROCK = "ROCK"
    REGUETON = "REGUETON"
    RAP = "RAP"
    METAL = "METAL"
    NU_METAL = "NU_METAL"
    ELECTRONICA = "ELECTRONICA"
    HEAVY_METAL = "HEAVY_METAL"
    BLACK_METAL = "BLACK_METAL"

    @classmethod
    def parse(cls, value: Any) -> "Genre":
        """Accept a Genre, or its name in any case ("rock", "Nu_Metal")."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper().replace(" ", "_").replace("-", "_"))


@dataclass(eq=False)
class Artist:
    id: int
    name: str

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Artist) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("artist", self.id))


@dataclass(eq=False)
class Song:
    """A catalog song. Only ``genre`` and ``artist_id`` feed the similarity model."""

    id: int
    title: str
    genre: Genre
    artist_id: int
    release_date: Optional[date] = None
    duration: Optional[str] = None
    cover_url: Optional[str] = None
    audio_url: Optional[str] = None

    def __post_init__(self):
        self.genre = Genre.parse(self.genre)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Song) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("song", self.id))


@dataclass(eq=False)
class User:
    """
    A registered user.

    ``favorite_song_ids`` keeps insertion order without duplicates and
    ``following`` holds the usernames this user follows.
    """

    id: int
    username: str
    name: str = ""
    favorite_song_ids: List[int] = field(default_factory=list)
    following: Set[str] = field(default_factory=set)

    def add_favorite(self, song_id: int) -> None:
        if song_id not in self.favorite_song_ids:
            self.favorite_song_ids.append(song_id)

    def remove_favorite(self, song_id: int) -> None:
        if song_id in self.favorite_song_ids:
            self.favorite_song_ids.remove(song_id)

    def follow(self, username: str) -> None:
        if username != self.username:
            self.following.add(username)

    def unfollow(self, username: str) -> None:
        self.following.discard(username)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, User) and self.username == other.username

    def __hash__(self) -> int:
        return hash(("user", self.username))
