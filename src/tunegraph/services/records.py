"""Output records returned by the services."""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from tunegraph.models import Song, User


@dataclass(frozen=True)
class SongSummary:
    id: int
    title: str
    genre: str
    artist_id: int
    audio_url: Optional[str] = None
    cover_url: Optional[str] = None

    @classmethod
    def from_song(cls, song: Song) -> "SongSummary":
        return cls(
            id=song.id,
            title=song.title,
            genre=song.genre.value,
            artist_id=song.artist_id,
            audio_url=song.audio_url,
            cover_url=song.cover_url,
        )


@dataclass(frozen=True)
class RadioQueue:
    seed_song_id: int
    queue: List[SongSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Playlist:
    name: str
    songs: List[SongSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UserSuggestion:
    id: int
    name: str
    username: str

    @classmethod
    def from_user(cls, user: User) -> "UserSuggestion":
        return cls(id=user.id, name=user.name, username=user.username)
