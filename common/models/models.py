from dataclasses import dataclass, field
from typing import Optional, List
from datetime import datetime


@dataclass
class Song:
    """Represents a song in the catalog"""
    id: Optional[int] = None
    title: str = ""
    artist: str = ""
    album: Optional[str] = None
    genre: str = ""
    duration: Optional[int] = None  # in seconds
    cover_url: Optional[str] = None
    release_year: Optional[int] = None
    play_count: int = 0
    is_favorite: bool = False
    created_at: Optional[datetime] = None


@dataclass
class Playlist:
    """Represents a playlist and the songs linked to it"""
    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    mood: Optional[str] = None  # Chill, Workout, Party, Focus, Relax
    cover_url: Optional[str] = None
    songs: List[Song] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_song(self, song_id: int) -> bool:
        return any(song.id == song_id for song in self.songs)


@dataclass
class GlobalTrack:
    """A track returned by the external catalog search, normalized to our shape"""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    cover_url: Optional[str] = None
    release_year: Optional[str] = None
    duration: int = 0
    genre: Optional[str] = None
    preview_url: Optional[str] = None
    external_url: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    is_global: bool = True
