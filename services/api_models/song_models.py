"""
Song-related API models for MusicVibe service
"""

from pydantic import Field
from typing import Optional

from common.models.models import Song
from services.api_models.common_models import CamelModel


class SongRequest(CamelModel):
    """Body of POST /songs and PUT /songs/{id}; blank required fields are rejected by the service"""
    title: Optional[str] = Field(None, description="Song title (required)")
    artist: Optional[str] = Field(None, description="Artist name (required)")
    album: Optional[str] = None
    genre: Optional[str] = Field(None, description="Genre (required)")
    duration: Optional[int] = Field(None, description="Duration in seconds")
    cover_url: Optional[str] = None
    release_year: Optional[int] = None
    is_favorite: bool = False

    def to_song(self) -> Song:
        return Song(
            title=self.title,
            artist=self.artist,
            album=self.album,
            genre=self.genre,
            duration=self.duration,
            cover_url=self.cover_url,
            release_year=self.release_year,
            is_favorite=self.is_favorite
        )


class SongResponse(CamelModel):
    id: int
    title: str
    artist: str
    album: Optional[str]
    genre: str
    duration: Optional[int]
    cover_url: Optional[str]
    release_year: Optional[int]
    play_count: int
    is_favorite: bool
    created_at: Optional[str]

    @classmethod
    def from_song(cls, song: Song) -> "SongResponse":
        return cls(
            id=song.id,
            title=song.title,
            artist=song.artist,
            album=song.album,
            genre=song.genre,
            duration=song.duration,
            cover_url=song.cover_url,
            release_year=song.release_year,
            play_count=song.play_count,
            is_favorite=song.is_favorite,
            created_at=song.created_at.isoformat() if song.created_at else None
        )
