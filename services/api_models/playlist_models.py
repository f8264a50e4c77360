"""
Playlist-related API models for MusicVibe service
"""

from pydantic import Field
from typing import List, Optional

from common.models.models import Playlist
from services.api_models.common_models import CamelModel
from services.api_models.song_models import SongResponse


class PlaylistRequest(CamelModel):
    """Body of POST /playlists and PUT /playlists/{id}; songs are managed through the songs sub-resource"""
    name: Optional[str] = Field(None, description="Playlist name (required)")
    description: Optional[str] = None
    mood: Optional[str] = Field(None, description="Free-text category, e.g. Chill or Workout")
    cover_url: Optional[str] = None

    def to_playlist(self) -> Playlist:
        return Playlist(
            name=self.name,
            description=self.description,
            mood=self.mood,
            cover_url=self.cover_url
        )


class PlaylistResponse(CamelModel):
    id: int
    name: str
    description: Optional[str]
    mood: Optional[str]
    cover_url: Optional[str]
    songs: List[SongResponse]
    created_at: Optional[str]
    updated_at: Optional[str]

    @classmethod
    def from_playlist(cls, playlist: Playlist) -> "PlaylistResponse":
        return cls(
            id=playlist.id,
            name=playlist.name,
            description=playlist.description,
            mood=playlist.mood,
            cover_url=playlist.cover_url,
            songs=[SongResponse.from_song(song) for song in playlist.songs],
            created_at=playlist.created_at.isoformat() if playlist.created_at else None,
            updated_at=playlist.updated_at.isoformat() if playlist.updated_at else None
        )
