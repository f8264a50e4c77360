"""
External search and lyrics API models for MusicVibe service
"""

from typing import Optional

from common.models.models import GlobalTrack
from services.api_models.common_models import CamelModel
from services.lyrics_finder_service.lyrics_finder_service import LyricsLookup


class GlobalTrackResponse(CamelModel):
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

    @classmethod
    def from_track(cls, track: GlobalTrack) -> "GlobalTrackResponse":
        return cls(
            title=track.title,
            artist=track.artist,
            album=track.album,
            cover_url=track.cover_url,
            release_year=track.release_year,
            duration=track.duration,
            genre=track.genre,
            preview_url=track.preview_url,
            external_url=track.external_url,
            price=track.price,
            currency=track.currency,
            is_global=track.is_global
        )


class LyricsResponse(CamelModel):
    found: bool
    artist: Optional[str] = None
    title: Optional[str] = None
    lyrics: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_lookup(cls, lookup: LyricsLookup) -> "LyricsResponse":
        return cls(
            found=lookup.found,
            artist=lookup.artist,
            title=lookup.title,
            lyrics=lookup.lyrics,
            message=lookup.message
        )
