"""
MusicVibe API - REST API for the playlist management backend

This module exposes songs, playlists and their membership over HTTP,
plus two pass-through endpoints to free external APIs (iTunes track
search and lyrics.ovh). Built with FastAPI for automatic documentation
and validation.
"""

from fastapi import FastAPI, Depends, Query, Request, Response, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import List, Optional
import logging
import sqlite3
from datetime import datetime

from common.exceptions import NotFoundError, ValidationError
from services.musicvibe_db.musicvibe_db import MusicVibeDb, get_database
from services.song_service.song_service import SongService, get_song_service
from services.playlist_service.playlist_service import PlaylistService, get_playlist_service
from services.track_search_service.track_search_service import TrackSearchService
from services.track_search_service.search_apis.itunes_searcher import ITunesSearcher
from services.lyrics_finder_service.lyrics_finder_service import LyricsFinderService
from services.lyrics_finder_service.lyrics_apis.lyrics_ovh_searcher import LyricsOvhSearcher

# Import API models
from services.api_models.common_models import ValidationErrorResponse
from services.api_models.song_models import SongRequest, SongResponse
from services.api_models.playlist_models import PlaylistRequest, PlaylistResponse
from services.api_models.search_models import GlobalTrackResponse, LyricsResponse
from services.api_models.utility_models import LivenessResponse, ProbeResponse, HealthResponse
from config.config import get_config

# Load configuration
config = get_config()

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

# Initialize FastAPI app
app = FastAPI(
    title="MusicVibe API",
    description="REST API for managing songs and playlists",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# DEPENDENCY FUNCTIONS
# ============================================================================

_db: Optional[MusicVibeDb] = None
_track_search_service: Optional[TrackSearchService] = None
_lyrics_finder_service: Optional[LyricsFinderService] = None


def get_db() -> MusicVibeDb:
    """Database handle, opened on first use"""
    global _db
    if _db is None:
        _db = get_database(config.database_path)
    return _db


def get_songs(db: MusicVibeDb = Depends(get_db)) -> SongService:
    return get_song_service(db)


def get_playlists(db: MusicVibeDb = Depends(get_db)) -> PlaylistService:
    return get_playlist_service(db)


def get_track_search() -> TrackSearchService:
    global _track_search_service
    if _track_search_service is None:
        _track_search_service = TrackSearchService(ITunesSearcher(
            base_url=config.itunes_search_url,
            limit=config.itunes_result_limit,
            user_agent=config.http_user_agent,
            timeout=config.http_timeout_seconds
        ))
    return _track_search_service


def get_lyrics_finder() -> LyricsFinderService:
    global _lyrics_finder_service
    if _lyrics_finder_service is None:
        _lyrics_finder_service = LyricsFinderService(LyricsOvhSearcher(
            base_url=config.lyrics_api_url,
            user_agent=config.http_user_agent,
            timeout=config.http_timeout_seconds
        ))
    return _lyrics_finder_service


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(NotFoundError)
async def handle_not_found(request: Request, exc: NotFoundError):
    logger.debug(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(message="Validation failed", errors=exc.errors).model_dump()
    )


@app.exception_handler(sqlite3.Error)
async def handle_database_error(request: Request, exc: sqlite3.Error):
    logger.exception(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"}
    )


# ============================================================================
# SONG ENDPOINTS
# ============================================================================

@app.get(f"{API_PREFIX}/songs", response_model=List[SongResponse], tags=["Songs"])
def list_songs(songs: SongService = Depends(get_songs)):
    """Get all songs"""
    return [SongResponse.from_song(song) for song in songs.list_all()]


@app.get(f"{API_PREFIX}/songs/search", response_model=List[SongResponse], tags=["Songs"])
def search_songs(
    title: Optional[str] = None,
    artist: Optional[str] = None,
    genre: Optional[str] = None,
    songs: SongService = Depends(get_songs)
):
    """Search songs by title, else artist, else genre; only the first given filter applies"""
    return [SongResponse.from_song(song) for song in songs.search(title=title, artist=artist, genre=genre)]


@app.get(f"{API_PREFIX}/songs/favorites", response_model=List[SongResponse], tags=["Songs"])
def list_favorite_songs(songs: SongService = Depends(get_songs)):
    """Get all songs marked as favorite"""
    return [SongResponse.from_song(song) for song in songs.list_favorites()]


@app.get(f"{API_PREFIX}/songs/genre/{{genre}}/top", response_model=List[SongResponse], tags=["Songs"])
def top_songs_by_genre(genre: str, songs: SongService = Depends(get_songs)):
    """Get the songs of a genre, most played first"""
    return [SongResponse.from_song(song) for song in songs.top_by_genre(genre)]


@app.get(f"{API_PREFIX}/songs/{{song_id}}", response_model=SongResponse, tags=["Songs"])
def get_song(song_id: int, songs: SongService = Depends(get_songs)):
    return SongResponse.from_song(songs.get_by_id(song_id))


@app.post(f"{API_PREFIX}/songs", response_model=SongResponse, status_code=status.HTTP_201_CREATED, tags=["Songs"])
def create_song(song_data: SongRequest, songs: SongService = Depends(get_songs)):
    """Create a new song"""
    return SongResponse.from_song(songs.create(song_data.to_song()))


@app.put(f"{API_PREFIX}/songs/{{song_id}}", response_model=SongResponse, tags=["Songs"])
def update_song(song_id: int, song_data: SongRequest, songs: SongService = Depends(get_songs)):
    """Replace the editable fields of a song"""
    return SongResponse.from_song(songs.update(song_id, song_data.to_song()))


@app.patch(f"{API_PREFIX}/songs/{{song_id}}/favorite", response_model=SongResponse, tags=["Songs"])
def toggle_favorite(song_id: int, songs: SongService = Depends(get_songs)):
    return SongResponse.from_song(songs.toggle_favorite(song_id))


@app.patch(f"{API_PREFIX}/songs/{{song_id}}/play", response_model=SongResponse, tags=["Songs"])
def increment_play_count(song_id: int, songs: SongService = Depends(get_songs)):
    return SongResponse.from_song(songs.increment_play_count(song_id))


@app.delete(f"{API_PREFIX}/songs/{{song_id}}", status_code=status.HTTP_204_NO_CONTENT, tags=["Songs"])
def delete_song(song_id: int, songs: SongService = Depends(get_songs)):
    """Delete a song and remove it from every playlist"""
    songs.delete(song_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# PLAYLIST ENDPOINTS
# ============================================================================

@app.get(f"{API_PREFIX}/playlists", response_model=List[PlaylistResponse], tags=["Playlists"])
def list_playlists(playlists: PlaylistService = Depends(get_playlists)):
    """Get all playlists with their songs"""
    return [PlaylistResponse.from_playlist(playlist) for playlist in playlists.list_all()]


@app.get(f"{API_PREFIX}/playlists/mood/{{mood}}", response_model=List[PlaylistResponse], tags=["Playlists"])
def playlists_by_mood(mood: str, playlists: PlaylistService = Depends(get_playlists)):
    return [PlaylistResponse.from_playlist(playlist) for playlist in playlists.by_mood(mood)]


@app.get(f"{API_PREFIX}/playlists/search", response_model=List[PlaylistResponse], tags=["Playlists"])
def search_playlists(name: str, playlists: PlaylistService = Depends(get_playlists)):
    """Search playlists by case-insensitive name fragment"""
    return [PlaylistResponse.from_playlist(playlist) for playlist in playlists.search_by_name(name)]


@app.get(f"{API_PREFIX}/playlists/{{playlist_id}}", response_model=PlaylistResponse, tags=["Playlists"])
def get_playlist(playlist_id: int, playlists: PlaylistService = Depends(get_playlists)):
    return PlaylistResponse.from_playlist(playlists.get_by_id(playlist_id))


@app.post(f"{API_PREFIX}/playlists", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED,
          tags=["Playlists"])
def create_playlist(playlist_data: PlaylistRequest, playlists: PlaylistService = Depends(get_playlists)):
    """Create a new, empty playlist"""
    return PlaylistResponse.from_playlist(playlists.create(playlist_data.to_playlist()))


@app.put(f"{API_PREFIX}/playlists/{{playlist_id}}", response_model=PlaylistResponse, tags=["Playlists"])
def update_playlist(playlist_id: int, playlist_data: PlaylistRequest,
                    playlists: PlaylistService = Depends(get_playlists)):
    """Replace name, description, mood and cover of a playlist"""
    return PlaylistResponse.from_playlist(playlists.update(playlist_id, playlist_data.to_playlist()))


@app.post(f"{API_PREFIX}/playlists/{{playlist_id}}/songs/{{song_id}}", response_model=PlaylistResponse,
          tags=["Playlists"])
def add_song_to_playlist(playlist_id: int, song_id: int, playlists: PlaylistService = Depends(get_playlists)):
    """Add a song to a playlist (no-op if it is already there)"""
    return PlaylistResponse.from_playlist(playlists.add_song(playlist_id, song_id))


@app.delete(f"{API_PREFIX}/playlists/{{playlist_id}}/songs/{{song_id}}", response_model=PlaylistResponse,
            tags=["Playlists"])
def remove_song_from_playlist(playlist_id: int, song_id: int, playlists: PlaylistService = Depends(get_playlists)):
    """Remove a song from a playlist (no-op if it is not there)"""
    return PlaylistResponse.from_playlist(playlists.remove_song(playlist_id, song_id))


@app.delete(f"{API_PREFIX}/playlists/{{playlist_id}}", status_code=status.HTTP_204_NO_CONTENT, tags=["Playlists"])
def delete_playlist(playlist_id: int, playlists: PlaylistService = Depends(get_playlists)):
    """Delete a playlist; its songs are kept"""
    playlists.delete(playlist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# EXTERNAL SEARCH ENDPOINTS
# ============================================================================

@app.get(f"{API_PREFIX}/search/global", response_model=List[GlobalTrackResponse], tags=["Search"])
def search_global(
    query: str,
    track_type: str = Query("track", alias="type"),
    track_search: TrackSearchService = Depends(get_track_search)
):
    """Search the iTunes catalog; upstream failures yield an empty list"""
    return [GlobalTrackResponse.from_track(track) for track in track_search.search_global(query, track_type)]


@app.get(f"{API_PREFIX}/lyrics/search", response_model=LyricsResponse, response_model_exclude_none=True,
         tags=["Lyrics"])
def search_lyrics(artist: str, title: str, lyrics_finder: LyricsFinderService = Depends(get_lyrics_finder)):
    """Look up lyrics on lyrics.ovh; misses and failures answer found=false with a message"""
    return LyricsResponse.from_lookup(lyrics_finder.search_lyrics(artist, title))


# ============================================================================
# HEALTH CHECK ENDPOINTS
# ============================================================================

@app.get("/health", response_model=LivenessResponse, tags=["System"])
def liveness():
    return LivenessResponse(status="ok", service="musicvibe-api")


@app.get("/ready", response_model=ProbeResponse, tags=["System"])
def readiness():
    return ProbeResponse(status="ready")


@app.get("/live", response_model=ProbeResponse, tags=["System"])
def live():
    return ProbeResponse(status="live")


@app.get(f"{API_PREFIX}/health", response_model=HealthResponse, tags=["System"])
def health_check(db: MusicVibeDb = Depends(get_db)):
    """Health check endpoint"""
    try:
        return HealthResponse(
            status="healthy",
            database="connected",
            song_count=db.get_song_count(),
            playlist_count=db.get_playlist_count(),
            timestamp=datetime.now().isoformat()
        )
    except sqlite3.Error as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Health check failed: {str(e)}"
        )
