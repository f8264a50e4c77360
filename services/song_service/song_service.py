from typing import Dict, List, Optional
from datetime import datetime
import logging

from common.exceptions import NotFoundError, ValidationError
from common.models.models import Song
from services.musicvibe_db.musicvibe_db import MusicVibeDb
from services.musicvibe_db.song_repository import SongRepository

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_song(song: Song):
    """Raise ValidationError listing every blank required field"""
    errors: Dict[str, str] = {}

    if _is_blank(song.title):
        errors['title'] = "Title is required"
    if _is_blank(song.artist):
        errors['artist'] = "Artist is required"
    if _is_blank(song.genre):
        errors['genre'] = "Genre is required"

    if errors:
        raise ValidationError(errors)


class SongService:
    def __init__(self, db: MusicVibeDb, songs: Optional[SongRepository] = None):
        self.db = db
        self.songs = songs or SongRepository()

    def list_all(self) -> List[Song]:
        with self.db.get_connection() as conn:
            return self.songs.get_all_songs(conn)

    def get_by_id(self, song_id: int) -> Song:
        with self.db.get_connection() as conn:
            return self._require_song(conn, song_id)

    def search(self, title: Optional[str] = None, artist: Optional[str] = None,
               genre: Optional[str] = None) -> List[Song]:
        """
        Search songs by a single filter.

        Only the first supplied filter is used, in the order title, artist, genre.
        Title and artist match case-insensitive substrings, genre must match exactly.
        With no filter every song is returned.
        """
        with self.db.get_connection() as conn:
            if title is not None:
                logger.debug(f"Searching songs by title: {title}")
                return self.songs.find_by_title(conn, title)
            if artist is not None:
                logger.debug(f"Searching songs by artist: {artist}")
                return self.songs.find_by_artist(conn, artist)
            if genre is not None:
                logger.debug(f"Searching songs by genre: {genre}")
                return self.songs.find_by_genre(conn, genre)
            return self.songs.get_all_songs(conn)

    def list_favorites(self) -> List[Song]:
        with self.db.get_connection() as conn:
            return self.songs.find_favorites(conn)

    def top_by_genre(self, genre: str) -> List[Song]:
        with self.db.get_connection() as conn:
            return self.songs.find_top_by_genre(conn, genre)

    def create(self, song: Song) -> Song:
        validate_song(song)

        new_song = Song(
            title=song.title,
            artist=song.artist,
            album=song.album,
            genre=song.genre,
            duration=song.duration,
            cover_url=song.cover_url,
            release_year=song.release_year,
            play_count=0,
            is_favorite=bool(song.is_favorite),
            created_at=datetime.now()
        )

        with self.db.get_connection() as conn:
            new_song.id = self.songs.add_song(conn, new_song)

        logger.info(f"Created song {new_song.id}: '{new_song.title}' by {new_song.artist}")
        return new_song

    def update(self, song_id: int, song: Song) -> Song:
        """Replace the editable fields of a song; play count and creation time are kept"""
        with self.db.get_connection() as conn:
            self._require_song(conn, song_id)
            validate_song(song)
            self.songs.update_song(conn, song_id, song)
            updated = self.songs.get_song(conn, song_id)

        logger.info(f"Updated song {song_id}")
        return updated

    def toggle_favorite(self, song_id: int) -> Song:
        with self.db.get_connection() as conn:
            if not self.songs.toggle_favorite(conn, song_id):
                raise NotFoundError("Song", song_id)
            song = self.songs.get_song(conn, song_id)

        logger.info(f"Song {song_id} favorite set to {song.is_favorite}")
        return song

    def increment_play_count(self, song_id: int) -> Song:
        with self.db.get_connection() as conn:
            if not self.songs.increment_play_count(conn, song_id):
                raise NotFoundError("Song", song_id)
            song = self.songs.get_song(conn, song_id)

        logger.debug(f"Song {song_id} play count is now {song.play_count}")
        return song

    def delete(self, song_id: int):
        """Delete a song; its playlist links are removed by the join table cascade"""
        with self.db.get_connection() as conn:
            if not self.songs.delete_song(conn, song_id):
                raise NotFoundError("Song", song_id)

        logger.info(f"Deleted song {song_id}")

    def _require_song(self, conn, song_id: int) -> Song:
        song = self.songs.get_song(conn, song_id)
        if song is None:
            raise NotFoundError("Song", song_id)
        return song


def get_song_service(db: MusicVibeDb) -> SongService:
    return SongService(db)
