from typing import List, Optional
from datetime import datetime
import logging

from common.exceptions import NotFoundError, ValidationError
from common.models.models import Playlist
from services.musicvibe_db.musicvibe_db import MusicVibeDb
from services.musicvibe_db.playlist_repository import PlaylistRepository
from services.musicvibe_db.song_repository import SongRepository

logger = logging.getLogger(__name__)


def validate_playlist(playlist: Playlist):
    if playlist.name is None or not playlist.name.strip():
        raise ValidationError({'name': "Playlist name is required"})


class PlaylistService:
    def __init__(self, db: MusicVibeDb, playlists: Optional[PlaylistRepository] = None,
                 songs: Optional[SongRepository] = None):
        self.db = db
        self.playlists = playlists or PlaylistRepository()
        self.songs = songs or SongRepository()

    def list_all(self) -> List[Playlist]:
        with self.db.get_connection() as conn:
            return self.playlists.get_all_playlists(conn)

    def get_by_id(self, playlist_id: int) -> Playlist:
        with self.db.get_connection() as conn:
            return self._require_playlist(conn, playlist_id)

    def by_mood(self, mood: str) -> List[Playlist]:
        with self.db.get_connection() as conn:
            return self.playlists.find_by_mood(conn, mood)

    def search_by_name(self, name: str) -> List[Playlist]:
        with self.db.get_connection() as conn:
            return self.playlists.find_by_name(conn, name)

    def create(self, playlist: Playlist) -> Playlist:
        validate_playlist(playlist)

        now = datetime.now()
        new_playlist = Playlist(
            name=playlist.name,
            description=playlist.description,
            mood=playlist.mood,
            cover_url=playlist.cover_url,
            songs=[],
            created_at=now,
            updated_at=now
        )

        with self.db.get_connection() as conn:
            new_playlist.id = self.playlists.add_playlist(conn, new_playlist)

        logger.info(f"Created playlist {new_playlist.id}: '{new_playlist.name}'")
        return new_playlist

    def update(self, playlist_id: int, playlist: Playlist) -> Playlist:
        """Replace name, description, mood and cover; the song set is left alone"""
        with self.db.get_connection() as conn:
            self._require_playlist(conn, playlist_id)
            validate_playlist(playlist)
            self.playlists.update_playlist(conn, playlist_id, playlist, datetime.now())
            updated = self.playlists.get_playlist(conn, playlist_id)

        logger.info(f"Updated playlist {playlist_id}")
        return updated

    def add_song(self, playlist_id: int, song_id: int) -> Playlist:
        """
        Add a song to a playlist.

        Adding a song that is already linked leaves the playlist untouched,
        including its updated_at timestamp.
        """
        with self.db.get_connection() as conn:
            playlist = self._require_playlist(conn, playlist_id)
            self._require_song(conn, song_id)

            if playlist.has_song(song_id):
                logger.debug(f"Song {song_id} already in playlist {playlist_id}")
                return playlist

            now = datetime.now()
            self.playlists.add_song(conn, playlist_id, song_id, now)
            self.playlists.touch_playlist(conn, playlist_id, now)
            updated = self.playlists.get_playlist(conn, playlist_id)

        logger.info(f"Added song {song_id} to playlist {playlist_id}")
        return updated

    def remove_song(self, playlist_id: int, song_id: int) -> Playlist:
        """Unlink a song from a playlist; unlinking a song that is not linked is a no-op"""
        with self.db.get_connection() as conn:
            self._require_playlist(conn, playlist_id)
            self._require_song(conn, song_id)

            if self.playlists.remove_song(conn, playlist_id, song_id):
                self.playlists.touch_playlist(conn, playlist_id, datetime.now())
                logger.info(f"Removed song {song_id} from playlist {playlist_id}")
            else:
                logger.debug(f"Song {song_id} was not in playlist {playlist_id}")

            return self.playlists.get_playlist(conn, playlist_id)

    def delete(self, playlist_id: int):
        with self.db.get_connection() as conn:
            if not self.playlists.delete_playlist(conn, playlist_id):
                raise NotFoundError("Playlist", playlist_id)

        logger.info(f"Deleted playlist {playlist_id}")

    def _require_playlist(self, conn, playlist_id: int) -> Playlist:
        playlist = self.playlists.get_playlist(conn, playlist_id)
        if playlist is None:
            raise NotFoundError("Playlist", playlist_id)
        return playlist

    def _require_song(self, conn, song_id: int):
        if self.songs.get_song(conn, song_id) is None:
            raise NotFoundError("Song", song_id)


def get_playlist_service(db: MusicVibeDb) -> PlaylistService:
    return PlaylistService(db)
