import sqlite3
from typing import List, Optional
from datetime import datetime

from common.models.models import Playlist
from .queries import *
from .song_repository import SongRepository


class PlaylistRepository:
    """SQL finders and mutations for playlists and their song links"""

    def add_playlist(self, conn: sqlite3.Connection, playlist: Playlist) -> int:
        cursor = conn.cursor()
        cursor.execute(INSERT_PLAYLIST, (
            playlist.name, playlist.description, playlist.mood, playlist.cover_url,
            playlist.created_at.isoformat(), playlist.updated_at.isoformat()
        ))
        return cursor.lastrowid

    def get_playlist(self, conn: sqlite3.Connection, playlist_id: int) -> Optional[Playlist]:
        cursor = conn.cursor()
        cursor.execute(SELECT_PLAYLIST_BY_ID, (playlist_id,))
        row = cursor.fetchone()
        if row:
            return self._row_to_playlist(conn, row)
        return None

    def get_all_playlists(self, conn: sqlite3.Connection) -> List[Playlist]:
        return self._fetch_playlists(conn, SELECT_ALL_PLAYLISTS)

    def find_by_mood(self, conn: sqlite3.Connection, mood: str) -> List[Playlist]:
        return self._fetch_playlists(conn, SELECT_PLAYLISTS_BY_MOOD, (mood,))

    def find_by_name(self, conn: sqlite3.Connection, name: str) -> List[Playlist]:
        return self._fetch_playlists(conn, SELECT_PLAYLISTS_BY_NAME, (name,))

    def update_playlist(self, conn: sqlite3.Connection, playlist_id: int, playlist: Playlist,
                        updated_at: datetime) -> bool:
        cursor = conn.cursor()
        cursor.execute(UPDATE_PLAYLIST, (
            playlist.name, playlist.description, playlist.mood, playlist.cover_url,
            updated_at.isoformat(), playlist_id
        ))
        return cursor.rowcount > 0

    def touch_playlist(self, conn: sqlite3.Connection, playlist_id: int, updated_at: datetime) -> bool:
        cursor = conn.cursor()
        cursor.execute(TOUCH_PLAYLIST, (updated_at.isoformat(), playlist_id))
        return cursor.rowcount > 0

    def delete_playlist(self, conn: sqlite3.Connection, playlist_id: int) -> bool:
        cursor = conn.cursor()
        cursor.execute(DELETE_PLAYLIST, (playlist_id,))
        return cursor.rowcount > 0

    def has_song(self, conn: sqlite3.Connection, playlist_id: int, song_id: int) -> bool:
        cursor = conn.cursor()
        cursor.execute(SELECT_PLAYLIST_SONG, (playlist_id, song_id))
        return cursor.fetchone() is not None

    def add_song(self, conn: sqlite3.Connection, playlist_id: int, song_id: int, added_at: datetime) -> bool:
        """Link a song to a playlist; returns False when the link already existed"""
        cursor = conn.cursor()
        cursor.execute(INSERT_PLAYLIST_SONG, (playlist_id, song_id, added_at.isoformat()))
        return cursor.rowcount > 0

    def remove_song(self, conn: sqlite3.Connection, playlist_id: int, song_id: int) -> bool:
        cursor = conn.cursor()
        cursor.execute(DELETE_PLAYLIST_SONG, (playlist_id, song_id))
        return cursor.rowcount > 0

    def _fetch_playlists(self, conn: sqlite3.Connection, query: str, params: tuple = ()) -> List[Playlist]:
        cursor = conn.cursor()
        cursor.execute(query, params)
        rows = cursor.fetchall()
        return [self._row_to_playlist(conn, row) for row in rows]

    def _row_to_playlist(self, conn: sqlite3.Connection, row) -> Playlist:
        cursor = conn.cursor()
        cursor.execute(SELECT_SONGS_OF_PLAYLIST, (row['id'],))
        songs = [SongRepository._row_to_song(song_row) for song_row in cursor.fetchall()]

        return Playlist(
            id=row['id'],
            name=row['name'],
            description=row['description'],
            mood=row['mood'],
            cover_url=row['cover_url'],
            songs=songs,
            created_at=datetime.fromisoformat(row['created_at']) if row['created_at'] else None,
            updated_at=datetime.fromisoformat(row['updated_at']) if row['updated_at'] else None
        )
