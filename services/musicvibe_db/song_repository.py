import sqlite3
from typing import List, Optional
from datetime import datetime

from common.models.models import Song
from .queries import *


class SongRepository:
    """SQL finders and mutations for the songs table; every call runs on the caller's connection"""

    def add_song(self, conn: sqlite3.Connection, song: Song) -> int:
        cursor = conn.cursor()
        cursor.execute(INSERT_SONG, (
            song.title, song.artist, song.album, song.genre, song.duration,
            song.cover_url, song.release_year, song.play_count, song.is_favorite,
            song.created_at.isoformat() if song.created_at else None
        ))
        return cursor.lastrowid

    def get_song(self, conn: sqlite3.Connection, song_id: int) -> Optional[Song]:
        cursor = conn.cursor()
        cursor.execute(SELECT_SONG_BY_ID, (song_id,))
        row = cursor.fetchone()
        if row:
            return self._row_to_song(row)
        return None

    def get_all_songs(self, conn: sqlite3.Connection) -> List[Song]:
        return self._fetch_songs(conn, SELECT_ALL_SONGS)

    def find_by_title(self, conn: sqlite3.Connection, title: str) -> List[Song]:
        return self._fetch_songs(conn, SELECT_SONGS_BY_TITLE, (title,))

    def find_by_artist(self, conn: sqlite3.Connection, artist: str) -> List[Song]:
        return self._fetch_songs(conn, SELECT_SONGS_BY_ARTIST, (artist,))

    def find_by_genre(self, conn: sqlite3.Connection, genre: str) -> List[Song]:
        return self._fetch_songs(conn, SELECT_SONGS_BY_GENRE, (genre,))

    def find_favorites(self, conn: sqlite3.Connection) -> List[Song]:
        return self._fetch_songs(conn, SELECT_FAVORITE_SONGS)

    def find_top_by_genre(self, conn: sqlite3.Connection, genre: str) -> List[Song]:
        return self._fetch_songs(conn, SELECT_TOP_SONGS_BY_GENRE, (genre,))

    def update_song(self, conn: sqlite3.Connection, song_id: int, song: Song) -> bool:
        cursor = conn.cursor()
        cursor.execute(UPDATE_SONG, (
            song.title, song.artist, song.album, song.genre, song.duration,
            song.cover_url, song.release_year, song.is_favorite, song_id
        ))
        return cursor.rowcount > 0

    def toggle_favorite(self, conn: sqlite3.Connection, song_id: int) -> bool:
        cursor = conn.cursor()
        cursor.execute(TOGGLE_SONG_FAVORITE, (song_id,))
        return cursor.rowcount > 0

    def increment_play_count(self, conn: sqlite3.Connection, song_id: int) -> bool:
        cursor = conn.cursor()
        cursor.execute(INCREMENT_SONG_PLAY_COUNT, (song_id,))
        return cursor.rowcount > 0

    def delete_song(self, conn: sqlite3.Connection, song_id: int) -> bool:
        cursor = conn.cursor()
        cursor.execute(DELETE_SONG, (song_id,))
        return cursor.rowcount > 0

    def _fetch_songs(self, conn: sqlite3.Connection, query: str, params: tuple = ()) -> List[Song]:
        cursor = conn.cursor()
        cursor.execute(query, params)
        rows = cursor.fetchall()
        return [self._row_to_song(row) for row in rows]

    @staticmethod
    def _row_to_song(row) -> Song:
        return Song(
            id=row['id'],
            title=row['title'],
            artist=row['artist'],
            album=row['album'],
            genre=row['genre'],
            duration=row['duration'],
            cover_url=row['cover_url'],
            release_year=row['release_year'],
            play_count=row['play_count'],
            is_favorite=bool(row['is_favorite']),
            created_at=datetime.fromisoformat(row['created_at']) if row['created_at'] else None
        )
