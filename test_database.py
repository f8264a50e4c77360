"""
Tests for database creation, the join table constraints and the song/playlist repositories
"""

import os
import sqlite3
from datetime import datetime

import pytest

from common.models.models import Song, Playlist
from services.musicvibe_db.musicvibe_db import MusicVibeDb, get_database
from services.musicvibe_db.song_repository import SongRepository
from services.musicvibe_db.playlist_repository import PlaylistRepository


def _insert_song(conn, repo: SongRepository, **fields) -> int:
    values = {'title': "Test Song", 'artist': "Test Artist", 'genre': "Pop", 'created_at': datetime.now()}
    values.update(fields)
    return repo.add_song(conn, Song(**values))


def _insert_playlist(conn, repo: PlaylistRepository, name: str = "Mix", mood: str = None) -> int:
    now = datetime.now()
    return repo.add_playlist(conn, Playlist(name=name, mood=mood, created_at=now, updated_at=now))


def test_database_creation(tmp_path):
    db_path = str(tmp_path / "musicvibe.db")
    db = get_database(db_path)

    assert os.path.exists(db_path)
    tables = db.get_table_names()
    for table in ['songs', 'playlists', 'playlist_songs']:
        assert table in tables, f"Table {table} should exist"

    assert db.get_song_count() == 0
    assert db.get_playlist_count() == 0


def test_existing_database_is_reused(tmp_path):
    db_path = str(tmp_path / "musicvibe.db")
    db = MusicVibeDb(db_path)
    with db.get_connection() as conn:
        _insert_song(conn, SongRepository())

    reopened = MusicVibeDb(db_path)
    assert reopened.get_song_count() == 1


def test_connection_rolls_back_on_error(test_db):
    repo = SongRepository()
    with pytest.raises(RuntimeError):
        with test_db.get_connection() as conn:
            _insert_song(conn, repo)
            raise RuntimeError("abort")

    assert test_db.get_song_count() == 0


def test_song_round_trip(test_db):
    repo = SongRepository()
    created_at = datetime(2024, 5, 1, 12, 30)
    with test_db.get_connection() as conn:
        song_id = _insert_song(conn, repo, album="Album", duration=200, cover_url="http://cover",
                               release_year=2020, is_favorite=True, created_at=created_at)
        song = repo.get_song(conn, song_id)

    assert song.id == song_id
    assert song.album == "Album"
    assert song.duration == 200
    assert song.cover_url == "http://cover"
    assert song.release_year == 2020
    assert song.play_count == 0
    assert song.is_favorite is True
    assert song.created_at == created_at


def test_title_search_is_case_insensitive_substring(test_db):
    repo = SongRepository()
    with test_db.get_connection() as conn:
        _insert_song(conn, repo, title="Blinding Lights")
        _insert_song(conn, repo, title="Lose Yourself")
        _insert_song(conn, repo, title="ÉTÉ Indien")

        assert [s.title for s in repo.find_by_title(conn, "LIGHT")] == ["Blinding Lights"]
        assert [s.title for s in repo.find_by_title(conn, "été")] == ["ÉTÉ Indien"]
        # LIKE wildcards are matched literally
        assert repo.find_by_title(conn, "%") == []


def test_genre_search_is_exact(test_db):
    repo = SongRepository()
    with test_db.get_connection() as conn:
        _insert_song(conn, repo, genre="Rock")
        _insert_song(conn, repo, genre="Rockabilly")

        assert [s.genre for s in repo.find_by_genre(conn, "Rock")] == ["Rock"]
        assert repo.find_by_genre(conn, "rock") == []


def test_playlist_song_link_is_unique(test_db):
    songs = SongRepository()
    playlists = PlaylistRepository()
    with test_db.get_connection() as conn:
        song_id = _insert_song(conn, songs)
        playlist_id = _insert_playlist(conn, playlists)

        assert playlists.add_song(conn, playlist_id, song_id, datetime.now()) is True
        assert playlists.add_song(conn, playlist_id, song_id, datetime.now()) is False
        assert [s.id for s in playlists.get_playlist(conn, playlist_id).songs] == [song_id]


def test_deleting_song_cascades_to_playlist_links(test_db):
    songs = SongRepository()
    playlists = PlaylistRepository()
    with test_db.get_connection() as conn:
        song_id = _insert_song(conn, songs)
        playlist_id = _insert_playlist(conn, playlists)
        playlists.add_song(conn, playlist_id, song_id, datetime.now())

    with test_db.get_connection() as conn:
        assert songs.delete_song(conn, song_id) is True

    with test_db.get_connection() as conn:
        remaining = conn.execute("SELECT COUNT(*) FROM playlist_songs").fetchone()[0]
        assert remaining == 0
        assert playlists.get_playlist(conn, playlist_id).songs == []


def test_deleting_playlist_keeps_songs(test_db):
    songs = SongRepository()
    playlists = PlaylistRepository()
    with test_db.get_connection() as conn:
        song_id = _insert_song(conn, songs)
        playlist_id = _insert_playlist(conn, playlists)
        playlists.add_song(conn, playlist_id, song_id, datetime.now())

    with test_db.get_connection() as conn:
        assert playlists.delete_playlist(conn, playlist_id) is True

    with test_db.get_connection() as conn:
        assert songs.get_song(conn, song_id) is not None
        assert conn.execute("SELECT COUNT(*) FROM playlist_songs").fetchone()[0] == 0


def test_link_to_missing_song_is_rejected(test_db):
    playlists = PlaylistRepository()
    with pytest.raises(sqlite3.IntegrityError):
        with test_db.get_connection() as conn:
            playlist_id = _insert_playlist(conn, playlists)
            playlists.add_song(conn, playlist_id, 999, datetime.now())


def test_playlist_songs_keep_insertion_order(test_db):
    songs = SongRepository()
    playlists = PlaylistRepository()
    with test_db.get_connection() as conn:
        first = _insert_song(conn, songs, title="First")
        second = _insert_song(conn, songs, title="Second")
        third = _insert_song(conn, songs, title="Third")
        playlist_id = _insert_playlist(conn, playlists)
        for song_id in (third, first, second):
            playlists.add_song(conn, playlist_id, song_id, datetime.now())

        assert [s.id for s in playlists.get_playlist(conn, playlist_id).songs] == [third, first, second]
