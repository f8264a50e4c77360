"""
Pytest fixtures shared by the MusicVibe test modules.

Every test gets its own SQLite file under tmp_path; upstream APIs are
replaced by in-memory fakes so no test touches the network.
"""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from common.exceptions import UpstreamUnavailableError
from common.models.models import GlobalTrack, Song, Playlist
from services.musicvibe_db.musicvibe_db import MusicVibeDb
from services.song_service.song_service import get_song_service
from services.playlist_service.playlist_service import get_playlist_service
from services.track_search_service.track_searcher_interface import TrackSearcherInterface
from services.track_search_service.track_search_service import TrackSearchService
from services.lyrics_finder_service.lyrics_searcher_interface import LyricsSearcherInterface, LyricsSearchResult
from services.lyrics_finder_service.lyrics_finder_service import LyricsFinderService


class FakeTrackSearcher(TrackSearcherInterface):
    """Returns canned tracks, or raises UpstreamUnavailableError when fail=True"""

    def __init__(self, tracks: Optional[List[GlobalTrack]] = None, fail: bool = False):
        self.tracks = tracks or []
        self.fail = fail
        self.queries = []

    def search_tracks(self, query: str) -> List[GlobalTrack]:
        self.queries.append(query)
        if self.fail:
            raise UpstreamUnavailableError("fake", "search failed")
        return self.tracks


class FakeLyricsSearcher(LyricsSearcherInterface):
    def __init__(self, lyrics: Optional[str] = None, fail: bool = False):
        self.lyrics = lyrics
        self.fail = fail
        self.calls = []

    def search_lyrics(self, artist: str, title: str) -> LyricsSearchResult:
        self.calls.append((artist, title))
        if self.fail:
            raise UpstreamUnavailableError("fake", "lyrics failed")
        if self.lyrics is None:
            return LyricsSearchResult(found=False, source="fake")
        return LyricsSearchResult(found=True, lyrics=self.lyrics, source="fake")


@pytest.fixture
def test_db(tmp_path) -> MusicVibeDb:
    return MusicVibeDb(str(tmp_path / "test_musicvibe.db"))


@pytest.fixture
def song_service(test_db):
    return get_song_service(test_db)


@pytest.fixture
def playlist_service(test_db):
    return get_playlist_service(test_db)


@pytest.fixture
def make_song(song_service):
    """Create a song with sensible defaults; keyword arguments override fields"""
    def _make_song(**fields) -> Song:
        values = {'title': "Test Song", 'artist': "Test Artist", 'genre': "Pop"}
        values.update(fields)
        return song_service.create(Song(**values))
    return _make_song


@pytest.fixture
def make_playlist(playlist_service):
    def _make_playlist(**fields) -> Playlist:
        values = {'name': "Test Playlist"}
        values.update(fields)
        return playlist_service.create(Playlist(**values))
    return _make_playlist


@pytest.fixture
def fake_track_searcher():
    return FakeTrackSearcher()


@pytest.fixture
def fake_lyrics_searcher():
    return FakeLyricsSearcher()


@pytest.fixture
def api_client(test_db, fake_track_searcher, fake_lyrics_searcher):
    """TestClient bound to the temporary database and fake upstream searchers"""
    import api

    api.app.dependency_overrides[api.get_db] = lambda: test_db
    api.app.dependency_overrides[api.get_track_search] = lambda: TrackSearchService(fake_track_searcher)
    api.app.dependency_overrides[api.get_lyrics_finder] = lambda: LyricsFinderService(fake_lyrics_searcher)

    yield TestClient(api.app)

    # Cleanup: Reset dependency overrides
    api.app.dependency_overrides.clear()
