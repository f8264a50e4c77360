"""
Sample catalog loaded into an empty database on first start
"""

import logging

from common.models.models import Song, Playlist
from services.musicvibe_db.musicvibe_db import MusicVibeDb
from services.song_service.song_service import get_song_service
from services.playlist_service.playlist_service import get_playlist_service

logger = logging.getLogger(__name__)

SAMPLE_SONGS = [
    Song(title="Blinding Lights", artist="The Weeknd", album="After Hours", genre="Pop", duration=200,
         cover_url="https://i.scdn.co/image/ab67616d0000b273a5b1e58925d2f96e7e83c2b8", release_year=2020),
    Song(title="Shape of You", artist="Ed Sheeran", album="÷ (Divide)", genre="Pop", duration=233,
         cover_url="https://i.scdn.co/image/ab67616d0000b273ba5db46f4b838ef6027e6f96", release_year=2017),
    Song(title="Bohemian Rhapsody", artist="Queen", album="A Night at the Opera", genre="Rock", duration=354,
         cover_url="https://i.scdn.co/image/ab67616d0000b2731bf5e655f2ec98ae16b0d9d7", release_year=1975,
         is_favorite=True),
    Song(title="Lose Yourself", artist="Eminem", album="8 Mile Soundtrack", genre="Hip-Hop", duration=326,
         cover_url="https://i.scdn.co/image/ab67616d0000b273726d48d93d02e1271774f929", release_year=2002),
    Song(title="Hotel California", artist="Eagles", album="Hotel California", genre="Rock", duration=391,
         cover_url="https://i.scdn.co/image/ab67616d0000b273a0fcf77ba1bb6b8c8c02e09f", release_year=1976,
         is_favorite=True),
    Song(title="Levitating", artist="Dua Lipa", album="Future Nostalgia", genre="Pop", duration=203,
         cover_url="https://i.scdn.co/image/ab67616d0000b273dbc41926e1a99e0bb69a0f63", release_year=2020),
    Song(title="Smells Like Teen Spirit", artist="Nirvana", album="Nevermind", genre="Rock", duration=301,
         cover_url="https://i.scdn.co/image/ab67616d0000b273ddb3ac1fbc8f88ee41b6ef1d", release_year=1991),
    Song(title="Clair de Lune", artist="Claude Debussy", album="Suite Bergamasque", genre="Classical", duration=300,
         cover_url="https://i.scdn.co/image/ab67616d0000b273a5b1e58925d2f96e7e83c2b8", release_year=1905),
    Song(title="God's Plan", artist="Drake", album="Scorpion", genre="Hip-Hop", duration=198,
         cover_url="https://i.scdn.co/image/ab67616d0000b273f907de96b9a4fbc04accc0d5", release_year=2018),
    Song(title="Weightless", artist="Marconi Union", album="Weightless", genre="Ambient", duration=510,
         cover_url="https://i.scdn.co/image/ab67616d0000b2731bf5e655f2ec98ae16b0d9d7", release_year=2011),
]

# (playlist, indexes into SAMPLE_SONGS)
SAMPLE_PLAYLISTS = [
    (Playlist(name="Workout Mix", description="High energy songs for your workout", mood="Workout",
              cover_url="https://images.unsplash.com/photo-1571902943202-507ec2618e8f"), [0, 3, 8]),
    (Playlist(name="Chill Vibes", description="Relax and unwind", mood="Chill",
              cover_url="https://images.unsplash.com/photo-1470225620780-dba8ba36b745"), [7, 9, 1]),
    (Playlist(name="Classic Rock Hits", description="Timeless rock anthems", mood="Rock",
              cover_url="https://images.unsplash.com/photo-1498038432885-c6f3f1b912ee"), [2, 4, 6]),
]


def seed_sample_data(db: MusicVibeDb) -> bool:
    """Insert the sample catalog when the songs table is empty; returns True if anything was inserted"""
    if db.get_song_count() > 0:
        logger.debug("Songs already present, skipping sample data")
        return False

    song_service = get_song_service(db)
    playlist_service = get_playlist_service(db)

    songs = [song_service.create(song) for song in SAMPLE_SONGS]

    for playlist, song_indexes in SAMPLE_PLAYLISTS:
        created = playlist_service.create(playlist)
        for index in song_indexes:
            playlist_service.add_song(created.id, songs[index].id)

    logger.info(f"Sample data initialized: {len(songs)} songs and {len(SAMPLE_PLAYLISTS)} playlists created")
    return True
