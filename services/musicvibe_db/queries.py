"""
Centralized SQL queries for the MusicVibe database.
All SQL statements are organized here for better maintainability.
"""

# Table creation queries
CREATE_SONGS_TABLE = '''
    CREATE TABLE IF NOT EXISTS songs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        artist TEXT NOT NULL,
        album TEXT,
        genre TEXT NOT NULL,
        duration INTEGER,
        cover_url TEXT,
        release_year INTEGER,
        play_count INTEGER NOT NULL DEFAULT 0,
        is_favorite BOOLEAN NOT NULL DEFAULT 0,
        created_at TIMESTAMP NOT NULL
    )
'''

CREATE_PLAYLISTS_TABLE = '''
    CREATE TABLE IF NOT EXISTS playlists (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT,
        mood TEXT,
        cover_url TEXT,
        created_at TIMESTAMP NOT NULL,
        updated_at TIMESTAMP NOT NULL
    )
'''

CREATE_PLAYLIST_SONGS_TABLE = '''
    CREATE TABLE IF NOT EXISTS playlist_songs (
        playlist_id INTEGER NOT NULL,
        song_id INTEGER NOT NULL,
        added_at TIMESTAMP NOT NULL,
        PRIMARY KEY (playlist_id, song_id),
        FOREIGN KEY (playlist_id) REFERENCES playlists (id) ON DELETE CASCADE,
        FOREIGN KEY (song_id) REFERENCES songs (id) ON DELETE CASCADE
    )
'''

# Index creation queries
INDEXES = [
    'CREATE INDEX IF NOT EXISTS idx_songs_genre ON songs(genre)',
    'CREATE INDEX IF NOT EXISTS idx_songs_is_favorite ON songs(is_favorite)',
    'CREATE INDEX IF NOT EXISTS idx_playlists_mood ON playlists(mood)',
    'CREATE INDEX IF NOT EXISTS idx_playlist_songs_song_id ON playlist_songs(song_id)',
]

# All table creation statements in dependency order
TABLE_CREATION_STATEMENTS = [
    CREATE_SONGS_TABLE,
    CREATE_PLAYLISTS_TABLE,
    CREATE_PLAYLIST_SONGS_TABLE,
]

# Song queries
INSERT_SONG = '''
    INSERT INTO songs (title, artist, album, genre, duration, cover_url, release_year,
                       play_count, is_favorite, created_at)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
'''

SELECT_ALL_SONGS = 'SELECT * FROM songs ORDER BY id'
SELECT_SONG_BY_ID = 'SELECT * FROM songs WHERE id = ?'

# CASEFOLD is registered on every connection by MusicVibeDb
SELECT_SONGS_BY_TITLE = '''
    SELECT * FROM songs
    WHERE INSTR(CASEFOLD(title), CASEFOLD(?)) > 0
    ORDER BY id
'''

SELECT_SONGS_BY_ARTIST = '''
    SELECT * FROM songs
    WHERE INSTR(CASEFOLD(artist), CASEFOLD(?)) > 0
    ORDER BY id
'''

SELECT_SONGS_BY_GENRE = 'SELECT * FROM songs WHERE genre = ? ORDER BY id'

SELECT_FAVORITE_SONGS = 'SELECT * FROM songs WHERE is_favorite = 1 ORDER BY id'

SELECT_TOP_SONGS_BY_GENRE = '''
    SELECT * FROM songs
    WHERE genre = ?
    ORDER BY play_count DESC, id
'''

UPDATE_SONG = '''
    UPDATE songs
    SET title = ?, artist = ?, album = ?, genre = ?, duration = ?, cover_url = ?,
        release_year = ?, is_favorite = ?
    WHERE id = ?
'''

TOGGLE_SONG_FAVORITE = 'UPDATE songs SET is_favorite = NOT is_favorite WHERE id = ?'

INCREMENT_SONG_PLAY_COUNT = 'UPDATE songs SET play_count = play_count + 1 WHERE id = ?'

DELETE_SONG = 'DELETE FROM songs WHERE id = ?'

COUNT_SONGS = 'SELECT COUNT(*) FROM songs'

# Playlist queries
INSERT_PLAYLIST = '''
    INSERT INTO playlists (name, description, mood, cover_url, created_at, updated_at)
    VALUES (?, ?, ?, ?, ?, ?)
'''

SELECT_ALL_PLAYLISTS = 'SELECT * FROM playlists ORDER BY id'
SELECT_PLAYLIST_BY_ID = 'SELECT * FROM playlists WHERE id = ?'
SELECT_PLAYLISTS_BY_MOOD = 'SELECT * FROM playlists WHERE mood = ? ORDER BY id'

SELECT_PLAYLISTS_BY_NAME = '''
    SELECT * FROM playlists
    WHERE INSTR(CASEFOLD(name), CASEFOLD(?)) > 0
    ORDER BY id
'''

UPDATE_PLAYLIST = '''
    UPDATE playlists
    SET name = ?, description = ?, mood = ?, cover_url = ?, updated_at = ?
    WHERE id = ?
'''

TOUCH_PLAYLIST = 'UPDATE playlists SET updated_at = ? WHERE id = ?'

DELETE_PLAYLIST = 'DELETE FROM playlists WHERE id = ?'

COUNT_PLAYLISTS = 'SELECT COUNT(*) FROM playlists'

# Playlist membership queries
SELECT_SONGS_OF_PLAYLIST = '''
    SELECT s.*
    FROM playlist_songs ps
    JOIN songs s ON ps.song_id = s.id
    WHERE ps.playlist_id = ?
    ORDER BY ps.added_at, ps.rowid
'''

SELECT_PLAYLIST_SONG = 'SELECT 1 FROM playlist_songs WHERE playlist_id = ? AND song_id = ?'

INSERT_PLAYLIST_SONG = '''
    INSERT OR IGNORE INTO playlist_songs (playlist_id, song_id, added_at)
    VALUES (?, ?, ?)
'''

DELETE_PLAYLIST_SONG = 'DELETE FROM playlist_songs WHERE playlist_id = ? AND song_id = ?'

# Connection setup
ENABLE_FOREIGN_KEYS = 'PRAGMA foreign_keys = ON'
CHECK_EXISTING_TABLES = "SELECT name FROM sqlite_master WHERE type='table'"
