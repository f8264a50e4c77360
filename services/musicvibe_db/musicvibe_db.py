import sqlite3
import os
import logging
from typing import Optional
from contextlib import contextmanager

from .queries import *

logger = logging.getLogger(__name__)


def _casefold(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.casefold()


class MusicVibeDb:
    """SQLite connection manager for the MusicVibe catalog"""

    def __init__(self, db_path: str = "musicvibe.db"):
        self.db_path = db_path
        self.ensure_database_exists()

    def ensure_database_exists(self):
        if not os.path.exists(self.db_path):
            logger.info(f"Creating new database: {self.db_path}")
        else:
            logger.info(f"Using existing database: {self.db_path}")
        self.create_tables()

    @contextmanager
    def get_connection(self):
        """
        Open a connection scoped to one unit of work.

        Commits when the block exits normally, rolls back when it raises,
        and always closes the connection.
        """
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.create_function("CASEFOLD", 1, _casefold, deterministic=True)
        conn.execute(ENABLE_FOREIGN_KEYS)
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def create_tables(self):
        with self.get_connection() as conn:
            cursor = conn.cursor()

            for statement in TABLE_CREATION_STATEMENTS:
                cursor.execute(statement)

            for index_query in INDEXES:
                cursor.execute(index_query)

        logger.debug("Database tables ready")

    def get_table_names(self):
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(CHECK_EXISTING_TABLES)
            return [row[0] for row in cursor.fetchall()]

    def get_song_count(self) -> int:
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(COUNT_SONGS)
            return cursor.fetchone()[0]

    def get_playlist_count(self) -> int:
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(COUNT_PLAYLISTS)
            return cursor.fetchone()[0]


def get_database(db_path: str = "musicvibe.db") -> MusicVibeDb:
    return MusicVibeDb(db_path)
