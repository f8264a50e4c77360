from typing import Optional
from dataclasses import dataclass
import logging

from services.lyrics_finder_service.lyrics_searcher_interface import LyricsSearcherInterface

logger = logging.getLogger(__name__)

LYRICS_NOT_FOUND_MESSAGE = "Lyrics not found. Try adjusting the artist or song name."
LYRICS_UNAVAILABLE_MESSAGE = "Unable to find lyrics. Please check the artist and song names."


@dataclass
class LyricsLookup:
    """Outcome of a lyrics lookup as returned to API clients"""
    found: bool
    artist: Optional[str] = None
    title: Optional[str] = None
    lyrics: Optional[str] = None
    message: Optional[str] = None


class LyricsFinderService:
    """Service for finding lyrics using interchangeable API implementations"""

    def __init__(self, lyrics_searcher: LyricsSearcherInterface):
        """
        Initialize with a lyrics searcher implementation.

        Args:
            lyrics_searcher: Implementation of LyricsSearcherInterface
        """
        self.lyrics_searcher = lyrics_searcher
        logger.debug(f"LyricsFinderService initialized with searcher: {type(lyrics_searcher).__name__}")

    def search_lyrics(self, artist: str, title: str) -> LyricsLookup:
        """
        Look up lyrics for a song.

        Both a missing entry upstream and any upstream failure produce
        found=False; only the message tells them apart.
        """
        clean_artist = artist.strip()
        clean_title = title.strip()
        logger.info(f"Searching lyrics for: {clean_artist} - {clean_title}")

        try:
            result = self.lyrics_searcher.search_lyrics(clean_artist, clean_title)
        except Exception as e:
            logger.error(f"Error searching lyrics: {e}")
            return LyricsLookup(found=False, message=LYRICS_UNAVAILABLE_MESSAGE)

        if not result.found:
            logger.info(f"No lyrics found for: {clean_artist} - {clean_title}")
            return LyricsLookup(found=False, message=LYRICS_NOT_FOUND_MESSAGE)

        logger.info(f"Lyrics found for: {clean_artist} - {clean_title} from {result.source}")
        return LyricsLookup(
            found=True,
            artist=clean_artist,
            title=clean_title,
            lyrics=result.lyrics
        )
