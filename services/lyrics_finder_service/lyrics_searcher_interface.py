from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass


@dataclass
class LyricsSearchResult:
    """Result from lyrics search"""
    found: bool
    lyrics: Optional[str] = None
    source: Optional[str] = None  # Name of the API source


class LyricsSearcherInterface(ABC):
    """Interface for lyrics searcher implementations"""

    @abstractmethod
    def search_lyrics(self, artist: str, title: str) -> LyricsSearchResult:
        """
        Search for plain text lyrics.

        Args:
            artist: Artist name, already trimmed
            title: Song title, already trimmed

        Returns:
            LyricsSearchResult, found=False when the source has no lyrics

        Raises:
            UpstreamUnavailableError: on any network, HTTP or payload failure
        """
        pass
