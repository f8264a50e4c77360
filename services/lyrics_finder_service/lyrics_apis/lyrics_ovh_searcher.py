import requests
from requests.utils import quote
from typing import Optional
import logging

from common.exceptions import UpstreamUnavailableError
from services.lyrics_finder_service.lyrics_searcher_interface import LyricsSearcherInterface, LyricsSearchResult

logger = logging.getLogger(__name__)


class LyricsOvhSearcher(LyricsSearcherInterface):
    """lyrics.ovh API implementation - free, no authentication required"""

    def __init__(
        self,
        base_url: str = "https://api.lyrics.ovh/v1",
        user_agent: str = "MusicVibe/1.0",
        timeout: Optional[float] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent
        })

    def build_url(self, artist: str, title: str) -> str:
        return f"{self.base_url}/{quote(artist, safe='')}/{quote(title, safe='')}"

    def search_lyrics(self, artist: str, title: str) -> LyricsSearchResult:
        logger.debug(f"lyrics.ovh: Searching lyrics for {artist} - {title}")

        try:
            response = self.session.get(self.build_url(artist, title), timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise UpstreamUnavailableError("lyrics.ovh", f"request failed: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailableError("lyrics.ovh", f"invalid JSON: {e}") from e

        if isinstance(data, dict) and 'lyrics' in data:
            if not isinstance(data['lyrics'], str):
                raise UpstreamUnavailableError("lyrics.ovh", "lyrics is not a string")
            return LyricsSearchResult(found=True, lyrics=data['lyrics'], source="lyrics.ovh")

        logger.debug("lyrics.ovh: Response has no lyrics")
        return LyricsSearchResult(found=False, source="lyrics.ovh")
