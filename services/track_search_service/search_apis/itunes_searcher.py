import requests
from typing import Any, Dict, List, Optional
import logging

from common.exceptions import UpstreamUnavailableError
from common.models.models import GlobalTrack
from services.track_search_service.track_searcher_interface import TrackSearcherInterface

logger = logging.getLogger(__name__)


def extract_release_year(release_date: Any) -> Optional[str]:
    """First four characters of an iTunes release date, e.g. '2020-03-20T07:00:00Z' -> '2020'"""
    if isinstance(release_date, str) and len(release_date) >= 4:
        return release_date[:4]
    return None


def millis_to_seconds(track_time_millis: Any) -> int:
    # bool is an int subclass but never a duration
    if isinstance(track_time_millis, (int, float)) and not isinstance(track_time_millis, bool):
        return int(track_time_millis // 1000)
    return 0


class ITunesSearcher(TrackSearcherInterface):
    """iTunes Search API implementation - free, no authentication required"""

    def __init__(
        self,
        base_url: str = "https://itunes.apple.com/search",
        limit: int = 20,
        user_agent: str = "MusicVibe/1.0",
        timeout: Optional[float] = None
    ):
        self.base_url = base_url
        self.limit = limit
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': user_agent
        })

    def search_tracks(self, query: str) -> List[GlobalTrack]:
        logger.debug(f"iTunes: Searching tracks for '{query}'")

        params = {
            'term': query,
            'media': 'music',
            'entity': 'song',
            'limit': self.limit
        }

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise UpstreamUnavailableError("iTunes", f"request failed: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailableError("iTunes", f"invalid JSON: {e}") from e

        if not isinstance(data, dict) or 'results' not in data:
            raise UpstreamUnavailableError("iTunes", "response has no results")

        results = data['results']
        if not isinstance(results, list):
            raise UpstreamUnavailableError("iTunes", "results is not a list")

        tracks = []
        for record in results:
            if not isinstance(record, dict):
                raise UpstreamUnavailableError("iTunes", f"malformed result record: {record!r}")
            tracks.append(self._record_to_track(record))

        logger.debug(f"iTunes: {len(tracks)} tracks for '{query}'")
        return tracks

    @staticmethod
    def _record_to_track(record: Dict[str, Any]) -> GlobalTrack:
        return GlobalTrack(
            title=_text(record, 'trackName'),
            artist=_text(record, 'artistName'),
            album=_text(record, 'collectionName'),
            cover_url=_text(record, 'artworkUrl100'),
            release_year=extract_release_year(record.get('releaseDate')),
            duration=millis_to_seconds(record.get('trackTimeMillis')),
            genre=_text(record, 'primaryGenreName'),
            preview_url=_text(record, 'previewUrl'),
            external_url=_text(record, 'trackViewUrl'),
            price=_number(record, 'trackPrice'),
            currency=_text(record, 'currency'),
            is_global=True
        )


def _text(record: Dict[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        logger.debug(f"iTunes: Ignoring non-string {key}: {value!r}")
        return None
    return value


def _number(record: Dict[str, Any], key: str) -> Optional[float]:
    value = record.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
        logger.debug(f"iTunes: Ignoring non-numeric {key}: {value!r}")
        return None
    return value
