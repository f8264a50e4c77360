from typing import List
import logging

from common.models.models import GlobalTrack
from services.track_search_service.track_searcher_interface import TrackSearcherInterface

logger = logging.getLogger(__name__)


class TrackSearchService:
    """Proxy to an external catalog; failures never reach the caller"""

    def __init__(self, track_searcher: TrackSearcherInterface):
        self.track_searcher = track_searcher
        logger.debug(f"TrackSearchService initialized with searcher: {type(track_searcher).__name__}")

    def search_global(self, query: str, type: str = "track") -> List[GlobalTrack]:
        logger.info(f"Searching external catalog for: {query} (type={type})")

        try:
            tracks = self.track_searcher.search_tracks(query)
        except Exception as e:
            logger.error(f"Error searching external catalog: {e}")
            return []

        logger.info(f"Found {len(tracks)} songs for query: {query}")
        return tracks
