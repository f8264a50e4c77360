from abc import ABC, abstractmethod
from typing import List

from common.models.models import GlobalTrack


class TrackSearcherInterface(ABC):
    """Interface for external catalog search implementations"""

    @abstractmethod
    def search_tracks(self, query: str) -> List[GlobalTrack]:
        """
        Search the external catalog for tracks.

        Args:
            query: Free-text search term

        Returns:
            Normalized tracks, possibly empty

        Raises:
            UpstreamUnavailableError: on any network, HTTP or payload failure
        """
        pass
