"""
Exception types shared by the MusicVibe services and API layer
"""

from typing import Dict, Optional


class MusicVibeError(Exception):
    """Base class for all MusicVibe errors"""


class NotFoundError(MusicVibeError):
    """Raised when a referenced song or playlist does not exist"""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationError(MusicVibeError):
    """Raised when required fields are missing or blank"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))


class UpstreamUnavailableError(MusicVibeError):
    """Raised by external API searchers when the upstream call fails in any way"""

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        super().__init__(f"{source} unavailable: {reason}" if reason else f"{source} unavailable")
