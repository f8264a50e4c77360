"""
Health-related API models for MusicVibe service
"""

from pydantic import BaseModel

from services.api_models.common_models import CamelModel


class LivenessResponse(BaseModel):
    status: str
    service: str


class ProbeResponse(BaseModel):
    status: str


class HealthResponse(CamelModel):
    status: str
    database: str
    song_count: int
    playlist_count: int
    timestamp: str
