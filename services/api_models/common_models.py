"""
Shared API model base and error models for MusicVibe service
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict


class CamelModel(BaseModel):
    """Serialized with camelCase keys; accepts camelCase or snake_case input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationErrorResponse(BaseModel):
    message: str
    errors: Dict[str, str]
