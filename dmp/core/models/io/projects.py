"""
Project I/O models for API requests and responses.

Project names are 3 to 36 characters from a restricted character set
(letters, digits, spaces and ``-_.,:;!?&()#+/@'``) and must not start or end
with a space. Descriptions use the same character set plus line breaks and
are limited to 256 characters.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import PartialUpdate
from .users import UserRead

PROJECT_NAME_PATTERN = r"^[\w \-.,:;!?&()#+/@']*$"
PROJECT_DESCRIPTION_PATTERN = r"^[\w \-.,:;!?&()#+/@'\r\n]*$"


def _check_outer_spaces(value: str) -> str:
    if value.startswith(" ") or value.endswith(" "):
        raise ValueError("must not start or end with a space")
    return value


class ProjectRead(BaseModel):
    """Schema for reading a project from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    preview_url: str
    owner_id: str
    ai_enabled: bool
    users: List[UserRead] = Field(default_factory=list, description="Users with an explicit grant")
    created_at: datetime
    updated_at: datetime


class ProjectCreate(BaseModel):
    """Schema for creating a project via API."""

    name: str = Field(min_length=3, max_length=36, pattern=PROJECT_NAME_PATTERN)
    description: str = Field(default="", max_length=256, pattern=PROJECT_DESCRIPTION_PATTERN)

    @field_validator("name")
    @classmethod
    def _name_spaces(cls, value: str) -> str:
        return _check_outer_spaces(value)


class ProjectUpdate(PartialUpdate):
    """Schema for editing a project via API. None of its fields may be null."""

    name: Optional[str] = Field(default=None, min_length=3, max_length=36, pattern=PROJECT_NAME_PATTERN)
    description: Optional[str] = Field(default=None, max_length=256, pattern=PROJECT_DESCRIPTION_PATTERN)
    preview_url: Optional[str] = Field(default=None, max_length=512)
    ai_enabled: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _name_spaces(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _check_outer_spaces(value)
