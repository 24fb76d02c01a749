"""
Tag and priority I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...database.entities.tags import COLOR_PATTERN
from .base import PartialUpdate


class TagRead(BaseModel):
    """Schema for reading a tag from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    color: str
    project_id: int
    created_at: datetime


class TagCreate(BaseModel):
    title: str = Field(min_length=1, max_length=32)
    color: str = Field(default="#808080", pattern=COLOR_PATTERN)


class TagUpdate(PartialUpdate):
    title: Optional[str] = Field(default=None, min_length=1, max_length=32)
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)


class PriorityRead(BaseModel):
    """Schema for reading a priority from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    weight: int
    color: str
    project_id: int
    created_at: datetime


class PriorityCreate(BaseModel):
    title: str = Field(min_length=1, max_length=32)
    weight: int = Field(default=0, description="Higher is more important")
    color: str = Field(default="#808080", pattern=COLOR_PATTERN)


class PriorityUpdate(PartialUpdate):
    title: Optional[str] = Field(default=None, min_length=1, max_length=32)
    weight: Optional[int] = None
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)
