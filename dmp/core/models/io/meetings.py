"""
Meeting I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .base import PartialUpdate, UTCDatetime
from .tags import TagRead
from .users import UserRead


class MeetingRead(BaseModel):
    """Schema for reading a meeting from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    start_date: datetime
    end_date: Optional[datetime] = None
    project_id: int
    creator_id: str
    assigned_users: List[UserRead] = Field(default_factory=list)
    tags: List[TagRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class MeetingCreate(BaseModel):
    """Schema for creating a meeting via API.

    ``end_date`` is optional; when given it must not be before ``start_date``.
    """

    name: str = Field(min_length=1, max_length=64)
    description: str = Field(default="")
    start_date: UTCDatetime
    end_date: Optional[UTCDatetime] = None

    @model_validator(mode="after")
    def _check_dates(self) -> "MeetingCreate":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class MeetingUpdate(PartialUpdate):
    """Schema for editing a meeting via API.

    Date consistency against the stored meeting is checked by the router,
    since either date may be omitted here. Only ``end_date`` can be cleared.
    """

    CLEARABLE = frozenset({"end_date"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=64)
    description: Optional[str] = None
    start_date: Optional[UTCDatetime] = None
    end_date: Optional[UTCDatetime] = None
