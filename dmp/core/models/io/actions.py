"""
Action I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import PartialUpdate, UTCDatetime
from .tags import TagRead
from .users import UserRead


class TopicSummary(BaseModel):
    """Compact view of a topic linked to an action."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    meeting_id: int


class ActionRead(BaseModel):
    """Schema for reading an action from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    due_date: Optional[datetime] = None
    project_id: int
    creator_id: str
    priority_id: Optional[int] = None
    closed_at: Optional[datetime] = None
    topics: List[TopicSummary] = Field(default_factory=list)
    assigned_users: List[UserRead] = Field(default_factory=list)
    tags: List[TagRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ActionCreate(BaseModel):
    title: str = Field(min_length=1, max_length=128)
    description: str = Field(default="")
    due_date: Optional[UTCDatetime] = None
    priority_id: Optional[int] = None


class ActionUpdate(PartialUpdate):
    CLEARABLE = frozenset({"due_date", "priority_id"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=128)
    description: Optional[str] = None
    due_date: Optional[UTCDatetime] = None
    priority_id: Optional[int] = None


class StatusUpdate(BaseModel):
    """Open or close a topic or an action."""

    close: bool
