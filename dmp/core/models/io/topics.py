"""
Topic I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import PartialUpdate
from .tags import TagRead
from .users import UserRead


class TopicRead(BaseModel):
    """Schema for reading a topic from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    meeting_id: int
    creator_id: str
    priority_id: Optional[int] = None
    solution_id: Optional[int] = None
    force_solution: bool
    closed_at: Optional[datetime] = None
    order_index: int
    assigned_users: List[UserRead] = Field(default_factory=list)
    tags: List[TagRead] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class TopicCreate(BaseModel):
    title: str = Field(min_length=1, max_length=128)
    description: str = Field(default="")
    force_solution: bool = False
    priority_id: Optional[int] = None


class TopicUpdate(PartialUpdate):
    CLEARABLE = frozenset({"priority_id"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=128)
    description: Optional[str] = None
    force_solution: Optional[bool] = None
    priority_id: Optional[int] = None


class TopicOrderUpdate(BaseModel):
    """Move a topic between two sibling topics.

    ``before`` is the topic that should precede the moved one and ``after``
    the one that should follow it; ``-1`` means none. When both are given
    they must be adjacent.
    """

    before: int = -1
    after: int = -1
