"""
Comment I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_COMMENT_LENGTH = 4096


class CommentRead(BaseModel):
    """Schema for reading a comment from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    author_id: str
    project_id: Optional[int] = None
    meeting_id: Optional[int] = None
    topic_id: Optional[int] = None
    action_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class CommentCreate(BaseModel):
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH, description="Markdown content")


class CommentUpdate(BaseModel):
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH, description="Markdown content")
