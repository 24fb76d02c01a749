"""
Shared columns of every DMP table.

Timestamps are stored as naive UTC. Columns are typed ``DateTime`` explicitly
so that sqlmodel does not pick a timezone-aware column type for them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value.utcoffset() is None:
        return value.replace(tzinfo=None)
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class Base(SQLModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)


class TimestampMixin(SQLModel):
    """``created_at``, ``updated_at`` and the soft-deletion marker ``deleted_at``."""

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime, sa_column_kwargs={"onupdate": utcnow})
    deleted_at: Optional[datetime] = Field(default=None, sa_type=DateTime, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
