"""
User I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime


class UserUpdate(BaseModel):
    """Schema for renaming the current user."""

    name: str = Field(min_length=3, max_length=32, description="New display name, unique across users")

    @field_validator("name")
    @classmethod
    def _no_outer_whitespace(cls, value: str) -> str:
        if value != value.strip():
            raise ValueError("name must not start or end with whitespace")
        return value
