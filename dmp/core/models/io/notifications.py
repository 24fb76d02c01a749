"""
Notification I/O models for API responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class NotificationRead(BaseModel):
    """Schema for reading a notification from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    suffix: str
    description: str
    link: str
    link_title: str
    user_id: str
    read_at: Optional[datetime] = None
    created_at: datetime
