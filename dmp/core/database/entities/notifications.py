"""
Notification entity model.

Notifications are per-user inbox messages created when a user is granted
access to a project or assigned to a meeting, topic or action.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, TimestampMixin


class NotificationBase(Base):
    """Base fields for a notification."""

    title: str = Field(max_length=128, description="Notification title")
    suffix: str = Field(default="", max_length=128, description="Shown after the title in the notification view")
    description: str = Field(default="", description="Notification body")
    link: str = Field(default="", description="Frontend link the notification points to")
    link_title: str = Field(default="", max_length=64, description="Title of the link")


class Notification(NotificationBase, TimestampMixin, table=True):
    """Persistent notification.

    Table: notifications
    """

    __tablename__ = "notifications"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    read_at: Optional[datetime] = Field(default=None, sa_type=DateTime)

    @property
    def is_read(self) -> bool:
        return self.read_at is not None

    def __repr__(self) -> str:
        return f"Notification(id={self.id}, user={self.user_id}, title={self.title})"
