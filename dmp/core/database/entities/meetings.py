"""
Meeting entity model.

A meeting is a scheduled event within a project. Users and tags are
assigned through link tables.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship

from ..base import Base, TimestampMixin
from .links import MeetingTagLink, MeetingUserLink
from .tags import Tag
from .users import User


class MeetingBase(Base):
    """Base fields for a meeting."""

    name: str = Field(max_length=64, description="Meeting name")
    description: str = Field(default="", description="Meeting description (markdown)")
    start_date: datetime = Field(index=True, sa_type=DateTime, description="Scheduled start")
    end_date: Optional[datetime] = Field(default=None, sa_type=DateTime, description="Scheduled end")


class Meeting(MeetingBase, TimestampMixin, table=True):
    """Persistent meeting.

    Table: meetings
    """

    __tablename__ = "meetings"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    creator_id: str = Field(foreign_key="users.id")

    assigned_users: List[User] = Relationship(
        link_model=MeetingUserLink, sa_relationship_kwargs={"lazy": "selectin"}
    )
    tags: List[Tag] = Relationship(link_model=MeetingTagLink, sa_relationship_kwargs={"lazy": "selectin"})

    def check_project_ownership(self, project_id: int) -> bool:
        return self.project_id == project_id

    def __repr__(self) -> str:
        return f"Meeting(id={self.id}, name={self.name}, project={self.project_id})"
