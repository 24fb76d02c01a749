"""
Topic entity model.

A topic is a discussion item within a meeting. Topics are ordered inside
their meeting, may be closed, and may require a solution comment before
they can be closed.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship

from ..base import Base, TimestampMixin
from .links import TopicTagLink, TopicUserLink
from .meetings import Meeting
from .tags import Tag
from .users import User


class TopicBase(Base):
    """Base fields for a topic."""

    title: str = Field(max_length=128, description="Topic title")
    description: str = Field(default="", description="Topic description (markdown)")
    force_solution: bool = Field(default=False, description="Require a solution before the topic can be closed")


class Topic(TopicBase, TimestampMixin, table=True):
    """Persistent topic.

    Table: topics
    """

    __tablename__ = "topics"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    meeting_id: int = Field(foreign_key="meetings.id", index=True)
    creator_id: str = Field(foreign_key="users.id")
    priority_id: Optional[int] = Field(default=None, foreign_key="priorities.id")
    # Comment id; not a constraint because comments reference topics as well
    solution_id: Optional[int] = Field(default=None)
    closed_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
    order_index: int = Field(default=0, description="Position inside the meeting, ascending")

    meeting: Optional[Meeting] = Relationship(sa_relationship_kwargs={"lazy": "selectin"})
    assigned_users: List[User] = Relationship(link_model=TopicUserLink, sa_relationship_kwargs={"lazy": "selectin"})
    tags: List[Tag] = Relationship(link_model=TopicTagLink, sa_relationship_kwargs={"lazy": "selectin"})

    @property
    def is_closed(self) -> bool:
        return self.closed_at is not None

    def check_project_ownership(self, project_id: int) -> bool:
        # The meeting must be loaded; an unloaded meeting never matches
        return self.meeting is not None and self.meeting.id is not None and self.meeting.project_id == project_id

    def __repr__(self) -> str:
        return f"Topic(id={self.id}, title={self.title}, meeting={self.meeting_id})"
