"""
Action entity model.

An action is a task within a project, usually derived from one or more
topics. Actions can be assigned to users, tagged, prioritized and closed.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship

from ..base import Base, TimestampMixin
from .links import ActionTagLink, ActionUserLink, TopicActionLink
from .tags import Tag
from .topics import Topic
from .users import User


class ActionBase(Base):
    """Base fields for an action."""

    title: str = Field(max_length=128, description="Action title")
    description: str = Field(default="", description="Action description (markdown)")
    due_date: Optional[datetime] = Field(default=None, sa_type=DateTime, description="Optional due date")


class Action(ActionBase, TimestampMixin, table=True):
    """Persistent action.

    Table: actions
    """

    __tablename__ = "actions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    creator_id: str = Field(foreign_key="users.id")
    priority_id: Optional[int] = Field(default=None, foreign_key="priorities.id")
    closed_at: Optional[datetime] = Field(default=None, sa_type=DateTime)

    topics: List[Topic] = Relationship(link_model=TopicActionLink, sa_relationship_kwargs={"lazy": "selectin"})
    assigned_users: List[User] = Relationship(
        link_model=ActionUserLink, sa_relationship_kwargs={"lazy": "selectin"}
    )
    tags: List[Tag] = Relationship(link_model=ActionTagLink, sa_relationship_kwargs={"lazy": "selectin"})

    @property
    def is_closed(self) -> bool:
        return self.closed_at is not None

    def check_project_ownership(self, project_id: int) -> bool:
        return self.project_id == project_id

    def __repr__(self) -> str:
        return f"Action(id={self.id}, title={self.title}, project={self.project_id})"
