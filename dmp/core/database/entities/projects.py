"""
Project entity model.

A project is the top-level ownership realm. Meetings, actions, tags,
priorities and comments all belong to exactly one project.
"""

from typing import List, Optional

from sqlmodel import Field, Relationship

from ..base import Base, TimestampMixin
from .links import UserProjectLink
from .users import User


class ProjectBase(Base):
    """Base fields for a project."""

    name: str = Field(max_length=36, description="Project name displayed in the frontend")
    description: str = Field(default="", max_length=256, description="Project description")
    preview_url: str = Field(default="", description="Display image URL")
    ai_enabled: bool = Field(default=False, description="Whether AI assistance is enabled for the project")


class Project(ProjectBase, TimestampMixin, table=True):
    """Persistent project.

    Table: projects
    """

    __tablename__ = "projects"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(foreign_key="users.id", index=True, description="Creator and owner of the project")

    # Users with an explicit grant; the owner is never listed here
    users: List[User] = Relationship(link_model=UserProjectLink, sa_relationship_kwargs={"lazy": "selectin"})

    def check_project_ownership(self, project_id: int) -> bool:
        return self.id == project_id

    def __repr__(self) -> str:
        return f"Project(id={self.id}, name={self.name}, owner={self.owner_id})"
