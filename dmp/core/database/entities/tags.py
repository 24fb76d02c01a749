"""
Tag and priority entity models.

Both are classification metadata owned by a project. Tags are attached to
meetings, topics and actions through link tables; a priority is referenced
directly by topics and actions.
"""

from typing import Optional

from sqlmodel import Field

from ..base import Base, TimestampMixin

COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class TagBase(Base):
    """Base fields for a tag."""

    title: str = Field(max_length=32, description="Tag title")
    color: str = Field(default="#808080", max_length=7, description="Hex color, #rgb or #rrggbb")


class Tag(TagBase, TimestampMixin, table=True):
    """Persistent tag.

    Table: tags
    """

    __tablename__ = "tags"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)

    def check_project_ownership(self, project_id: int) -> bool:
        return self.project_id == project_id

    def __repr__(self) -> str:
        return f"Tag(id={self.id}, title={self.title}, project={self.project_id})"


class PriorityBase(Base):
    """Base fields for a priority."""

    title: str = Field(max_length=32, description="Priority title")
    weight: int = Field(default=0, description="Sort weight, higher is more important")
    color: str = Field(default="#808080", max_length=7, description="Hex color, #rgb or #rrggbb")


class Priority(PriorityBase, TimestampMixin, table=True):
    """Persistent priority.

    Table: priorities
    """

    __tablename__ = "priorities"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)

    def check_project_ownership(self, project_id: int) -> bool:
        return self.project_id == project_id

    def __repr__(self) -> str:
        return f"Priority(id={self.id}, title={self.title}, weight={self.weight})"
