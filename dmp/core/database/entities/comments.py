"""
Comment entity model.

Comments are markdown messages attached to a project and, optionally, to one
of its meetings, topics or actions. ``project_id`` is always set so a comment
can be checked against the project in the request path.
"""

from typing import Optional

from sqlmodel import Field

from ..base import Base, TimestampMixin


class CommentBase(Base):
    """Base fields for a comment."""

    content: str = Field(description="Comment content as markdown")


class Comment(CommentBase, TimestampMixin, table=True):
    """Persistent comment.

    Table: comments
    """

    __tablename__ = "comments"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    author_id: str = Field(foreign_key="users.id", index=True)
    project_id: Optional[int] = Field(default=None, foreign_key="projects.id", index=True)
    meeting_id: Optional[int] = Field(default=None, foreign_key="meetings.id", index=True)
    topic_id: Optional[int] = Field(default=None, foreign_key="topics.id", index=True)
    action_id: Optional[int] = Field(default=None, foreign_key="actions.id", index=True)

    def check_project_ownership(self, project_id: int) -> bool:
        return self.project_id is not None and self.project_id == project_id

    def __repr__(self) -> str:
        return f"Comment(id={self.id}, author={self.author_id}, project={self.project_id})"
