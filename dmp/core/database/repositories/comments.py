"""
Comment repository interface and implementation.

Comments hang off a project and, optionally, one of its meetings, topics or
actions. Listing by a parent only returns comments directly attached to it.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.comments import Comment
from ..entities.topics import Topic
from .base import SoftDeleteRepository


class CommentRepository(SoftDeleteRepository[Comment]):
    """Repository for comment data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Comment)

    async def find_for(
        self,
        project_id: int,
        meeting_id: Optional[int] = None,
        topic_id: Optional[int] = None,
        action_id: Optional[int] = None,
    ) -> List[Comment]:
        """Get the comments attached to exactly the given parent.

        With only ``project_id`` given, returns the project's own comments
        (those not attached to a meeting, topic or action).

        Returns:
            Comments in chronological order
        """
        stmt = self._alive().where(
            Comment.project_id == project_id,
            Comment.meeting_id == meeting_id if meeting_id is not None else Comment.meeting_id.is_(None),  # type: ignore[union-attr]
            Comment.topic_id == topic_id if topic_id is not None else Comment.topic_id.is_(None),  # type: ignore[union-attr]
            Comment.action_id == action_id if action_id is not None else Comment.action_id.is_(None),  # type: ignore[union-attr]
        )
        stmt = stmt.order_by(Comment.created_at, Comment.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _on_delete(self, comment: Comment) -> None:
        # A deleted comment can no longer be the solution of a topic
        await self.session.execute(
            update(Topic).where(Topic.solution_id == comment.id).values(solution_id=None)  # type: ignore[arg-type]
        )
