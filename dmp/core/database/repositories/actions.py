"""
Action repository interface and implementation.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utcnow
from ..entities.actions import Action
from ..entities.links import TopicActionLink
from .base import SoftDeleteRepository


class ActionRepository(SoftDeleteRepository[Action]):
    """Repository for action data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Action)

    async def find_for_project(self, project_id: int, open_only: bool = False) -> List[Action]:
        """Get the actions of a project.

        Args:
            project_id: Project ID
            open_only: Skip closed actions

        Returns:
            Actions ordered by due date (undated last), then id
        """
        stmt = self._alive().where(Action.project_id == project_id)
        if open_only:
            stmt = stmt.where(Action.closed_at.is_(None))  # type: ignore[union-attr]
        stmt = stmt.order_by(Action.due_date.is_(None), Action.due_date, Action.id)  # type: ignore[union-attr]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_for_topic(self, topic_id: int) -> List[Action]:
        """Get the actions linked to a topic."""
        stmt = (
            self._alive()
            .join(TopicActionLink, TopicActionLink.action_id == Action.id)  # type: ignore[arg-type]
            .where(TopicActionLink.topic_id == topic_id)
            .order_by(Action.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def set_closed(self, action: Action, close: bool) -> Action:
        """Close or re-open an action."""
        if close and action.closed_at is None:
            action.closed_at = utcnow()
        elif not close:
            action.closed_at = None
        return await self.update(action)
