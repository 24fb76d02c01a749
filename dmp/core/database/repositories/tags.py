"""
Tag and priority repositories.

Deleting a tag removes it from every meeting, topic and action. Deleting a
priority clears it from every topic and action that referenced it.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.actions import Action
from ..entities.links import ActionTagLink, MeetingTagLink, TopicTagLink
from ..entities.tags import Priority, Tag
from ..entities.topics import Topic
from .base import SoftDeleteRepository


class TagRepository(SoftDeleteRepository[Tag]):
    """Repository for tag data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Tag)

    async def find_for_project(self, project_id: int) -> List[Tag]:
        stmt = self._alive().where(Tag.project_id == project_id).order_by(Tag.title, Tag.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _on_delete(self, tag: Tag) -> None:
        for link in (MeetingTagLink, TopicTagLink, ActionTagLink):
            await self.session.execute(delete(link).where(link.tag_id == tag.id))


class PriorityRepository(SoftDeleteRepository[Priority]):
    """Repository for priority data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Priority)

    async def find_for_project(self, project_id: int) -> List[Priority]:
        """Get the priorities of a project, most important first."""
        stmt = self._alive().where(Priority.project_id == project_id).order_by(Priority.weight.desc(), Priority.id)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _on_delete(self, priority: Priority) -> None:
        for model in (Topic, Action):
            await self.session.execute(
                update(model).where(model.priority_id == priority.id).values(priority_id=None)  # type: ignore[arg-type]
            )
