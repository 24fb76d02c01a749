"""
Meeting repository interface and implementation.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utcnow
from ..entities.links import TopicActionLink
from ..entities.meetings import Meeting
from ..entities.topics import Topic
from .base import SoftDeleteRepository


class MeetingRepository(SoftDeleteRepository[Meeting]):
    """Repository for meeting data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Meeting)

    async def find_for_project(
        self, project_id: int, upcoming_only: bool = False, now: Optional[datetime] = None
    ) -> List[Meeting]:
        """Get the meetings of a project ordered by start date.

        Args:
            project_id: Project ID
            upcoming_only: Only meetings that have not ended yet
            now: Reference time for ``upcoming_only`` (defaults to current UTC)

        Returns:
            List of Meeting instances
        """
        stmt = self._alive().where(Meeting.project_id == project_id)
        if upcoming_only:
            reference = now or utcnow()
            # A meeting without an end date is upcoming until it starts
            stmt = stmt.where(
                (Meeting.end_date >= reference) | (Meeting.end_date.is_(None) & (Meeting.start_date >= reference))  # type: ignore[union-attr]
            )
        stmt = stmt.order_by(Meeting.start_date, Meeting.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _on_delete(self, meeting: Meeting) -> None:
        topic_ids = select(Topic.id).where(Topic.meeting_id == meeting.id)
        await self.session.execute(delete(TopicActionLink).where(TopicActionLink.topic_id.in_(topic_ids)))  # type: ignore[attr-defined]
        await self.session.execute(
            update(Topic)
            .where(Topic.meeting_id == meeting.id, Topic.deleted_at.is_(None))  # type: ignore[union-attr]
            .values(deleted_at=utcnow())
        )
