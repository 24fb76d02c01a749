"""
Topic repository interface and implementation.

Besides CRUD this module keeps the order of topics inside a meeting dense
(``0..n-1``) and handles closing and re-opening of topics.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from dmp.core.exceptions import ValidationFailedError

from ..base import utcnow
from ..entities.links import TopicActionLink
from ..entities.topics import Topic
from .base import SoftDeleteRepository

NO_TOPIC = -1


class TopicRepository(SoftDeleteRepository[Topic]):
    """Repository for topic data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Topic)

    async def find_for_meeting(self, meeting_id: int) -> List[Topic]:
        """Get the topics of a meeting in display order."""
        stmt = self._alive().where(Topic.meeting_id == meeting_id).order_by(Topic.order_index, Topic.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def next_order_index(self, meeting_id: int) -> int:
        stmt = select(func.max(Topic.order_index)).where(
            Topic.meeting_id == meeting_id, Topic.deleted_at.is_(None)  # type: ignore[union-attr]
        )
        result = await self.session.execute(stmt)
        current: Optional[int] = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def create(self, topic: Topic) -> Topic:
        """Create a topic at the end of its meeting's order."""
        topic.order_index = await self.next_order_index(topic.meeting_id)
        return await super().create(topic)

    async def set_closed(self, topic: Topic, close: bool) -> Topic:
        """Close or re-open a topic.

        Closing a topic which requires a solution fails while it has none.

        Raises:
            ValidationFailedError: ``force_solution`` is set and no solution exists
        """
        if close and topic.force_solution and topic.solution_id is None:
            raise ValidationFailedError("topic requires a solution before it can be closed")
        if close and topic.closed_at is None:
            topic.closed_at = utcnow()
        elif not close:
            topic.closed_at = None
        return await self.update(topic)

    async def move(self, topic: Topic, before: int = NO_TOPIC, after: int = NO_TOPIC) -> List[Topic]:
        """Move ``topic`` between two sibling topics and renumber the meeting.

        Args:
            topic: Topic to move
            before: ID of the topic which should directly precede ``topic``,
                ``-1`` for none
            after: ID of the topic which should directly follow ``topic``,
                ``-1`` for none

        Returns:
            The meeting's topics in their new order

        Raises:
            ValidationFailedError: both anchors are missing, one is not a sibling,
                or ``after`` does not directly follow ``before``
        """
        siblings = [other for other in await self.find_for_meeting(topic.meeting_id) if other.id != topic.id]
        positions = {other.id: index for index, other in enumerate(siblings)}

        if before == NO_TOPIC and after == NO_TOPIC:
            raise ValidationFailedError("either 'before' or 'after' must reference a topic")
        for anchor in (before, after):
            if anchor != NO_TOPIC and anchor not in positions:
                raise ValidationFailedError(f"topic {anchor} is not part of the meeting")

        if before == NO_TOPIC:
            insert_at = positions[after]
        else:
            insert_at = positions[before] + 1
            if after != NO_TOPIC and positions[after] != insert_at:
                raise ValidationFailedError(f"topic {after} does not directly follow topic {before}")

        siblings.insert(insert_at, topic)
        for index, other in enumerate(siblings):
            other.order_index = index
            self.session.add(other)
        topic.updated_at = utcnow()
        await self.session.commit()
        return siblings

    async def _on_delete(self, topic: Topic) -> None:
        await self.session.execute(delete(TopicActionLink).where(TopicActionLink.topic_id == topic.id))
