"""
Notification repository interface and implementation.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utcnow
from ..entities.notifications import Notification
from .base import SoftDeleteRepository


class NotificationRepository(SoftDeleteRepository[Notification]):
    """Repository for notification data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Notification)

    async def find_for_user(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        """Get the notifications of a user, newest first."""
        stmt = self._alive().where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.read_at.is_(None))  # type: ignore[union-attr]
        stmt = stmt.order_by(Notification.created_at.desc(), Notification.id.desc())  # type: ignore[attr-defined, union-attr]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def notify(self, user_id: str, title: str, **fields: str) -> Notification:
        """Create a notification for ``user_id``.

        Args:
            user_id: Recipient
            title: Notification title
            **fields: Optional ``suffix``, ``description``, ``link``, ``link_title``

        Returns:
            Persisted Notification
        """
        return await self.create(Notification(user_id=user_id, title=title, **fields))

    async def mark_read(self, notification: Notification) -> Notification:
        if notification.read_at is None:
            notification.read_at = utcnow()
        return await self.update(notification)

    async def delete_all_for_user(self, user_id: str) -> int:
        """Soft-delete every notification of a user.

        Returns:
            Number of notifications removed
        """
        result = await self.session.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.deleted_at.is_(None))  # type: ignore[union-attr]
            .values(deleted_at=utcnow())
        )
        await self.session.commit()
        return result.rowcount or 0
