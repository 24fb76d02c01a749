"""
User repository interface and implementation.

This module provides data access operations for users, including the
provisioning of users seen for the first time in a bearer token.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from dmp.core.logging_config import get_logger

from ..entities.users import NAME_MAX_LENGTH, User
from .base import SoftDeleteRepository

logger = get_logger(__name__)


class UserRepository(SoftDeleteRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_name(self, name: str) -> Optional[User]:
        """Get user by display name.

        Args:
            name: Unique display name

        Returns:
            User instance or None
        """
        stmt = self._alive().where(User.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def holder_of(self, name: str) -> Optional[str]:
        """Return the id of the user holding ``name``, soft-deleted users included.

        The unique index on ``users.name`` covers deleted rows as well.
        """
        result = await self.session.execute(select(User.id).where(User.name == name))
        return result.scalar_one_or_none()

    async def free_name(self, base: str) -> str:
        """Return ``base``, or ``base-2``, ``base-3`` ... for the first name nobody holds."""
        candidate = base = base[:NAME_MAX_LENGTH]
        counter = 1
        while await self.holder_of(candidate) is not None:
            counter += 1
            suffix = f"-{counter}"
            candidate = base[: NAME_MAX_LENGTH - len(suffix)] + suffix
        return candidate

    async def get_many(self, user_ids: List[str]) -> List[User]:
        """Get all existing users among ``user_ids``."""
        if not user_ids:
            return []
        stmt = self._alive().where(User.id.in_(user_ids))  # type: ignore[union-attr]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_or_create(self, user_id: str, preferred_name: Optional[str] = None) -> User:
        """Return the user with ``user_id``, provisioning it on first sight.

        The new user's name is ``preferred_name`` when it is free, otherwise
        the user id, suffixed when someone already took it as their name.

        Args:
            user_id: Identifier issued by the identity provider
            preferred_name: Name claim from the token, if any

        Returns:
            Existing or newly created User
        """
        user = await self.get_by_id(user_id)
        if user is not None:
            return user

        name = preferred_name
        if not name or len(name) > NAME_MAX_LENGTH or await self.holder_of(name) is not None:
            name = await self.free_name(user_id)

        user = await self.create(User(id=user_id, name=name))
        logger.info(f"Provisioned user {user_id} ({name})")
        return user
