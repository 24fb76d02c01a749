"""
Generic async repository with soft deletion.

Every DMP table carries ``deleted_at``. A row with it set is gone as far as
the application is concerned: reads skip it, and deleting it again reports
``False`` so that routers can answer 404.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from ..base import utcnow

EntityType = TypeVar("EntityType", bound=SQLModel)


class SoftDeleteRepository(Generic[EntityType]):
    """CRUD for one entity class on a request-scoped session.

    Writes commit immediately; a request performs at most a handful of them
    and the routers never need to roll back a partial change.
    """

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    def _alive(self):
        # Cascades run as bulk statements, so loaded rows and their eager
        # collections are refreshed instead of served from the identity map.
        return (
            select(self.model)
            .where(self.model.deleted_at.is_(None))  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )

    async def _all(self, stmt) -> List[EntityType]:
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, entity: EntityType) -> EntityType:
        """Persist ``entity`` and return it with its id and timestamps filled in."""
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        stmt = self._alive().where(self.model.id == entity_id)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, entity: EntityType) -> EntityType:
        entity.updated_at = utcnow()  # type: ignore[attr-defined]
        return await self.create(entity)

    async def apply(self, entity: EntityType, changes: Dict[str, Any]) -> EntityType:
        """Set ``changes`` on ``entity`` and persist it.

        Args:
            entity: Loaded entity
            changes: Field values, typically ``model_dump(exclude_unset=True)``

        Returns:
            Updated entity instance
        """
        for key, value in changes.items():
            setattr(entity, key, value)
        return await self.update(entity)

    async def delete(self, entity_id: str | int) -> bool:
        """Soft-delete a row and run ``_on_delete`` in the same transaction.

        Returns:
            False when the row does not exist or was already deleted
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        entity.deleted_at = utcnow()  # type: ignore[attr-defined]
        self.session.add(entity)
        await self._on_delete(entity)
        await self.session.commit()
        return True

    async def _on_delete(self, entity: EntityType) -> None:
        """Hook for cleaning up associations of a deleted row."""

    async def add_related(self, entity: EntityType, attribute: str, item: SQLModel) -> EntityType:
        """Append ``item`` to the many-to-many collection ``attribute``; already present is a no-op."""
        collection = getattr(entity, attribute)
        if all(existing.id != item.id for existing in collection):  # type: ignore[attr-defined]
            collection.append(item)
        return await self.update(entity)

    async def remove_related(self, entity: EntityType, attribute: str, item_id: str | int) -> bool:
        """Drop the item with ``item_id`` from ``attribute``; False when it was not there."""
        collection = getattr(entity, attribute)
        remaining = [existing for existing in collection if existing.id != item_id]
        if len(remaining) == len(collection):
            return False
        setattr(entity, attribute, remaining)
        await self.update(entity)
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List live rows in id order.

        Args:
            limit: Maximum number of rows
            offset: Rows to skip
            filters: Equality filters by column name; unknown columns and None values are ignored
        """
        stmt = self._alive().order_by(self.model.id)  # type: ignore[attr-defined]
        for key, value in (filters or {}).items():
            if value is not None and hasattr(self.model, key):
                stmt = stmt.where(getattr(self.model, key) == value)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return await self._all(stmt)
