"""
Project repository interface and implementation.

This module provides data access operations for projects and their explicit
access grants (``user_projects``).
"""

from __future__ import annotations

from typing import Dict, List

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utcnow
from ..entities.actions import Action
from ..entities.comments import Comment
from ..entities.links import UserProjectLink
from ..entities.meetings import Meeting
from ..entities.projects import Project
from ..entities.tags import Priority, Tag
from ..entities.topics import Topic
from ..entities.users import User
from .base import SoftDeleteRepository


class ProjectRepository(SoftDeleteRepository[Project]):
    """Repository for project data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Project)

    async def find_by_owner(self, user_id: str) -> List[Project]:
        """Get all projects owned by ``user_id``."""
        stmt = self._alive().where(Project.owner_id == user_id).order_by(Project.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_user_access(self, user_id: str) -> List[Project]:
        """Get all projects ``user_id`` holds an explicit grant on."""
        stmt = (
            self._alive()
            .join(UserProjectLink, UserProjectLink.project_id == Project.id)  # type: ignore[arg-type]
            .where(UserProjectLink.user_id == user_id)
            .order_by(Project.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    async def find_accessible(self, user_id: str) -> List[Project]:
        """Get owned and granted projects of ``user_id``, each exactly once.

        Returns:
            Projects ordered by id
        """
        projects: Dict[int, Project] = {}
        for project in await self.find_by_owner(user_id):
            projects[project.id] = project
        for project in await self.find_by_user_access(user_id):
            projects[project.id] = project
        return [projects[key] for key in sorted(projects)]

    async def grant(self, project: Project, user: User) -> Project:
        """Give ``user`` explicit access to ``project``.

        Granting an already granted user is a no-op.
        """
        return await self.add_related(project, "users", user)

    async def revoke(self, project: Project, user_id: str) -> bool:
        """Remove the explicit grant of ``user_id`` on ``project``.

        Returns:
            True if a grant was removed, False if the user had none
        """
        return await self.remove_related(project, "users", user_id)

    async def _on_delete(self, project: Project) -> None:
        # Everything inside the project disappears with it
        now = utcnow()
        meeting_ids = select(Meeting.id).where(Meeting.project_id == project.id)
        await self.session.execute(
            update(Topic)
            .where(Topic.meeting_id.in_(meeting_ids), Topic.deleted_at.is_(None))  # type: ignore[union-attr]
            .values(deleted_at=now)
        )
        for model in (Meeting, Action, Tag, Priority, Comment):
            await self.session.execute(
                update(model)
                .where(model.project_id == project.id, model.deleted_at.is_(None))  # type: ignore[union-attr]
                .values(deleted_at=now)
            )
