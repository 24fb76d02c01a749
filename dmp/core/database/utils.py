"""
Engine, session factory and repository wiring.

``create_engine`` accepts the URLs people usually paste into ``DATABASE_URL``
(``postgres://``, ``postgresql://``, ``sqlite:///``) and switches them to the
async drivers DMP runs on, asyncpg and aiosqlite.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from . import entities  # noqa: F401  (registers tables with the metadata)
from .repositories import (
    ActionRepository,
    CommentRepository,
    MeetingRepository,
    NotificationRepository,
    PriorityRepository,
    ProjectRepository,
    TagRepository,
    TopicRepository,
    UserRepository,
)

# (pattern, replacement) applied in order to the scheme of a database URL
ASYNC_DRIVERS = (
    (re.compile(r"^postgres(?:ql)?(?:\+\w+)?://"), "postgresql+asyncpg://"),
    (re.compile(r"^sqlite(?:\+pysqlite)?://"), "sqlite+aiosqlite://"),
)


def async_url(db_url: str) -> str:
    for pattern, replacement in ASYNC_DRIVERS:
        db_url = pattern.sub(replacement, db_url, count=1)
    return db_url


def create_engine(db_url: str) -> AsyncEngine:
    """Create the async engine for ``db_url``.

    SQLite connections may be used from the threads aiosqlite runs on;
    PostgreSQL connections are pinged before being handed out of the pool.
    """
    url = async_url(db_url)
    if url.startswith("sqlite"):
        return create_async_engine(url, connect_args={"check_same_thread": False})
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are serialized after commit, so they must stay loaded
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create missing tables. Deployments use ``alembic upgrade head`` instead."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


@dataclass(frozen=True)
class RepoBundle:
    """Every repository, bound to the same session."""

    users: UserRepository
    projects: ProjectRepository
    meetings: MeetingRepository
    topics: TopicRepository
    actions: ActionRepository
    comments: CommentRepository
    tags: TagRepository
    priorities: PriorityRepository
    notifications: NotificationRepository


def build_repos(session: AsyncSession) -> RepoBundle:
    return RepoBundle(
        users=UserRepository(session),
        projects=ProjectRepository(session),
        meetings=MeetingRepository(session),
        topics=TopicRepository(session),
        actions=ActionRepository(session),
        comments=CommentRepository(session),
        tags=TagRepository(session),
        priorities=PriorityRepository(session),
        notifications=NotificationRepository(session),
    )
