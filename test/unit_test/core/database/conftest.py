"""Test configuration for database unit tests.

Repositories run against the in-memory SQLite engine from the root conftest;
the fixtures below seed the rows most tests need.
"""

from __future__ import annotations

from datetime import datetime

import pytest_asyncio

from dmp.core.database import RepoBundle
from dmp.core.database.entities import Meeting, Project, User


@pytest_asyncio.fixture
async def owner(repos: RepoBundle) -> User:
    return await repos.users.create(User(id="alice", name="Alice"))


@pytest_asyncio.fixture
async def guest(repos: RepoBundle) -> User:
    return await repos.users.create(User(id="bob", name="Bob"))


@pytest_asyncio.fixture
async def project(repos: RepoBundle, owner: User) -> Project:
    return await repos.projects.create(Project(name="Roadmap", owner_id=owner.id))


@pytest_asyncio.fixture
async def meeting(repos: RepoBundle, project: Project, owner: User) -> Meeting:
    return await repos.meetings.create(
        Meeting(name="Weekly", start_date=datetime(2026, 3, 2, 10), project_id=project.id, creator_id=owner.id)
    )
