from __future__ import annotations

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

load_dotenv(Path(__file__).resolve().parent / ".env", override=False)

from test.settings import test_settings  # noqa: E402

# dmp.server.core.config reads the environment when first imported
os.environ.update(
    {
        "DATABASE_URL": test_settings.database_url,
        "DMP_AUTH_JWT_SECRET": test_settings.jwt_secret,
        "DMP_AUTH_JWT_ALGORITHM": "HS256",
        "DMP_LOG_FILE_ENABLED": "false",
    }
)

from dmp.core.database import RepoBundle, build_repos, create_all, create_sessionmaker  # noqa: E402


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """An empty schema per test; StaticPool keeps the in-memory database on one connection."""
    engine = create_async_engine(
        test_settings.database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def repos(session: AsyncSession) -> RepoBundle:
    return build_repos(session)
