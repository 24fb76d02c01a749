"""
Process-wide engine and sessions, bound to ``DATABASE_URL``.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from dmp.core.logging_config import get_logger
from dmp.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """Create tables at startup when ``DMP_DATABASE_AUTO_CREATE`` is set.

    Otherwise the schema is left to Alembic.
    """
    if not settings.database_auto_create:
        logger.info("DMP_DATABASE_AUTO_CREATE is off, expecting an Alembic-managed schema")
        return
    await create_all(engine)
    logger.info(f"Created missing tables on {engine.url.get_backend_name()}")
