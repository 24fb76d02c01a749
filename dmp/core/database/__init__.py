"""
Persistence for DMP: SQLModel entities, their repositories and the async
engine they run on.

Routers get a session through ``get_session`` and a ``RepoBundle`` built from
it; Alembic and the tests use ``create_engine`` and ``create_all`` directly.
"""

from .session import async_session_maker, engine, get_session, init_db
from .utils import RepoBundle, build_repos, create_all, create_engine, create_sessionmaker

__all__ = [
    "RepoBundle",
    "async_session_maker",
    "build_repos",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
]
