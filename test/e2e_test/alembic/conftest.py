"""Fixtures for Alembic migration tests."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine

from alembic.config import Config

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "migration.db"


@pytest.fixture
def alembic_config(database_path: Path) -> Config:
    """Alembic configuration pointing at a throwaway SQLite file."""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{database_path}")
    return config


@pytest.fixture
def sync_engine(database_path: Path):
    """Synchronous engine used to inspect the migrated database."""
    engine = create_engine(f"sqlite:///{database_path}")
    yield engine
    engine.dispose()
