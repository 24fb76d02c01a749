"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup initializes the database and that a failing
initialization does not prevent the server from starting.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from dmp.server.main import app, lifespan

pytestmark = pytest.mark.asyncio


class TestLifespan:
    async def test_startup_initializes_database(self):
        with patch("dmp.server.main.init_db", new_callable=AsyncMock) as mock_init:
            async with lifespan(FastAPI()):
                mock_init.assert_awaited_once()

    async def test_startup_survives_init_failure(self):
        with (
            patch("dmp.server.main.init_db", new_callable=AsyncMock, side_effect=RuntimeError("db down")),
            patch("dmp.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

        mock_logger.error.assert_called_once()
        assert "db down" in mock_logger.error.call_args[0][0]


class TestInitDb:
    async def test_skips_without_auto_create(self):
        from dmp.core.database import session as session_module

        with (
            patch.object(session_module.settings, "database_auto_create", False),
            patch.object(session_module, "create_all", new_callable=AsyncMock) as mock_create,
        ):
            await session_module.init_db()

        mock_create.assert_not_awaited()

    async def test_creates_tables_with_auto_create(self):
        from dmp.core.database import session as session_module

        with (
            patch.object(session_module.settings, "database_auto_create", True),
            patch.object(session_module, "create_all", new_callable=AsyncMock) as mock_create,
        ):
            await session_module.init_db()

        mock_create.assert_awaited_once_with(session_module.engine)


def test_routes_mounted_under_api_prefix():
    paths = {getattr(route, "path", None) for route in app.routes}

    assert "/api/v1/health" in paths
    assert "/api/v1/projects/{project_id}/meetings/{meeting_id}/topics/{topic_id}/order" in paths
    assert "/api/v1/projects/{project_id}/priorities/{priority_id}" in paths
    assert "/api/v1/notifications/{notification_id}/read" in paths
