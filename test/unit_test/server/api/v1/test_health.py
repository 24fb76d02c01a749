"""
Unit tests for the health and version endpoints.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from dmp.server.core import constant

pytestmark = pytest.mark.asyncio


async def test_health(client: AsyncClient):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_health_reports_unreachable_database(client: AsyncClient, session, monkeypatch):
    monkeypatch.setattr(session, "execute", AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down"))))

    response = await client.get("/api/v1/health")

    assert response.status_code == 503
    assert response.json()["database"] == "unavailable"


async def test_version(client: AsyncClient):
    response = await client.get("/api/v1/version")

    assert response.json() == {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}


async def test_process_time_header(client: AsyncClient):
    response = await client.get("/api/v1/version")
    assert float(response.headers["x-process-time"]) >= 0
