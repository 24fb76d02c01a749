from typing import AsyncGenerator, Callable, Dict
from unittest.mock import patch

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from dmp.server.core.config import settings

AuthHeaders = Callable[..., Dict[str, str]]


def make_token(user_id: str, name: str | None = None, **claims) -> str:
    """Sign a bearer token the way the identity provider would."""
    payload = {"sub": user_id, **claims}
    if name is not None:
        payload["name"] = name
    auth = settings.auth
    return jwt.encode(payload, auth.jwt_secret, algorithm=auth.jwt_algorithm)


@pytest.fixture
def auth_headers() -> AuthHeaders:
    """Build ``Authorization`` headers for a user id (and optional name claim)."""

    def _headers(user_id: str, name: str | None = None, **claims) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id, name, **claims)}"}

    return _headers


@pytest.fixture
def alice(auth_headers: AuthHeaders) -> Dict[str, str]:
    return auth_headers("alice", "Alice")


@pytest.fixture
def bob(auth_headers: AuthHeaders) -> Dict[str, str]:
    return auth_headers("bob", "Bob")


@pytest.fixture
def mallory(auth_headers: AuthHeaders) -> Dict[str, str]:
    return auth_headers("mallory", "Mallory")


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from dmp.core.database import get_session
    from dmp.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("dmp.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def project(client: AsyncClient, alice: Dict[str, str]) -> dict:
    """A project owned by alice."""
    response = await client.post("/api/v1/projects", json={"name": "Roadmap"}, headers=alice)
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def shared_project(client: AsyncClient, project: dict, alice: Dict[str, str], bob: Dict[str, str]) -> dict:
    """alice's project with bob granted access."""
    # bob must have been seen once to exist
    await client.get("/api/v1/users/me", headers=bob)
    response = await client.post(f"/api/v1/projects/{project['id']}/users/bob", headers=alice)
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def meeting(client: AsyncClient, project: dict, alice: Dict[str, str]) -> dict:
    response = await client.post(
        f"/api/v1/projects/{project['id']}/meetings",
        json={"name": "Weekly", "start_date": "2026-03-02T10:00:00", "end_date": "2026-03-02T11:00:00"},
        headers=alice,
    )
    assert response.status_code == 201
    return response.json()
