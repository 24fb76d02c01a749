"""
Unit tests for bearer token verification and user resolution.
"""

import time

import jwt
import pytest
from fastapi.security import HTTPAuthorizationCredentials

from dmp.core.exceptions import AuthenticationError
from dmp.server.core.config import settings
from dmp.server.services.auth import get_current_user, user_id_from_claims, verify_token

from ..conftest import make_token


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestVerifyToken:
    def test_valid_token(self):
        claims = verify_token(make_token("alice", "Alice"))

        assert claims["sub"] == "alice"
        assert claims["name"] == "Alice"

    def test_bad_signature(self):
        token = jwt.encode({"sub": "alice"}, "another-secret", algorithm=settings.auth.jwt_algorithm)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            verify_token(token)

    def test_expired(self):
        token = make_token("alice", exp=int(time.time()) - 60)

        with pytest.raises(AuthenticationError, match="Token expired"):
            verify_token(token)

    def test_garbage(self):
        with pytest.raises(AuthenticationError):
            verify_token("not-a-jwt")


class TestUserIdFromClaims:
    def test_user_id_claim_wins(self):
        assert user_id_from_claims({"user_id": "u-1", "sub": "s-1"}) == "u-1"

    def test_falls_back_to_sub(self):
        assert user_id_from_claims({"sub": "s-1"}) == "s-1"

    def test_numeric_ids_become_strings(self):
        assert user_id_from_claims({"user_id": 42}) == "42"

    def test_missing_identity(self):
        with pytest.raises(AuthenticationError):
            user_id_from_claims({"name": "nobody"})


@pytest.mark.asyncio
class TestGetCurrentUser:
    async def test_missing_credentials(self, session):
        with pytest.raises(AuthenticationError, match="Not authenticated"):
            await get_current_user(None, session)

    async def test_provisions_user_once(self, session):
        first = await get_current_user(_credentials(make_token("alice", "Alice")), session)
        second = await get_current_user(_credentials(make_token("alice", "Renamed")), session)

        assert first.id == second.id == "alice"
        assert second.name == "Alice"

    async def test_preferred_username_claim(self, session):
        user = await get_current_user(_credentials(make_token("carol", preferred_username="Carol")), session)
        assert user.name == "Carol"

    async def test_without_name_claim_uses_id(self, session):
        user = await get_current_user(_credentials(make_token("dave")), session)
        assert user.name == "dave"
