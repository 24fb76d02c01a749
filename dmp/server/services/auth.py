"""
Bearer token authentication.

Tokens are issued by an external identity provider and verified here as JWTs
with the key and algorithm from ``settings.auth``. The verified user id is
taken from the ``user_id`` claim, falling back to ``sub``; a ``User`` row is
provisioned the first time an id is seen.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from dmp.core.database import get_session
from dmp.core.database.entities.users import User
from dmp.core.database.repositories.users import UserRepository
from dmp.core.exceptions import AuthenticationError
from dmp.core.logging_config import get_logger
from dmp.server.core.config import settings

logger = get_logger(__name__)

# auto_error is off so a missing header ends up as our own 401, not a 403
bearer_scheme = HTTPBearer(auto_error=False)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify a bearer token and return its claims.

    Args:
        token: Encoded JWT

    Returns:
        Decoded claims

    Raises:
        AuthenticationError: If the token is expired or invalid
    """
    auth = settings.auth
    options = {"verify_aud": auth.jwt_audience is not None}
    try:
        return jwt.decode(
            token,
            auth.jwt_secret,
            algorithms=[auth.jwt_algorithm],
            audience=auth.jwt_audience,
            issuer=auth.jwt_issuer,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise AuthenticationError("Invalid token")


def user_id_from_claims(claims: Dict[str, Any]) -> str:
    user_id: Optional[Any] = claims.get("user_id") or claims.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token payload")
    return str(user_id)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_session),
) -> User:
    """
    Resolve the requesting user from the ``Authorization: Bearer`` header.

    Raises:
        AuthenticationError: If the header is missing or the token is rejected
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")

    claims = verify_token(credentials.credentials)
    user_id = user_id_from_claims(claims)
    preferred_name = claims.get("name") or claims.get("preferred_username")
    return await UserRepository(session).get_or_create(user_id, preferred_name)
