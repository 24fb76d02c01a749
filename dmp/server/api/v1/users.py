"""
API endpoints for users.

Users are provisioned from bearer tokens; the only user-editable field is the
display name of the current user.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from dmp.core.exceptions import ConflictError, NotFoundError
from dmp.core.logging_config import get_logger
from dmp.core.models.io.users import UserRead, UserUpdate

from ...services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.get(
    "/me",
    response_model=UserRead,
    summary="Get Current User",
    description="Return the user identified by the bearer token, provisioning it on first use.",
)
async def get_me(user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(user)


@router.put(
    "/me",
    response_model=UserRead,
    summary="Rename Current User",
    responses={
        200: {"description": "User renamed"},
        409: {"description": "Name already taken"},
        422: {"description": "Name has an invalid length"},
    },
)
async def update_me(payload: UserUpdate, user: CurrentUserDep, repos: ReposDep) -> UserRead:
    """
    Change the display name of the current user.

    Names are unique across users; renaming to your own current name is allowed.
    """
    holder = await repos.users.holder_of(payload.name)
    if holder is not None and holder != user.id:
        raise ConflictError(f"name '{payload.name}' is already taken")
    user = await repos.users.apply(user, {"name": payload.name})
    logger.info(f"User {user.id} renamed to {user.name}")
    return UserRead.model_validate(user)


@router.get("", response_model=List[UserRead], summary="List Users")
async def list_users(_: CurrentUserDep, repos: ReposDep, limit: int = 100, offset: int = 0) -> List[UserRead]:
    """List users, e.g. to pick someone to grant project access to."""
    users = await repos.users.list(limit=limit, offset=offset)
    return [UserRead.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
async def get_user(user_id: str, _: CurrentUserDep, repos: ReposDep) -> UserRead:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("user", user_id)
    return UserRead.model_validate(user)
