"""
API endpoints for projects and project access grants.

A project is visible to its owner and to every user holding an explicit
grant. Only the owner can delete the project or change who is granted.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from dmp.core.access import has_access, is_owner
from dmp.core.database.entities.projects import Project
from dmp.core.exceptions import NotFoundError, ValidationFailedError
from dmp.core.logging_config import get_logger
from dmp.core.models.io.projects import ProjectCreate, ProjectRead, ProjectUpdate
from dmp.core.models.io.users import UserRead

from ...services.deps import CurrentUserDep, ProjectAccessDep, ProjectOwnerDep, ReposDep
from ...services.notifier import notify_grant

logger = get_logger(__name__)

router = APIRouter(tags=["projects"])


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Project",
    description="Create a new project owned by the current user.",
    response_description="The persisted project with its generated ID.",
    responses={
        201: {"description": "Project created successfully"},
        422: {"description": "Invalid name or description"},
    },
)
async def create_project(payload: ProjectCreate, user: CurrentUserDep, repos: ReposDep) -> ProjectRead:
    """
    Create a new project.

    - **name**: 3 to 36 characters, must not start or end with a space.
    - **description**: Optional, at most 256 characters.
    """
    project = await repos.projects.create(Project(**payload.model_dump(), owner_id=user.id))
    logger.info(f"Project {project.id} created by {user.id}")
    return ProjectRead.model_validate(project)


@router.get(
    "",
    response_model=List[ProjectRead],
    summary="List Projects",
    description="List the projects the current user owns or holds a grant on, each exactly once.",
)
async def list_projects(user: CurrentUserDep, repos: ReposDep) -> List[ProjectRead]:
    projects = await repos.projects.find_accessible(user.id)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get Project",
    responses={
        403: {"description": "No access to the project"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project: ProjectAccessDep) -> ProjectRead:
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update Project",
    description="Edit a project. Only provided fields are changed.",
)
async def update_project(payload: ProjectUpdate, project: ProjectAccessDep, repos: ReposDep) -> ProjectRead:
    project = await repos.projects.apply(project, payload.model_dump(exclude_unset=True))
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Project",
    description="Soft-delete a project together with everything inside it. Owner only.",
    responses={
        204: {"description": "Project deleted"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project not found or already deleted"},
    },
)
async def delete_project(project: ProjectOwnerDep, repos: ReposDep) -> Response:
    if not await repos.projects.delete(project.id):
        raise NotFoundError("project", project.id)
    logger.info(f"Project {project.id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/users", response_model=List[UserRead], summary="List Project Members")
async def list_project_users(project: ProjectAccessDep, repos: ReposDep) -> List[UserRead]:
    """List the owner followed by every user holding a grant."""
    owner = await repos.users.get_by_id(project.owner_id)
    members = ([owner] if owner is not None else []) + list(project.users)
    return [UserRead.model_validate(u) for u in members]


@router.post(
    "/{project_id}/users/{user_id}",
    response_model=ProjectRead,
    summary="Grant Project Access",
    responses={
        400: {"description": "The owner cannot be granted"},
        403: {"description": "Not the project owner"},
        404: {"description": "Project or user not found"},
    },
)
async def grant_access(user_id: str, project: ProjectOwnerDep, user: CurrentUserDep, repos: ReposDep) -> ProjectRead:
    """Give a user explicit access to the project and notify them."""
    if is_owner(project, user_id):
        raise ValidationFailedError("the owner always has access")
    grantee = await repos.users.get_by_id(user_id)
    if grantee is None:
        raise NotFoundError("user", user_id)
    already_granted = has_access(project, user_id)
    project = await repos.projects.grant(project, grantee)
    if not already_granted:
        await notify_grant(repos, user, project, user_id)
        logger.info(f"User {user_id} granted access to project {project.id}")
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke Project Access",
    responses={
        400: {"description": "The owner cannot be revoked"},
        404: {"description": "The user holds no grant"},
    },
)
async def revoke_access(user_id: str, project: ProjectOwnerDep, repos: ReposDep) -> Response:
    if is_owner(project, user_id):
        raise ValidationFailedError("the owner cannot be removed from the project")
    if not await repos.projects.revoke(project, user_id):
        raise NotFoundError("grant for user", user_id)
    logger.info(f"User {user_id} revoked from project {project.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{project_id}/leave",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Leave Project",
    description="Remove your own grant on a project. The owner cannot leave.",
)
async def leave_project(project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep) -> Response:
    if is_owner(project, user.id):
        raise ValidationFailedError("the owner cannot leave the project")
    await repos.projects.revoke(project, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
