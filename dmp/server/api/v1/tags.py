"""
API endpoints for tags and priorities of a project.

Both routers share this module since tags and priorities are the same kind
of classification metadata.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from dmp.core.database.entities.tags import Priority, Tag
from dmp.core.exceptions import NotFoundError
from dmp.core.models.io.tags import (
    PriorityCreate,
    PriorityRead,
    PriorityUpdate,
    TagCreate,
    TagRead,
    TagUpdate,
)

from ...services.deps import PriorityAccessDep, ProjectAccessDep, ReposDep, TagAccessDep

router = APIRouter(tags=["tags"])
priority_router = APIRouter(tags=["priorities"])


# =====================================================================
# Tags
# =====================================================================


@router.post(
    "",
    response_model=TagRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Tag",
    responses={422: {"description": "Invalid title or color (#rgb or #rrggbb)"}},
)
async def create_tag(payload: TagCreate, project: ProjectAccessDep, repos: ReposDep) -> TagRead:
    tag = await repos.tags.create(Tag(**payload.model_dump(), project_id=project.id))
    return TagRead.model_validate(tag)


@router.get("", response_model=List[TagRead], summary="List Tags")
async def list_tags(project: ProjectAccessDep, repos: ReposDep) -> List[TagRead]:
    return [TagRead.model_validate(t) for t in await repos.tags.find_for_project(project.id)]


@router.get("/{tag_id}", response_model=TagRead, summary="Get Tag")
async def get_tag(tag: TagAccessDep) -> TagRead:
    return TagRead.model_validate(tag)


@router.put("/{tag_id}", response_model=TagRead, summary="Update Tag")
async def update_tag(payload: TagUpdate, tag: TagAccessDep, repos: ReposDep) -> TagRead:
    tag = await repos.tags.apply(tag, payload.model_dump(exclude_unset=True))
    return TagRead.model_validate(tag)


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Tag",
    description="Soft-delete a tag and detach it from meetings, topics and actions.",
)
async def delete_tag(tag: TagAccessDep, repos: ReposDep) -> Response:
    if not await repos.tags.delete(tag.id):
        raise NotFoundError("tag", tag.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =====================================================================
# Priorities
# =====================================================================


@priority_router.post("", response_model=PriorityRead, status_code=status.HTTP_201_CREATED, summary="Create Priority")
async def create_priority(payload: PriorityCreate, project: ProjectAccessDep, repos: ReposDep) -> PriorityRead:
    priority = await repos.priorities.create(Priority(**payload.model_dump(), project_id=project.id))
    return PriorityRead.model_validate(priority)


@priority_router.get("", response_model=List[PriorityRead], summary="List Priorities")
async def list_priorities(project: ProjectAccessDep, repos: ReposDep) -> List[PriorityRead]:
    """List the project's priorities, most important first."""
    return [PriorityRead.model_validate(p) for p in await repos.priorities.find_for_project(project.id)]


@priority_router.get("/{priority_id}", response_model=PriorityRead, summary="Get Priority")
async def get_priority(priority: PriorityAccessDep) -> PriorityRead:
    return PriorityRead.model_validate(priority)


@priority_router.put("/{priority_id}", response_model=PriorityRead, summary="Update Priority")
async def update_priority(payload: PriorityUpdate, priority: PriorityAccessDep, repos: ReposDep) -> PriorityRead:
    priority = await repos.priorities.apply(priority, payload.model_dump(exclude_unset=True))
    return PriorityRead.model_validate(priority)


@priority_router.delete(
    "/{priority_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Priority",
    description="Soft-delete a priority and clear it from topics and actions.",
)
async def delete_priority(priority: PriorityAccessDep, repos: ReposDep) -> Response:
    if not await repos.priorities.delete(priority.id):
        raise NotFoundError("priority", priority.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
