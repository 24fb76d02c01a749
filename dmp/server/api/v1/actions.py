"""
API endpoints for actions of a project.

Actions are tasks, usually derived from topics. They can be linked to topics
of any meeting in the same project.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from dmp.core.access import belongs_to, is_assigned
from dmp.core.database.entities.actions import Action
from dmp.core.exceptions import NotFoundError
from dmp.core.logging_config import get_logger
from dmp.core.models.io.actions import ActionCreate, ActionRead, ActionUpdate, StatusUpdate

from ...services.deps import (
    ActionAccessDep,
    CurrentUserDep,
    ProjectAccessDep,
    ReposDep,
    TagAccessDep,
    check_priority,
    load_member,
)
from ...services.notifier import notify_assignment

logger = get_logger(__name__)

router = APIRouter(tags=["actions"])


@router.post(
    "",
    response_model=ActionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Action",
    description="Create a new action in the project.",
    responses={
        201: {"description": "Action created successfully"},
        404: {"description": "Priority not found in the project"},
    },
)
async def create_action(
    payload: ActionCreate, project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep
) -> ActionRead:
    await check_priority(repos, project, payload.priority_id)
    action = await repos.actions.create(Action(**payload.model_dump(), project_id=project.id, creator_id=user.id))
    logger.info(f"Action {action.id} created in project {project.id}")
    return ActionRead.model_validate(action)


@router.get(
    "",
    response_model=List[ActionRead],
    summary="List Actions",
    description="List the project's actions ordered by due date, undated ones last.",
)
async def list_actions(project: ProjectAccessDep, repos: ReposDep, open_only: bool = False) -> List[ActionRead]:
    actions = await repos.actions.find_for_project(project.id, open_only=open_only)
    return [ActionRead.model_validate(a) for a in actions]


@router.get("/{action_id}", response_model=ActionRead, summary="Get Action")
async def get_action(action: ActionAccessDep) -> ActionRead:
    return ActionRead.model_validate(action)


@router.put("/{action_id}", response_model=ActionRead, summary="Update Action")
async def update_action(
    payload: ActionUpdate, action: ActionAccessDep, project: ProjectAccessDep, repos: ReposDep
) -> ActionRead:
    changes = payload.model_dump(exclude_unset=True)
    await check_priority(repos, project, changes.get("priority_id"))
    action = await repos.actions.apply(action, changes)
    return ActionRead.model_validate(action)


@router.delete("/{action_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Action")
async def delete_action(action: ActionAccessDep, repos: ReposDep) -> Response:
    if not await repos.actions.delete(action.id):
        raise NotFoundError("action", action.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{action_id}/status", response_model=ActionRead, summary="Open or Close Action")
async def set_action_status(payload: StatusUpdate, action: ActionAccessDep, repos: ReposDep) -> ActionRead:
    action = await repos.actions.set_closed(action, payload.close)
    return ActionRead.model_validate(action)


@router.post(
    "/{action_id}/topics/{topic_id}",
    response_model=ActionRead,
    summary="Link Topic",
    responses={404: {"description": "Topic not found in the project"}},
)
async def link_topic(
    topic_id: int, action: ActionAccessDep, project: ProjectAccessDep, repos: ReposDep
) -> ActionRead:
    topic = await repos.topics.get_by_id(topic_id)
    if not belongs_to(topic, project.id):
        raise NotFoundError("topic", topic_id)
    action = await repos.actions.add_related(action, "topics", topic)
    return ActionRead.model_validate(action)


@router.delete("/{action_id}/topics/{topic_id}", response_model=ActionRead, summary="Unlink Topic")
async def unlink_topic(topic_id: int, action: ActionAccessDep, repos: ReposDep) -> ActionRead:
    if not await repos.actions.remove_related(action, "topics", topic_id):
        raise NotFoundError("linked topic", topic_id)
    return ActionRead.model_validate(action)


@router.post("/{action_id}/users/{user_id}", response_model=ActionRead, summary="Assign User to Action")
async def assign_user(
    user_id: str, action: ActionAccessDep, project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep
) -> ActionRead:
    assignee = await load_member(repos, project, user_id)
    already_assigned = is_assigned(action, user_id)
    action = await repos.actions.add_related(action, "assigned_users", assignee)
    if not already_assigned:
        await notify_assignment(
            repos, user, user_id, "action", action.title, f"/projects/{project.id}/actions/{action.id}"
        )
    return ActionRead.model_validate(action)


@router.delete("/{action_id}/users/{user_id}", response_model=ActionRead, summary="Unassign User from Action")
async def unassign_user(user_id: str, action: ActionAccessDep, repos: ReposDep) -> ActionRead:
    if not await repos.actions.remove_related(action, "assigned_users", user_id):
        raise NotFoundError("assigned user", user_id)
    return ActionRead.model_validate(action)


@router.post("/{action_id}/tags/{tag_id}", response_model=ActionRead, summary="Tag Action")
async def add_tag(action: ActionAccessDep, tag: TagAccessDep, repos: ReposDep) -> ActionRead:
    action = await repos.actions.add_related(action, "tags", tag)
    return ActionRead.model_validate(action)


@router.delete("/{action_id}/tags/{tag_id}", response_model=ActionRead, summary="Untag Action")
async def remove_tag(tag_id: int, action: ActionAccessDep, repos: ReposDep) -> ActionRead:
    if not await repos.actions.remove_related(action, "tags", tag_id):
        raise NotFoundError("tag", tag_id)
    return ActionRead.model_validate(action)
