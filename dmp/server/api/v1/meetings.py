"""
API endpoints for meetings of a project.

Meetings are scheduled events; users and tags can be assigned to them.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from dmp.core.access import is_assigned
from dmp.core.database.entities.meetings import Meeting
from dmp.core.exceptions import NotFoundError, ValidationFailedError
from dmp.core.logging_config import get_logger
from dmp.core.models.io.meetings import MeetingCreate, MeetingRead, MeetingUpdate

from ...services.deps import (
    CurrentUserDep,
    MeetingAccessDep,
    ProjectAccessDep,
    ReposDep,
    TagAccessDep,
    load_member,
)
from ...services.notifier import notify_assignment

logger = get_logger(__name__)

router = APIRouter(tags=["meetings"])


@router.post(
    "",
    response_model=MeetingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Meeting",
    description="Schedule a new meeting in the project.",
    responses={
        201: {"description": "Meeting created successfully"},
        422: {"description": "Invalid name or dates"},
    },
)
async def create_meeting(
    payload: MeetingCreate, project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep
) -> MeetingRead:
    """
    Create a meeting.

    - **name**: Required, at most 64 characters.
    - **start_date**: When the meeting starts.
    - **end_date**: Optional, must not be before ``start_date``.
    """
    meeting = await repos.meetings.create(Meeting(**payload.model_dump(), project_id=project.id, creator_id=user.id))
    logger.info(f"Meeting {meeting.id} created in project {project.id}")
    return MeetingRead.model_validate(meeting)


@router.get(
    "",
    response_model=List[MeetingRead],
    summary="List Meetings",
    description="List the meetings of the project ordered by start date.",
)
async def list_meetings(project: ProjectAccessDep, repos: ReposDep, upcoming_only: bool = False) -> List[MeetingRead]:
    meetings = await repos.meetings.find_for_project(project.id, upcoming_only=upcoming_only)
    return [MeetingRead.model_validate(m) for m in meetings]


@router.get("/{meeting_id}", response_model=MeetingRead, summary="Get Meeting")
async def get_meeting(meeting: MeetingAccessDep) -> MeetingRead:
    return MeetingRead.model_validate(meeting)


@router.put("/{meeting_id}", response_model=MeetingRead, summary="Update Meeting")
async def update_meeting(payload: MeetingUpdate, meeting: MeetingAccessDep, repos: ReposDep) -> MeetingRead:
    changes = payload.model_dump(exclude_unset=True)
    start_date = changes.get("start_date", meeting.start_date)
    end_date = changes.get("end_date", meeting.end_date)
    if end_date is not None and end_date < start_date:
        raise ValidationFailedError("end_date must not be before start_date")
    meeting = await repos.meetings.apply(meeting, changes)
    return MeetingRead.model_validate(meeting)


@router.delete(
    "/{meeting_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Meeting",
    description="Soft-delete a meeting and its topics.",
)
async def delete_meeting(meeting: MeetingAccessDep, repos: ReposDep) -> Response:
    if not await repos.meetings.delete(meeting.id):
        raise NotFoundError("meeting", meeting.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{meeting_id}/users/{user_id}",
    response_model=MeetingRead,
    summary="Assign User to Meeting",
    responses={400: {"description": "The user has no access to the project"}},
)
async def assign_user(
    user_id: str, meeting: MeetingAccessDep, project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep
) -> MeetingRead:
    assignee = await load_member(repos, project, user_id)
    already_assigned = is_assigned(meeting, user_id)
    meeting = await repos.meetings.add_related(meeting, "assigned_users", assignee)
    if not already_assigned:
        await notify_assignment(
            repos, user, user_id, "meeting", meeting.name, f"/projects/{project.id}/meetings/{meeting.id}"
        )
    return MeetingRead.model_validate(meeting)


@router.delete("/{meeting_id}/users/{user_id}", response_model=MeetingRead, summary="Unassign User from Meeting")
async def unassign_user(user_id: str, meeting: MeetingAccessDep, repos: ReposDep) -> MeetingRead:
    if not await repos.meetings.remove_related(meeting, "assigned_users", user_id):
        raise NotFoundError("assigned user", user_id)
    return MeetingRead.model_validate(meeting)


@router.post("/{meeting_id}/tags/{tag_id}", response_model=MeetingRead, summary="Tag Meeting")
async def add_tag(meeting: MeetingAccessDep, tag: TagAccessDep, repos: ReposDep) -> MeetingRead:
    meeting = await repos.meetings.add_related(meeting, "tags", tag)
    return MeetingRead.model_validate(meeting)


@router.delete("/{meeting_id}/tags/{tag_id}", response_model=MeetingRead, summary="Untag Meeting")
async def remove_tag(tag_id: int, meeting: MeetingAccessDep, repos: ReposDep) -> MeetingRead:
    if not await repos.meetings.remove_related(meeting, "tags", tag_id):
        raise NotFoundError("tag", tag_id)
    return MeetingRead.model_validate(meeting)
