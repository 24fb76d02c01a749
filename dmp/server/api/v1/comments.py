"""
API endpoints for comments.

Comments are attached to a project and, optionally, to exactly one of its
meetings, topics or actions. Each parent has its own list/create routes;
editing and deleting go through the project and are reserved for the author.
Mounted under ``/projects``.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Response, status

from dmp.core.database import RepoBundle
from dmp.core.database.entities.comments import Comment
from dmp.core.database.entities.projects import Project
from dmp.core.database.entities.users import User
from dmp.core.exceptions import NoAccessError, NotFoundError
from dmp.core.models.io.comments import CommentCreate, CommentRead, CommentUpdate

from ...services.deps import (
    ActionAccessDep,
    CommentAccessDep,
    CurrentUserDep,
    MeetingAccessDep,
    ProjectAccessDep,
    ReposDep,
    TopicAccessDep,
)

router = APIRouter(tags=["comments"])


async def _create(
    repos: RepoBundle,
    project: Project,
    user: User,
    payload: CommentCreate,
    meeting_id: Optional[int] = None,
    topic_id: Optional[int] = None,
    action_id: Optional[int] = None,
) -> CommentRead:
    comment = await repos.comments.create(
        Comment(
            content=payload.content,
            author_id=user.id,
            project_id=project.id,
            meeting_id=meeting_id,
            topic_id=topic_id,
            action_id=action_id,
        )
    )
    return CommentRead.model_validate(comment)


def _read_all(comments: List[Comment]) -> List[CommentRead]:
    return [CommentRead.model_validate(c) for c in comments]


@router.get("/{project_id}/comments", response_model=List[CommentRead], summary="List Project Comments")
async def list_project_comments(project: ProjectAccessDep, repos: ReposDep) -> List[CommentRead]:
    """List comments attached to the project itself, oldest first."""
    return _read_all(await repos.comments.find_for(project.id))


@router.post(
    "/{project_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on Project",
)
async def create_project_comment(
    payload: CommentCreate, project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep
) -> CommentRead:
    return await _create(repos, project, user, payload)


@router.get(
    "/{project_id}/meetings/{meeting_id}/comments",
    response_model=List[CommentRead],
    summary="List Meeting Comments",
)
async def list_meeting_comments(
    meeting: MeetingAccessDep, project: ProjectAccessDep, repos: ReposDep
) -> List[CommentRead]:
    return _read_all(await repos.comments.find_for(project.id, meeting_id=meeting.id))


@router.post(
    "/{project_id}/meetings/{meeting_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on Meeting",
)
async def create_meeting_comment(
    payload: CommentCreate,
    meeting: MeetingAccessDep,
    project: ProjectAccessDep,
    user: CurrentUserDep,
    repos: ReposDep,
) -> CommentRead:
    return await _create(repos, project, user, payload, meeting_id=meeting.id)


@router.get(
    "/{project_id}/meetings/{meeting_id}/topics/{topic_id}/comments",
    response_model=List[CommentRead],
    summary="List Topic Comments",
)
async def list_topic_comments(topic: TopicAccessDep, project: ProjectAccessDep, repos: ReposDep) -> List[CommentRead]:
    return _read_all(await repos.comments.find_for(project.id, topic_id=topic.id))


@router.post(
    "/{project_id}/meetings/{meeting_id}/topics/{topic_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on Topic",
)
async def create_topic_comment(
    payload: CommentCreate,
    topic: TopicAccessDep,
    project: ProjectAccessDep,
    user: CurrentUserDep,
    repos: ReposDep,
) -> CommentRead:
    return await _create(repos, project, user, payload, topic_id=topic.id)


@router.get(
    "/{project_id}/actions/{action_id}/comments",
    response_model=List[CommentRead],
    summary="List Action Comments",
)
async def list_action_comments(
    action: ActionAccessDep, project: ProjectAccessDep, repos: ReposDep
) -> List[CommentRead]:
    return _read_all(await repos.comments.find_for(project.id, action_id=action.id))


@router.post(
    "/{project_id}/actions/{action_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on Action",
)
async def create_action_comment(
    payload: CommentCreate,
    action: ActionAccessDep,
    project: ProjectAccessDep,
    user: CurrentUserDep,
    repos: ReposDep,
) -> CommentRead:
    return await _create(repos, project, user, payload, action_id=action.id)


@router.put(
    "/{project_id}/comments/{comment_id}",
    response_model=CommentRead,
    summary="Edit Comment",
    responses={403: {"description": "Only the author may edit a comment"}},
)
async def update_comment(
    payload: CommentUpdate, comment: CommentAccessDep, user: CurrentUserDep, repos: ReposDep
) -> CommentRead:
    if comment.author_id != user.id:
        raise NoAccessError("only the author may edit this comment")
    comment = await repos.comments.apply(comment, {"content": payload.content})
    return CommentRead.model_validate(comment)


@router.delete(
    "/{project_id}/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Comment",
    responses={403: {"description": "Only the author may delete a comment"}},
)
async def delete_comment(comment: CommentAccessDep, user: CurrentUserDep, repos: ReposDep) -> Response:
    if comment.author_id != user.id:
        raise NoAccessError("only the author may delete this comment")
    if not await repos.comments.delete(comment.id):
        raise NotFoundError("comment", comment.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
