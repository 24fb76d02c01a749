"""
API endpoints for topics of a meeting.

Topics are kept in an explicit order inside their meeting. A topic flagged
with ``force_solution`` can only be closed once one of its comments has been
marked as the solution.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from dmp.core.access import is_assigned
from dmp.core.database.entities.topics import Topic
from dmp.core.exceptions import NotFoundError, ValidationFailedError
from dmp.core.logging_config import get_logger
from dmp.core.models.io.actions import ActionRead, StatusUpdate
from dmp.core.models.io.topics import TopicCreate, TopicOrderUpdate, TopicRead, TopicUpdate

from ...services.deps import (
    CommentAccessDep,
    CurrentUserDep,
    MeetingAccessDep,
    ProjectAccessDep,
    ReposDep,
    TagAccessDep,
    TopicAccessDep,
    check_priority,
    load_member,
)
from ...services.notifier import notify_assignment

logger = get_logger(__name__)

router = APIRouter(tags=["topics"])


def _topic_link(project_id: int, topic: Topic) -> str:
    return f"/projects/{project_id}/meetings/{topic.meeting_id}/topics/{topic.id}"


@router.post(
    "",
    response_model=TopicRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Topic",
    description="Add a topic to the end of the meeting's agenda.",
    responses={
        201: {"description": "Topic created successfully"},
        404: {"description": "Meeting or priority not found in the project"},
    },
)
async def create_topic(
    payload: TopicCreate,
    meeting: MeetingAccessDep,
    project: ProjectAccessDep,
    user: CurrentUserDep,
    repos: ReposDep,
) -> TopicRead:
    await check_priority(repos, project, payload.priority_id)
    topic = await repos.topics.create(Topic(**payload.model_dump(), meeting_id=meeting.id, creator_id=user.id))
    logger.info(f"Topic {topic.id} created in meeting {meeting.id}")
    return TopicRead.model_validate(topic)


@router.get("", response_model=List[TopicRead], summary="List Topics")
async def list_topics(meeting: MeetingAccessDep, repos: ReposDep) -> List[TopicRead]:
    """List the meeting's topics in agenda order."""
    topics = await repos.topics.find_for_meeting(meeting.id)
    return [TopicRead.model_validate(t) for t in topics]


@router.get("/{topic_id}", response_model=TopicRead, summary="Get Topic")
async def get_topic(topic: TopicAccessDep) -> TopicRead:
    return TopicRead.model_validate(topic)


@router.put("/{topic_id}", response_model=TopicRead, summary="Update Topic")
async def update_topic(
    payload: TopicUpdate, topic: TopicAccessDep, project: ProjectAccessDep, repos: ReposDep
) -> TopicRead:
    changes = payload.model_dump(exclude_unset=True)
    await check_priority(repos, project, changes.get("priority_id"))
    topic = await repos.topics.apply(topic, changes)
    return TopicRead.model_validate(topic)


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Topic")
async def delete_topic(topic: TopicAccessDep, repos: ReposDep) -> Response:
    if not await repos.topics.delete(topic.id):
        raise NotFoundError("topic", topic.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{topic_id}/status",
    response_model=TopicRead,
    summary="Open or Close Topic",
    responses={400: {"description": "The topic requires a solution before it can be closed"}},
)
async def set_topic_status(payload: StatusUpdate, topic: TopicAccessDep, repos: ReposDep) -> TopicRead:
    topic = await repos.topics.set_closed(topic, payload.close)
    return TopicRead.model_validate(topic)


@router.put(
    "/{topic_id}/order",
    response_model=List[TopicRead],
    summary="Reorder Topic",
    description="Move a topic between two sibling topics. Returns the meeting's topics in their new order.",
    responses={400: {"description": "Neither anchor references a topic of the meeting"}},
)
async def reorder_topic(payload: TopicOrderUpdate, topic: TopicAccessDep, repos: ReposDep) -> List[TopicRead]:
    topics = await repos.topics.move(topic, before=payload.before, after=payload.after)
    return [TopicRead.model_validate(t) for t in topics]


@router.put(
    "/{topic_id}/solution/{comment_id}",
    response_model=TopicRead,
    summary="Mark Solution",
    description="Mark one of the topic's comments as its solution.",
    responses={400: {"description": "The comment is not attached to this topic"}},
)
async def set_solution(topic: TopicAccessDep, comment: CommentAccessDep, repos: ReposDep) -> TopicRead:
    if comment.topic_id != topic.id:
        raise ValidationFailedError(f"comment {comment.id} is not attached to topic {topic.id}")
    topic = await repos.topics.apply(topic, {"solution_id": comment.id})
    return TopicRead.model_validate(topic)


@router.delete("/{topic_id}/solution/{comment_id}", response_model=TopicRead, summary="Unmark Solution")
async def clear_solution(comment_id: int, topic: TopicAccessDep, repos: ReposDep) -> TopicRead:
    if topic.solution_id != comment_id:
        raise NotFoundError("solution", comment_id)
    topic = await repos.topics.apply(topic, {"solution_id": None})
    return TopicRead.model_validate(topic)


@router.post("/{topic_id}/users/{user_id}", response_model=TopicRead, summary="Assign User to Topic")
async def assign_user(
    user_id: str, topic: TopicAccessDep, project: ProjectAccessDep, user: CurrentUserDep, repos: ReposDep
) -> TopicRead:
    assignee = await load_member(repos, project, user_id)
    already_assigned = is_assigned(topic, user_id)
    topic = await repos.topics.add_related(topic, "assigned_users", assignee)
    if not already_assigned:
        await notify_assignment(repos, user, user_id, "topic", topic.title, _topic_link(project.id, topic))
    return TopicRead.model_validate(topic)


@router.delete("/{topic_id}/users/{user_id}", response_model=TopicRead, summary="Unassign User from Topic")
async def unassign_user(user_id: str, topic: TopicAccessDep, repos: ReposDep) -> TopicRead:
    if not await repos.topics.remove_related(topic, "assigned_users", user_id):
        raise NotFoundError("assigned user", user_id)
    return TopicRead.model_validate(topic)


@router.post("/{topic_id}/tags/{tag_id}", response_model=TopicRead, summary="Tag Topic")
async def add_tag(topic: TopicAccessDep, tag: TagAccessDep, repos: ReposDep) -> TopicRead:
    topic = await repos.topics.add_related(topic, "tags", tag)
    return TopicRead.model_validate(topic)


@router.delete("/{topic_id}/tags/{tag_id}", response_model=TopicRead, summary="Untag Topic")
async def remove_tag(tag_id: int, topic: TopicAccessDep, repos: ReposDep) -> TopicRead:
    if not await repos.topics.remove_related(topic, "tags", tag_id):
        raise NotFoundError("tag", tag_id)
    return TopicRead.model_validate(topic)


@router.get("/{topic_id}/actions", response_model=List[ActionRead], summary="List Topic Actions")
async def list_topic_actions(topic: TopicAccessDep, repos: ReposDep) -> List[ActionRead]:
    """List the actions derived from this topic."""
    actions = await repos.actions.find_for_topic(topic.id)
    return [ActionRead.model_validate(a) for a in actions]
