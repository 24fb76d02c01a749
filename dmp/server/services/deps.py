"""
Request Dependencies.

Provides the per-request session, the repository bundle, the current user and
the access guards used by the API routers. Every project-scoped route depends
on ``get_project_access`` (or ``get_project_owner_access``), and nested
resources are additionally checked with ``check_project_ownership`` so that an
id from another project is reported as not found.
"""

from typing import Annotated, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dmp.core.access import belongs_to, can_access, is_owner
from dmp.core.database import RepoBundle, build_repos, get_session
from dmp.core.database.entities.actions import Action
from dmp.core.database.entities.comments import Comment
from dmp.core.database.entities.meetings import Meeting
from dmp.core.database.entities.projects import Project
from dmp.core.database.entities.tags import Priority, Tag
from dmp.core.database.entities.topics import Topic
from dmp.core.database.entities.users import User
from dmp.core.exceptions import NoAccessError, NotFoundError, ValidationFailedError
from dmp.core.monitoring import log_access_denied

from .auth import get_current_user


SessionDep = Annotated[AsyncSession, Depends(get_session)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_repos(session: SessionDep) -> RepoBundle:
    return build_repos(session)


ReposDep = Annotated[RepoBundle, Depends(get_repos)]


async def get_project_access(project_id: int, user: CurrentUserDep, repos: ReposDep) -> Project:
    """
    Load the project in the path and admit its owner or a granted user.

    Raises:
        NotFoundError: If the project does not exist or is deleted
        NoAccessError: If the user neither owns the project nor holds a grant
    """
    project = await repos.projects.get_by_id(project_id)
    if project is None:
        raise NotFoundError("project", project_id)
    if not can_access(project, user.id):
        log_access_denied(user.id, project_id)
        raise NoAccessError()
    return project


ProjectAccessDep = Annotated[Project, Depends(get_project_access)]


async def get_project_owner_access(project: ProjectAccessDep, user: CurrentUserDep) -> Project:
    """Like ``get_project_access`` but only the owner is admitted."""
    if not is_owner(project, user.id):
        raise NoAccessError("only the project owner may do this")
    return project


ProjectOwnerDep = Annotated[Project, Depends(get_project_owner_access)]


async def get_meeting_access(meeting_id: int, project: ProjectAccessDep, repos: ReposDep) -> Meeting:
    meeting = await repos.meetings.get_by_id(meeting_id)
    if not belongs_to(meeting, project.id):
        raise NotFoundError("meeting", meeting_id)
    return meeting


MeetingAccessDep = Annotated[Meeting, Depends(get_meeting_access)]


async def get_topic_access(topic_id: int, meeting: MeetingAccessDep, repos: ReposDep) -> Topic:
    """Load a topic of the meeting in the path."""
    topic = await repos.topics.get_by_id(topic_id)
    if not belongs_to(topic, meeting.project_id) or topic.meeting_id != meeting.id:
        raise NotFoundError("topic", topic_id)
    return topic


TopicAccessDep = Annotated[Topic, Depends(get_topic_access)]


async def get_action_access(action_id: int, project: ProjectAccessDep, repos: ReposDep) -> Action:
    action = await repos.actions.get_by_id(action_id)
    if not belongs_to(action, project.id):
        raise NotFoundError("action", action_id)
    return action


ActionAccessDep = Annotated[Action, Depends(get_action_access)]


async def get_tag_access(tag_id: int, project: ProjectAccessDep, repos: ReposDep) -> Tag:
    tag = await repos.tags.get_by_id(tag_id)
    if not belongs_to(tag, project.id):
        raise NotFoundError("tag", tag_id)
    return tag


TagAccessDep = Annotated[Tag, Depends(get_tag_access)]


async def get_priority_access(priority_id: int, project: ProjectAccessDep, repos: ReposDep) -> Priority:
    priority = await repos.priorities.get_by_id(priority_id)
    if not belongs_to(priority, project.id):
        raise NotFoundError("priority", priority_id)
    return priority


PriorityAccessDep = Annotated[Priority, Depends(get_priority_access)]


async def get_comment_access(comment_id: int, project: ProjectAccessDep, repos: ReposDep) -> Comment:
    comment = await repos.comments.get_by_id(comment_id)
    if not belongs_to(comment, project.id):
        raise NotFoundError("comment", comment_id)
    return comment


CommentAccessDep = Annotated[Comment, Depends(get_comment_access)]


async def load_member(repos: RepoBundle, project: Project, user_id: str) -> User:
    """
    Load a user who is about to be assigned to something inside ``project``.

    Raises:
        NotFoundError: If the user does not exist
        ValidationFailedError: If the user has no access to the project
    """
    member = await repos.users.get_by_id(user_id)
    if member is None:
        raise NotFoundError("user", user_id)
    if not can_access(project, user_id):
        raise ValidationFailedError(f"user {user_id} has no access to the project")
    return member


async def load_project_tag(repos: RepoBundle, project: Project, tag_id: int) -> Tag:
    tag = await repos.tags.get_by_id(tag_id)
    if not belongs_to(tag, project.id):
        raise NotFoundError("tag", tag_id)
    return tag


async def check_priority(repos: RepoBundle, project: Project, priority_id: Optional[int]) -> None:
    """A priority referenced by a topic or action must belong to its project."""
    if priority_id is None:
        return
    priority = await repos.priorities.get_by_id(priority_id)
    if not belongs_to(priority, project.id):
        raise NotFoundError("priority", priority_id)
