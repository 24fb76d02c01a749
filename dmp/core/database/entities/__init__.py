"""
Database entity models.

This package contains all database entity models organized by business domain.
Importing it registers every table with ``SQLModel.metadata``.

Modules:
- users: Users provisioned from the identity provider
- projects: Projects and their explicit access grants
- meetings: Meetings within a project
- topics: Discussion items within a meeting
- actions: Tasks within a project
- comments: Comments on projects, meetings, topics and actions
- tags: Tags and priorities (classification metadata)
- notifications: Per-user inbox messages
- links: Many-to-many association tables
"""

from .actions import Action
from .comments import Comment
from .links import (
    ActionTagLink,
    ActionUserLink,
    MeetingTagLink,
    MeetingUserLink,
    TopicActionLink,
    TopicTagLink,
    TopicUserLink,
    UserProjectLink,
)
from .meetings import Meeting
from .notifications import Notification
from .projects import Project
from .tags import Priority, Tag
from .topics import Topic
from .users import User

__all__ = [
    "Action",
    "ActionTagLink",
    "ActionUserLink",
    "Comment",
    "Meeting",
    "MeetingTagLink",
    "MeetingUserLink",
    "Notification",
    "Priority",
    "Project",
    "Tag",
    "Topic",
    "TopicActionLink",
    "TopicTagLink",
    "TopicUserLink",
    "User",
    "UserProjectLink",
]
