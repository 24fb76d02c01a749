"""
I/O models for API requests and responses.

Each module holds the ``*Create`` / ``*Update`` request schemas and the
``*Read`` response schema of one entity. Read schemas are built from ORM
entities with ``model_validate`` (``from_attributes``).
"""

from .actions import ActionCreate, ActionRead, ActionUpdate, StatusUpdate, TopicSummary
from .comments import CommentCreate, CommentRead, CommentUpdate
from .meetings import MeetingCreate, MeetingRead, MeetingUpdate
from .notifications import NotificationRead
from .projects import ProjectCreate, ProjectRead, ProjectUpdate
from .tags import PriorityCreate, PriorityRead, PriorityUpdate, TagCreate, TagRead, TagUpdate
from .topics import TopicCreate, TopicOrderUpdate, TopicRead, TopicUpdate
from .users import UserRead, UserUpdate

__all__ = [
    "ActionCreate",
    "ActionRead",
    "ActionUpdate",
    "CommentCreate",
    "CommentRead",
    "CommentUpdate",
    "MeetingCreate",
    "MeetingRead",
    "MeetingUpdate",
    "NotificationRead",
    "PriorityCreate",
    "PriorityRead",
    "PriorityUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "StatusUpdate",
    "TagCreate",
    "TagRead",
    "TagUpdate",
    "TopicCreate",
    "TopicOrderUpdate",
    "TopicRead",
    "TopicSummary",
    "TopicUpdate",
    "UserRead",
    "UserUpdate",
]
