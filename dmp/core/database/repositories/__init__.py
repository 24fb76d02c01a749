"""
Repositories, one per DMP entity.

Each one wraps ``SoftDeleteRepository`` on a request-scoped session and adds
the queries its routers need: listing by parent, access lookups, ordering of
topics and cascading soft deletion to dependent rows.
"""

from .actions import ActionRepository
from .base import SoftDeleteRepository
from .comments import CommentRepository
from .meetings import MeetingRepository
from .notifications import NotificationRepository
from .projects import ProjectRepository
from .tags import PriorityRepository, TagRepository
from .topics import TopicRepository
from .users import UserRepository

__all__ = [
    "ActionRepository",
    "CommentRepository",
    "MeetingRepository",
    "NotificationRepository",
    "PriorityRepository",
    "ProjectRepository",
    "SoftDeleteRepository",
    "TagRepository",
    "TopicRepository",
    "UserRepository",
]
