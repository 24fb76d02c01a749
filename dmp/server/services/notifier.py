"""
User notifications for grants and assignments.

Notifications are written in the same session as the change that caused
them. Acting on yourself never notifies you.
"""

from __future__ import annotations

from dmp.core.database import RepoBundle
from dmp.core.database.entities.projects import Project
from dmp.core.database.entities.users import User
from dmp.core.logging_config import get_logger

logger = get_logger(__name__)


async def notify_user(
    repos: RepoBundle,
    actor: User,
    recipient_id: str,
    title: str,
    suffix: str = "",
    link: str = "",
    link_title: str = "",
) -> None:
    if recipient_id == actor.id:
        return
    await repos.notifications.notify(
        recipient_id,
        title,
        suffix=suffix,
        description=f"by {actor.name}",
        link=link,
        link_title=link_title,
    )
    logger.debug(f"Notified {recipient_id}: {title} {suffix}")


async def notify_grant(repos: RepoBundle, actor: User, project: Project, recipient_id: str) -> None:
    await notify_user(
        repos,
        actor,
        recipient_id,
        "You were added to a project",
        suffix=project.name,
        link=f"/projects/{project.id}",
        link_title=project.name,
    )


async def notify_assignment(
    repos: RepoBundle, actor: User, recipient_id: str, kind: str, name: str, link: str
) -> None:
    """Tell ``recipient_id`` they were assigned to a meeting, topic or action."""
    await notify_user(
        repos,
        actor,
        recipient_id,
        f"You were assigned to the {kind}",
        suffix=name,
        link=link,
        link_title=name,
    )
