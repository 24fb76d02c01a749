"""
API endpoints for the current user's notifications.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from dmp.core.exceptions import NotFoundError
from dmp.core.logging_config import get_logger
from dmp.core.models.io.notifications import NotificationRead

from ...services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["notifications"])


@router.get(
    "",
    response_model=List[NotificationRead],
    summary="List Notifications",
    description="List the current user's notifications, newest first.",
)
async def list_notifications(
    user: CurrentUserDep, repos: ReposDep, unread_only: bool = False
) -> List[NotificationRead]:
    notifications = await repos.notifications.find_for_user(user.id, unread_only=unread_only)
    return [NotificationRead.model_validate(n) for n in notifications]


async def _own_notification(notification_id: int, user_id: str, repos):
    # Someone else's notification is reported as missing
    notification = await repos.notifications.get_by_id(notification_id)
    if notification is None or notification.user_id != user_id:
        raise NotFoundError("notification", notification_id)
    return notification


@router.put("/{notification_id}/read", response_model=NotificationRead, summary="Mark Notification Read")
async def mark_read(notification_id: int, user: CurrentUserDep, repos: ReposDep) -> NotificationRead:
    notification = await _own_notification(notification_id, user.id, repos)
    notification = await repos.notifications.mark_read(notification)
    return NotificationRead.model_validate(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Notification")
async def delete_notification(notification_id: int, user: CurrentUserDep, repos: ReposDep) -> Response:
    await _own_notification(notification_id, user.id, repos)
    await repos.notifications.delete(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "",
    summary="Clear Notifications",
    description="Delete all notifications of the current user.",
    response_description="Number of notifications removed.",
)
async def clear_notifications(user: CurrentUserDep, repos: ReposDep):
    removed = await repos.notifications.delete_all_for_user(user.id)
    logger.debug(f"Cleared {removed} notifications of {user.id}")
    return {"deleted": removed}
