"""
Ownership and access validation.

A user may access a project when they own it or hold an explicit grant on it.
Resources inside a project are additionally checked with their own
``check_project_ownership(project_id)`` so that an id from one project can
never be used to reach a resource of another.
"""

from __future__ import annotations

from typing import Protocol

from dmp.core.database.entities.projects import Project


class ProjectOwned(Protocol):
    """Anything that can tell whether it belongs to a project."""

    def check_project_ownership(self, project_id: int) -> bool: ...


def has_access(project: Project, user_id: str) -> bool:
    """Return True when ``user_id`` holds an explicit grant on ``project``.

    The project's ``users`` collection must be loaded.
    """
    return any(user.id == user_id for user in project.users)


def is_owner(project: Project, user_id: str) -> bool:
    return project.owner_id == user_id


def can_access(project: Project, user_id: str) -> bool:
    """Owner always has access, everyone else needs an explicit grant."""
    return is_owner(project, user_id) or has_access(project, user_id)


def belongs_to(resource: ProjectOwned | None, project_id: int) -> bool:
    """Null-safe ``check_project_ownership``."""
    return resource is not None and resource.check_project_ownership(project_id)


def is_assigned(resource, user_id: str) -> bool:
    """Return True when ``user_id`` is among the loaded ``assigned_users`` of a meeting, topic or action."""
    return any(user.id == user_id for user in resource.assigned_users)
