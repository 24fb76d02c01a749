"""
Domain exceptions.

Raised by guards, repositories and routers; translated to HTTP responses by
``dmp.server.exception_handlers``.
"""

from __future__ import annotations


class DMPError(Exception):
    """Base class for all errors raised by the DMP backend."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationFailedError(DMPError):
    """A request is well-formed but violates a domain rule."""

    status_code = 400


class AuthenticationError(DMPError):
    """The bearer token is missing, expired or invalid."""

    status_code = 401


class NoAccessError(DMPError):
    """The requesting user may not access the resource."""

    status_code = 403

    def __init__(self, detail: str = "no access") -> None:
        super().__init__(detail)


class NotFoundError(DMPError):
    """The resource does not exist, is deleted, or is not part of the project."""

    status_code = 404

    def __init__(self, resource: str, resource_id: object = None) -> None:
        detail = f"{resource} not found" if resource_id is None else f"{resource} {resource_id} not found"
        super().__init__(detail)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(DMPError):
    """The change would violate a uniqueness constraint."""

    status_code = 409
