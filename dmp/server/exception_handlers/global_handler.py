"""
Exception handlers for the DMP API.

``DMPError`` subclasses carry their own status code and become
``{"detail": ...}`` responses. Database errors and anything unhandled become
a 500 whose body holds an ``error_id``; the same id is logged with the full
traceback so a report from a client can be matched to the log line.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from dmp.core.exceptions import AuthenticationError, DMPError
from dmp.core.logging_config import get_logger
from dmp.core.monitoring import log_error

logger = get_logger(__name__)


def _request_context(request: Request, exc: Exception) -> dict:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
        "error_type": type(exc).__name__,
    }


def _server_error(request: Request, exc: Exception, detail: str) -> JSONResponse:
    error_id = id(exc)
    context = _request_context(request, exc)
    logger.error(
        f"{detail} [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_id": error_id, **context},
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    body = {"detail": detail, "error_id": error_id, "error_type": type(exc).__name__}
    if context["request_id"] is not None:
        body["request_id"] = context["request_id"]
    return JSONResponse(status_code=500, content=body)


async def domain_exception_handler(request: Request, exc: DMPError) -> JSONResponse:
    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}",
        extra=_request_context(request, exc),
    )
    # 401 responses must name the expected scheme
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    return _server_error(request, exc, "Database error")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _server_error(request, exc, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain, database and catch-all handlers on ``app``."""
    app.add_exception_handler(DMPError, domain_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
