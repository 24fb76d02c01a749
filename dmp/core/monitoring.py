"""
Optional Pydantic Logfire integration.

Request timings, access denials and server errors are always written to the
standard logger. When ``LOGFIRE_ENABLED`` is true and ``LOGFIRE_TOKEN`` is set
they are also sent to Logfire, and FastAPI and SQLAlchemy are instrumented.
The ``logfire`` package comes with the ``monitoring`` extra.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


class LogfireSettings(BaseSettings):
    """Logfire options, read from ``LOGFIRE_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="LOGFIRE_", env_file=".env", extra="ignore")

    enabled: bool = False
    token: str = ""
    environment: str = "development"
    service_name: str = "dmp-server"
    service_version: str = "0.1.0"
    trace_sqlalchemy: bool = True
    trace_fastapi: bool = True

    @property
    def active(self) -> bool:
        return self.enabled and bool(self.token)


logfire_settings = LogfireSettings()


def initialize_logfire(app: Optional[FastAPI] = None, engine: Optional[AsyncEngine] = None) -> bool:
    """
    Configure Logfire and instrument the app and the database engine.

    Args:
        app: Application to instrument; skipped when None
        engine: Engine to instrument; all engines when None

    Returns:
        True when Logfire was configured
    """
    config = logfire_settings
    if not config.enabled:
        logger.info("Logfire monitoring is disabled")
        return False
    if not config.token:
        logger.warning("LOGFIRE_ENABLED is set but LOGFIRE_TOKEN is missing, monitoring stays off")
        return False

    try:
        import logfire
    except ImportError:
        logger.warning("LOGFIRE_ENABLED is set but logfire is not installed (pip install 'dmp-meeting-planner[monitoring]')")
        return False

    logfire.configure(
        token=config.token,
        service_name=config.service_name,
        service_version=config.service_version,
        environment=config.environment,
    )
    if config.trace_sqlalchemy:
        if engine is not None:
            logfire.instrument_sqlalchemy(engine=engine.sync_engine)
        else:
            logfire.instrument_sqlalchemy()
    if config.trace_fastapi and app is not None:
        logfire.instrument_fastapi(app=app)

    logger.info(f"Logfire monitoring initialized for {config.service_name} ({config.environment})")
    return True


def _forward(level: str, message: str, **attributes: Any) -> None:
    if not logfire_settings.active:
        return
    try:
        import logfire

        getattr(logfire, level)(message, **attributes)
    except Exception as e:
        logger.debug(f"Could not forward '{message}' to Logfire: {e}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    logger.info(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
    _forward("info", "API request completed", method=method, path=path, status_code=status_code, duration_ms=duration_ms)


def log_access_denied(user_id: str, project_id: int) -> None:
    """Record a user being turned away by the project access guard."""
    logger.info(f"User {user_id} denied access to project {project_id}")
    _forward("warn", "Project access denied", user_id=user_id, project_id=project_id)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Send a server error to Logfire. The caller has already logged it locally.

    Args:
        error_type: Exception class name
        error_message: Exception message
        context: Extra attributes such as the error id and request path
    """
    _forward("error", f"{error_type}: {error_message}", **(context or {}))
