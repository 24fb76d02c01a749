"""
DMP server application.

Builds the FastAPI app: logging, optional Logfire tracing, exception handlers,
request logging and CORS middleware, and the ``/api/v1`` routers. Run it with
``dmp-server`` or ``uvicorn dmp.server.main:app``.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dmp.core.database import engine, init_db
from dmp.core.logging_config import get_logger, setup_logging
from dmp.core.monitoring import initialize_logfire

from .api.v1 import (
    actions,
    comments,
    health,
    meetings,
    notifications,
    projects,
    tags,
    topics,
    users,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

setup_logging()
logger = get_logger(__name__)

PROJECT_PATH = f"{constant.API_V1_STR}/projects/{{project_id}}"
MEETING_PATH = f"{PROJECT_PATH}/meetings/{{meeting_id}}"

# (router, prefix) in mounting order; comments share the /projects prefix
ROUTES: list[tuple[APIRouter, str]] = [
    (health.router, constant.API_V1_STR),
    (users.router, f"{constant.API_V1_STR}/users"),
    (projects.router, f"{constant.API_V1_STR}/projects"),
    (comments.router, f"{constant.API_V1_STR}/projects"),
    (meetings.router, f"{PROJECT_PATH}/meetings"),
    (topics.router, f"{MEETING_PATH}/topics"),
    (actions.router, f"{PROJECT_PATH}/actions"),
    (tags.router, f"{PROJECT_PATH}/tags"),
    (tags.priority_router, f"{PROJECT_PATH}/priorities"),
    (notifications.router, f"{constant.API_V1_STR}/notifications"),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database on startup; a failure is logged, not fatal."""
    logger.info(f"Starting DMP server {constant.API_VERSION}")
    try:
        await init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    await engine.dispose()
    logger.info("DMP server stopped")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description=(
        "Plan meetings inside projects: agendas of topics, follow-up actions, "
        "comments, tags and priorities. A project is visible to its owner and "
        "to the users the owner has granted access to."
    ),
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app, engine)
setup_exception_handlers(app)

app.add_middleware(RequestLoggingMiddleware)
cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)

for router, prefix in ROUTES:
    app.include_router(router, prefix=prefix)


def run() -> None:
    """Entry point of the ``dmp-server`` script."""
    uvicorn.run(
        "dmp.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
