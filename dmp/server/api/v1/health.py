"""
Health and version endpoints for load balancers and deployment checks.

Neither endpoint requires a bearer token.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from dmp.core.logging_config import get_logger

from ...core import constant
from ...services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health Check",
    description="Report whether the server is up and can reach its database.",
    responses={503: {"description": "Database unreachable"}},
)
async def health_check(session: SessionDep):
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        return JSONResponse(status_code=503, content={"status": "degraded", "database": "unavailable"})
    return {"status": "ok", "database": "ok"}


@router.get("/version", summary="Get Version")
async def version():
    """API release and schema version of the running server."""
    return {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}
