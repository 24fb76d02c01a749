"""
Request logging middleware.

Every request gets an id (taken from ``X-Request-ID`` when the client sends
one) that is echoed back in the response together with ``X-Process-Time``.
Timings go through ``dmp.core.monitoring.log_api_request``; requests slower
than ``SLOW_REQUEST_THRESHOLD_MS`` are additionally logged as warnings.
"""

import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from dmp.core.logging_config import get_logger
from dmp.core.monitoring import log_api_request

from ..core.constant import SLOW_REQUEST_THRESHOLD_MS

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        method, path = request.method, request.url.path
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = _elapsed_ms(start)
            logger.error(
                f"{method} {path} failed after {duration_ms:.2f}ms",
                exc_info=True,
                extra={"request_id": request_id, "method": method, "path": path, "error": str(e)},
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise

        duration_ms = _elapsed_ms(start)
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        if duration_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                f"Slow request: {method} {path} took {duration_ms:.2f}ms",
                extra={"request_id": request_id, "status_code": response.status_code},
            )
        return response
