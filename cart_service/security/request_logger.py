"""
Request Logging Middleware

Logs every incoming request and the response that goes back out,
with the time spent handling it.
"""

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs request/response pairs.

    Request bodies are not read here; the route handlers own them.
    A handler that raises is logged as a 500 before the error moves on
    to the server error handler.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        client = request.client.host if request.client else "unknown"
        status_code = 500

        logger.info(f"-> {request.method} {request.url.path} from {client}")

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"<- {request.method} {request.url.path} "
                f"{status_code} ({duration_ms:.1f}ms)"
            )
        return response
