"""
Request context middleware for structured logging.
"""

from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from flashcard_manager.infra.config.logging_config import (
    bind_context,
    clear_context,
    get_logger,
)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id, path and method to the structlog context.

    Every log line emitted while the request is handled carries them, and
    the request id is echoed back in the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        bind_context(
            request_id=request_id, path=request.url.path, method=request.method
        )
        logger = get_logger("http")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:  # pragma: no cover
            logger.exception("request.error", error=str(exc))
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "request.end",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_context()
