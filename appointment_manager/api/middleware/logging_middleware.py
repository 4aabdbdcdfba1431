"""
Access logging with correlation ids.
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"

# Probes and browser noise are tagged but not logged
QUIET_PATHS = frozenset({"/health", "/favicon.ico"})


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line when a request arrives and one when it leaves.

    The ``X-Correlation-ID`` request header is reused when present, otherwise
    a short id is generated. Either way it is stored on ``request.state`` and
    returned on the response together with the handling time.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or new_correlation_id()
        request.state.correlation_id = correlation_id
        label = f"[{correlation_id}] {request.method} {request.url.path}"
        quiet = request.url.path in QUIET_PATHS

        if not quiet:
            logger.info(f"{label} started")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"{label} failed after {_elapsed_ms(started):.2f}ms: {e}")
            raise

        elapsed = _elapsed_ms(started)
        if not quiet:
            level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(level, f"{label} -> {response.status_code} in {elapsed:.2f}ms")

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed:.2f}"
        return response


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
