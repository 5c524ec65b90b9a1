"""Logging setup and per-request call logging."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

call_logger = logging.getLogger("sysapi.calls")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.getLogger().setLevel(level)


class CallLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration for each call outside /health."""

    def __init__(self, app, excluded_prefix: str = "/health") -> None:
        super().__init__(app)
        self.excluded_prefix = excluded_prefix

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path.startswith(self.excluded_prefix):
            return await call_next(request)
        started = time.perf_counter()
        response = await call_next(request)
        call_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response
