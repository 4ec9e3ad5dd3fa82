"""Access logging middleware for the train search API."""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from train_search.adapters.web.rate_limit_middleware import extract_client_ip

logger = logging.getLogger(__name__)


def describe_request(request: Request) -> str:
    """Render method, path and query string, e.g. ``GET /trains/search?source=A``."""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{request.method} {target}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request once it has been answered.

    Headers and bodies are never logged.
    """

    def __init__(self, app: Callable, enabled: bool = False) -> None:
        super().__init__(app)
        self.enabled = enabled

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Time the request and log its outcome."""
        if not self.enabled:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, started)
            raise

        self._log(request, response.status_code, started)
        return response

    def _log(self, request: Request, status_code: int, started: float) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{describe_request(request)} -> {status_code} ({elapsed_ms:.1f} ms) "
            f"from {extract_client_ip(request)}"
        )
