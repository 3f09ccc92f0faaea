"""Access logging for short link traffic."""

import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class LoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request, annotated with what happened to the link.

    Issued keys (set by the shorten route on ``request.state.short_key``) and
    redirect targets are appended, and server errors are logged at ERROR.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None, issuance: str = "atomic"):
        super().__init__(app)
        self.logger = logger or logging.getLogger("hexlink.web")
        self.issuance = issuance

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client = request.client.host if request.client else "unknown"
        line = f"{client} {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.2f}ms)"

        short_key = getattr(request.state, "short_key", None)
        if short_key is not None:
            line += f" issued={short_key} [{self.issuance}]"
        location = response.headers.get("location")
        if location is not None:
            line += f" location={location}"

        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        self.logger.log(level, line)

        return response
