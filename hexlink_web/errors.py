"""Exception handlers rendering errors as ``{"error": message}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hexlink.exceptions import ShortLinkError

logger = logging.getLogger("hexlink.web")


async def short_link_error_handler(request: Request, exc: ShortLinkError) -> JSONResponse:
    """Render service errors with their public message and status."""
    if exc.detail:
        logger.debug(f"{request.method} {request.url.path}: {exc.message} ({exc.detail})")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShortLinkError, short_link_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)


__all__ = ["register_exception_handlers"]
