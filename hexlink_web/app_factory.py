"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI

from config import Config
from hexlink import __version__
from hexlink.service import URLShortenerService
from hexlink.storage import InMemoryURLStore, URLStoreBase
from .api import api_router
from .errors import register_exception_handlers
from .middleware.logging import LoggingMiddleware
from .web import web_router


def create_app(
    store: Optional[URLStoreBase] = None,
    service: Optional[URLShortenerService] = None,
    config: Optional[Config] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store: URL store (a fresh in-memory store when omitted)
        service: Service instance (built around ``store`` when omitted)
        config: Configuration instance (loaded from the environment when omitted)
        logger: Logger for the service and request logging

    Returns:
        Configured FastAPI app
    """
    config = config or Config()

    if service is None:
        store = store if store is not None else InMemoryURLStore(logger=logger)
        service = URLShortenerService(
            store=store,
            logger=logger,
            atomic_keys=config.atomic_keys,
        )
    else:
        store = service.store

    app = FastAPI(
        title="hexlink",
        description="In-memory URL shortening service",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.store = store
    app.state.service = service
    app.state.config = config

    register_exception_handlers(app)

    app.add_middleware(
        LoggingMiddleware,
        logger=logger.getChild("web") if logger else None,
        issuance="atomic" if service.atomic_keys else "two-step",
    )

    # Catch-all /{short_key} goes last so it cannot shadow anything else
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Short links"])

    return app
