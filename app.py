#!/usr/bin/env python3
"""
Main entry point for the hexlink URL shortener.

Concurrency: request handlers are plain functions, so uvicorn/Starlette run
each request on a worker thread. The only shared state is the in-memory
store, guarded by its reader/writer lock. Everything is lost on restart.

Usage:
    python app.py

Environment variables:
    HOST - Address to bind to (default 0.0.0.0)
    PORT - Port to listen on (default 8080)
    BASE_URL - Base URL for short links (default http://localhost:8080)
    PATH_PREFIX - Path prefix inserted before short keys
    TRUST_FORWARDED_HEADERS - Build short links from X-Forwarded-* headers
    ATOMIC_KEYS - Set to 0 for two-step key issuance
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - Emit JSON log lines
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from hexlink.common.logging_config import setup_logging
from hexlink_web import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")
    logger.info(
        f"Issuing short URLs under {config.base_url} "
        f"({'atomic' if config.atomic_keys else 'two-step'} key issuance)"
    )

    yield

    logger.info(
        f"Shutting down URL shortener service, "
        f"discarding {app.state.store.count()} in-memory short URLs"
    )


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("hexlink URL Shortener")
    logger.info(f"Configuration: {config.model_dump()}")

    app = create_app(config=config, logger=logger)
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    # uvicorn exits with status 1 itself when the address cannot be bound
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
