"""Pytest configuration and fixtures."""

import threading

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from hexlink.common.logging_config import setup_logging
from hexlink.service import URLShortenerService
from hexlink.storage import InMemoryURLStore
from hexlink_web import create_app


class BarrierStore(InMemoryURLStore):
    """Store that holds callers at a barrier so their store calls overlap.

    ``next_key()`` waits after computing its key and ``add()`` waits before
    entering, so every party is inside the issuing step at the same time.
    """

    def __init__(self, parties: int):
        super().__init__()
        self.barrier = threading.Barrier(parties, timeout=5)

    def next_key(self) -> str:
        key = super().next_key()
        self.barrier.wait()
        return key

    def add(self, target: str) -> str:
        self.barrier.wait()
        return super().add(target)


@pytest.fixture
def barrier_store():
    """Factory for stores whose issuing calls are forced to interleave."""
    return BarrierStore


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create an empty store."""
    return InMemoryURLStore(logger=logger)


@pytest.fixture
def service(store, logger):
    """Create service instance."""
    return URLShortenerService(store=store, logger=logger)


@pytest.fixture
def config():
    """Configuration matching the service's fixed defaults."""
    return Config(
        _env_file=None,
        base_url="http://localhost:8080",
        path_prefix="",
        trust_forwarded_headers=False,
        atomic_keys=True,
    )


@pytest.fixture
def app(store, config, logger):
    """Create test FastAPI app."""
    return create_app(store=store, config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
