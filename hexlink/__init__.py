"""Core business logic for URL shortener."""

from .service import URLShortenerService
from .storage import InMemoryURLStore, ShortLinkEntry

__all__ = ["URLShortenerService", "InMemoryURLStore", "ShortLinkEntry"]

__version__ = "1.0.0"
