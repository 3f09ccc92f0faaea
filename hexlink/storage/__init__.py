"""Storage layer for URL shortener."""

from .base import URLStoreBase
from .locks import ReadWriteLock
from .memory import InMemoryURLStore
from .models import ShortLinkEntry

__all__ = ["URLStoreBase", "ReadWriteLock", "InMemoryURLStore", "ShortLinkEntry"]
