"""In-memory implementation of the URL store."""

import logging
from typing import Dict, Optional

from ..exceptions import KeyNotFoundError
from ..shortcode import key_for_index
from .base import URLStoreBase
from .locks import ReadWriteLock
from .models import ShortLinkEntry

class InMemoryURLStore(URLStoreBase):
    """Process-local key -> URL mapping guarded by one reader/writer lock.

    Lookups share the lock; every mutation (and key generation, which reads
    the entry count) holds it exclusively. Nothing is persisted: the mapping
    starts empty and lives as long as the instance.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize an empty store.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._lock = ReadWriteLock()
        self._entries: Dict[str, str] = {}

    def put(self, key: str, target: str) -> None:
        with self._lock.write_locked():
            if key in self._entries:
                # Only reachable through separate next_key()/put() calls racing
                self.logger.warning(f"Overwriting existing short key: {key}")
            self._entries[key] = target

    def get(self, key: str) -> str:
        with self._lock.read_locked():
            target = self._entries.get(key)
        if target is None:
            raise KeyNotFoundError(key)
        return target

    def next_key(self) -> str:
        with self._lock.write_locked():
            return key_for_index(len(self._entries))

    def add(self, target: str) -> str:
        with self._lock.write_locked():
            key = key_for_index(len(self._entries))
            self._entries[key] = target
        return key

    def get_entry(self, key: str) -> ShortLinkEntry:
        return ShortLinkEntry(key=key, target=self.get(key))

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)
