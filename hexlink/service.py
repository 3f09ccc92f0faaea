"""Business logic service for URL shortener."""

import logging
from typing import Any, Dict, Optional

from .common.validators import is_valid_url
from .exceptions import InvalidURLError, KeyNotFoundError, MalformedRequestError
from .storage.base import URLStoreBase
from .storage.memory import InMemoryURLStore
from .storage.models import ShortLinkEntry


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: Optional[URLStoreBase] = None,
        logger: Optional[logging.Logger] = None,
        atomic_keys: bool = True,
    ):
        """Initialize URL shortener service.

        Args:
            store: URL store (a fresh in-memory store when omitted)
            logger: Optional logger
            atomic_keys: Issue keys and insert in one critical section. When
                False, key generation and insertion are two separately locked
                store calls, and concurrent shortens may be issued the same key.
        """
        self.store = store if store is not None else InMemoryURLStore()
        self.logger = logger or logging.getLogger("hexlink.service")
        self.atomic_keys = atomic_keys

    def shorten(self, original_url: Any) -> str:
        """Store a URL and issue its short key.

        Args:
            original_url: The URL to shorten, as received from the client

        Returns:
            The issued short key

        Raises:
            MalformedRequestError: If original_url is not a non-empty string
            InvalidURLError: If original_url does not parse as a request URI
        """
        if not isinstance(original_url, str) or not original_url:
            raise MalformedRequestError("url must be a non-empty string")

        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            self.logger.debug(f"Rejected URL {original_url!r}: {error}")
            raise InvalidURLError(error)

        if self.atomic_keys:
            key = self.store.add(original_url)
        else:
            key = self.store.next_key()
            self.store.put(key, original_url)

        self.logger.info(f"Created short URL: {key} -> {original_url}")
        return key

    def resolve(self, short_key: str) -> str:
        """Get the original URL for a short key.

        Args:
            short_key: The short key to look up

        Returns:
            Original URL

        Raises:
            KeyNotFoundError: If the key was never issued
        """
        try:
            target = self.store.get(short_key)
        except KeyNotFoundError:
            self.logger.debug(f"Short key not found: {short_key}")
            raise

        self.logger.debug(f"Resolved: {short_key} -> {target}")
        return target

    def get_entry(self, short_key: str) -> ShortLinkEntry:
        """Get the stored entry for a short key.

        Raises:
            KeyNotFoundError: If the key was never issued
        """
        return self.store.get_entry(short_key)

    def health_check(self) -> Dict[str, Any]:
        """Perform health check.

        Returns:
            Dictionary with overall status and entry count
        """
        return {
            "overall": True,
            "total_urls": self.store.count(),
        }
