"""Abstract base class for URL store implementations."""

from abc import ABC, abstractmethod

from .models import ShortLinkEntry


class URLStoreBase(ABC):
    """Abstract base class for short key -> URL storage."""

    @abstractmethod
    def put(self, key: str, target: str) -> None:
        """Insert a new mapping.

        The caller guarantees ``key`` is not already present.

        Args:
            key: The short key
            target: The original URL
        """
        pass

    @abstractmethod
    def get(self, key: str) -> str:
        """Get the target URL for a key.

        Args:
            key: The short key to look up

        Returns:
            The stored target URL

        Raises:
            KeyNotFoundError: If the key has never been stored
        """
        pass

    @abstractmethod
    def next_key(self) -> str:
        """Produce the key the next entry would receive.

        Returns:
            Hexadecimal rendering of the current entry count
        """
        pass

    @abstractmethod
    def add(self, target: str) -> str:
        """Issue a key for ``target`` and store it in one atomic step.

        Args:
            target: The original URL

        Returns:
            The issued short key
        """
        pass

    @abstractmethod
    def get_entry(self, key: str) -> ShortLinkEntry:
        """Get the full entry for a key.

        Raises:
            KeyNotFoundError: If the key has never been stored
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored entries."""
        pass
