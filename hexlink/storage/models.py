"""Data models for the URL store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShortLinkEntry:
    """A short key and the URL it resolves to."""

    key: str
    target: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "key": self.key,
            "target": self.target,
        }
