"""Error taxonomy for the URL shortener.

Every error carries the message shown to clients and the HTTP status it maps
to, so the web layer can render any of them with a single handler.
"""

from typing import Optional


class ShortLinkError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail


class MalformedRequestError(ShortLinkError):
    """Request body could not be parsed or lacks a usable ``url`` field."""

    status_code = 400
    message = "Invalid request body"


class InvalidURLError(ShortLinkError, ValueError):
    """The submitted URL does not parse as a request URI."""

    status_code = 400
    message = "Invalid URL"


class KeyNotFoundError(ShortLinkError, LookupError):
    """No entry exists for the requested short key."""

    status_code = 404
    message = "URL not found"

    def __init__(self, key: str):
        super().__init__(f"Short key '{key}' not found")
        self.key = key
