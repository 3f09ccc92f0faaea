"""URL building utilities for URL shortener."""

import string
from urllib.parse import quote


# Every printable ASCII character passes through untouched
_LOCATION_SAFE = string.ascii_letters + string.digits + string.punctuation + " "


def build_short_url(
    short_key: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_key: The short key
        base_url: Base URL (e.g., http://localhost:8080)
        path_prefix: Optional path prefix (e.g., /s)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/{short_key}"
    return f"{base}/{short_key}"


def build_location_header(target: str) -> str:
    """Render a stored target as a Location header value.

    ASCII targets are returned unchanged. Header values travel as Latin-1,
    so any non-ASCII character is percent-encoded as UTF-8.
    """
    if target.isascii():
        return target
    return quote(target, safe=_LOCATION_SAFE)
