"""Common utilities for URL shortener."""

from .validators import is_valid_url, parse_request_uri
from .headers import extract_forwarded_headers, build_base_url
from .url_builder import build_short_url, build_location_header
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "parse_request_uri",
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "build_location_header",
    "setup_logging",
]
