"""Header parsing utilities for URL shortener."""

from typing import Dict, Optional


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_proto, forwarded_host
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
    }


def build_base_url(
    headers: Dict[str, str],
    fallback_base_url: str,
    trust_forwarded: bool = False,
) -> str:
    """Build the base URL short links are issued under.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host (only when trust_forwarded)
    2. Fallback base URL from config

    Args:
        headers: Request headers
        fallback_base_url: Configured base URL
        trust_forwarded: Whether proxy headers may override the configured base

    Returns:
        Base URL without trailing slash (e.g., http://localhost:8080)
    """
    if trust_forwarded:
        forwarded = extract_forwarded_headers(headers)
        proto = forwarded["forwarded_proto"]
        host = forwarded["forwarded_host"]
        if proto and host:
            # Proxies may append; the first entry is the client-facing one
            proto = proto.split(",")[0].strip()
            host = host.split(",")[0].strip()
            return f"{proto}://{host}"

    return fallback_base_url.rstrip("/")
