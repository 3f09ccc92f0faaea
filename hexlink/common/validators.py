"""Validation utilities for URL shortener.

URLs are accepted when they parse as an HTTP request URI: either an absolute
URI with a scheme, or an absolute path. Anything else (bare words, relative
paths) is rejected.
"""

import string
from dataclasses import dataclass
from typing import Optional, Tuple

from ..exceptions import InvalidURLError


SCHEME_CHARS = string.ascii_letters + string.digits + "+-."
HEX_DIGITS = set(string.hexdigits)

# Characters allowed unescaped in a host besides letters and digits
HOST_EXTRA = set("!$&'()*+,;=:[]<>\"-_.~")
# Characters allowed in userinfo besides letters and digits
USERINFO_EXTRA = set("-._:~!$&'()*+,;=%@")


@dataclass
class RequestURI:
    """Components of a parsed request URI."""

    scheme: str = ""
    opaque: str = ""
    userinfo: Optional[str] = None
    host: str = ""
    path: str = ""
    raw_query: str = ""
    force_query: bool = False


def _has_control_byte(value: str) -> bool:
    return any(ord(c) < 0x20 or ord(c) == 0x7F for c in value)


def _split_scheme(raw: str) -> Tuple[str, str]:
    """Split a leading ``scheme:`` off raw.

    Returns ("", raw) when raw does not start with a scheme.
    """
    for i, c in enumerate(raw):
        if c in string.ascii_letters:
            continue
        if c in SCHEME_CHARS:
            if i == 0:
                return "", raw
            continue
        if c == ":":
            if i == 0:
                raise InvalidURLError("missing protocol scheme")
            return raw[:i], raw[i + 1:]
        return "", raw
    return "", raw


def _check_escapes(value: str, what: str) -> None:
    i = 0
    while i < len(value):
        if value[i] == "%":
            escape = value[i + 1:i + 3]
            if len(escape) < 2 or not all(c in HEX_DIGITS for c in escape):
                raise InvalidURLError(f"invalid URL escape {value[i:i + 3]!r} in {what}")
            i += 3
            continue
        i += 1


def _valid_optional_port(port: str) -> bool:
    if port == "":
        return True
    if port[0] != ":":
        return False
    return all(c in string.digits for c in port[1:])


def _host_char_allowed(c: str) -> bool:
    return ord(c) >= 0x80 or c.isalnum() or c in HOST_EXTRA


def _check_host_part(part: str, zone: bool = False) -> None:
    """Check host characters and escapes.

    In a host only "%25" and escapes of non-ASCII bytes are allowed. An IPv6
    zone may also escape a space or any character a host allows unescaped.
    """
    i = 0
    while i < len(part):
        c = part[i]
        if c == "%":
            escape = part[i + 1:i + 3]
            if len(escape) < 2 or not all(h in HEX_DIGITS for h in escape):
                raise InvalidURLError(f"invalid URL escape {part[i:i + 3]!r} in host")
            value = int(escape, 16)
            if zone:
                allowed = escape == "25" or value == 0x20 or (value < 0x80 and _host_char_allowed(chr(value)))
            else:
                allowed = escape == "25" or value >= 0x80
            if not allowed:
                raise InvalidURLError(f"invalid URL escape {part[i:i + 3]!r} in host")
            i += 3
            continue
        if not _host_char_allowed(c):
            raise InvalidURLError(f"invalid character {c!r} in host name")
        i += 1


def _parse_host(host: str) -> str:
    if host.startswith("["):
        end = host.rfind("]")
        if end < 0:
            raise InvalidURLError("missing ']' in host")
        if not _valid_optional_port(host[end + 1:]):
            raise InvalidURLError(f"invalid port {host[end + 1:]!r} after host")
        zone = host.find("%25", 0, end)
        if zone >= 0:
            _check_host_part(host[:zone])
            _check_host_part(host[zone:end], zone=True)
            _check_host_part(host[end:])
            return host
    else:
        colon = host.rfind(":")
        if colon >= 0 and not _valid_optional_port(host[colon:]):
            raise InvalidURLError(f"invalid port {host[colon:]!r} after host")
    _check_host_part(host)
    return host


def _parse_authority(authority: str, uri: RequestURI) -> None:
    at = authority.rfind("@")
    if at < 0:
        uri.host = _parse_host(authority)
        return
    userinfo = authority[:at]
    if not all(c.isascii() and (c.isalnum() or c in USERINFO_EXTRA) for c in userinfo):
        raise InvalidURLError("invalid userinfo")
    _check_escapes(userinfo, "userinfo")
    uri.userinfo = userinfo
    uri.host = _parse_host(authority[at + 1:])


def parse_request_uri(raw: str) -> RequestURI:
    """Parse a string the way an HTTP server parses a request target.

    Args:
        raw: The candidate URL

    Returns:
        Parsed components

    Raises:
        InvalidURLError: If raw is not a valid request URI
    """
    if _has_control_byte(raw):
        raise InvalidURLError("invalid control character in URL")
    if raw == "":
        raise InvalidURLError("empty url")

    uri = RequestURI()
    if raw == "*":
        uri.path = "*"
        return uri

    scheme, rest = _split_scheme(raw)
    uri.scheme = scheme.lower()

    if rest.endswith("?") and rest.count("?") == 1:
        uri.force_query = True
        rest = rest[:-1]
    else:
        rest, _, uri.raw_query = rest.partition("?")

    if not rest.startswith("/"):
        if uri.scheme:
            uri.opaque = rest
            return uri
        raise InvalidURLError("invalid URI for request")

    if uri.scheme and rest.startswith("//"):
        authority, slash, path = rest[2:].partition("/")
        _parse_authority(authority, uri)
        rest = slash + path

    _check_escapes(rest, "path")
    uri.path = rest
    return uri


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(url, str):
        return False, "URL must be a string"

    try:
        parse_request_uri(url)
    except InvalidURLError as e:
        return False, str(e)

    return True, ""
