"""
URL validation and normalization.
"""
from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from config import ALLOWED_URL_SCHEMES
from errors import InputError


_DEFAULT_PORTS = {"http": 80, "https": 443}


def validate_url(url: str) -> str:
    """
    Check that `url` is an absolute http(s) URL with a host.
    Returns the stripped URL; raises InputError otherwise.
    """
    if not isinstance(url, str) or not url.strip():
        raise InputError(str(url), "URL is required")

    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise InputError(candidate) from exc

    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES:
        raise InputError(candidate, "URL must start with http:// or https://")
    if not parts.hostname:
        raise InputError(candidate, "URL must include a host")
    if any(ch.isspace() for ch in candidate):
        raise InputError(candidate)

    return candidate


def normalize_url(url: str) -> str:
    """
    Normalize a URL for use as a cache key:
    - Lowercase scheme and host
    - Remove default ports (80 for http, 443 for https)
    - Remove fragment
    - Empty path becomes "/"
    The query string and path case are preserved.
    """
    p = urlsplit(url.strip())
    scheme = p.scheme.lower()

    host = (p.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"

    port = p.port
    if port is not None and _DEFAULT_PORTS.get(scheme) != port:
        host = f"{host}:{port}"

    if p.username is not None:
        userinfo = p.username
        if p.password is not None:
            userinfo = f"{userinfo}:{p.password}"
        host = f"{userinfo}@{host}"

    path = p.path or "/"
    return urlunsplit((scheme, host, path, p.query, ""))
