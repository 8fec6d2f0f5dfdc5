"""URL and pathname validation, and base + path composition.

Two grammars guard every href wayfinder builds:

- **base URLs** accept ``"/"``, a relative pathname, or an absolute URL
  with a scheme and host (``https://api.example.com``, ``ws://localhost``).
- **pathnames** accept ``"/"`` or a relative pathname only.

Usage::

    from wayfinder.urls import build_url, is_valid_pathname

    is_valid_pathname("/users/42")      # True
    is_valid_pathname("users")          # False
    build_url("https://api.example.com/", "/users/42")
    # -> "https://api.example.com/users/42"
"""

import re
from urllib.parse import urlsplit

from wayfinder.errors import InvalidBaseUrl, InvalidPath

# pchar per RFC 3986: unreserved / pct-encoded / sub-delims / ":" / "@"
_PCHAR = r"(?:[a-zA-Z0-9\-._~!$&'()*+,;=:@]|%[0-9A-Fa-f]{2})"
_PATHNAME_RE = re.compile(rf"^/{_PCHAR}+(?:/{_PCHAR}*)*/?$")

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*$")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_valid_pathname(value: object) -> bool:
    """Check whether *value* is ``"/"`` or a relative pathname.

    Examples::

        >>> is_valid_pathname("/")
        True
        >>> is_valid_pathname("/api/v1/data.json")
        True
        >>> is_valid_pathname("/invalid#fragment")
        False
        >>> is_valid_pathname("http://example.com/path")
        False
    """
    if not isinstance(value, str):
        return False
    if value == "/":
        return True
    return _PATHNAME_RE.match(value) is not None


def is_absolute_url(value: object) -> bool:
    """Check whether *value* is an absolute URL with a scheme and host."""
    if not isinstance(value, str) or not value:
        return False
    if "#" in value or "\\" in value or any(ch.isspace() for ch in value):
        return False
    if _BAD_PERCENT_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
        # Raises for a non-numeric or out-of-range port
        parts.port  # noqa: B018
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False
    return bool(parts.netloc) and bool(parts.hostname)


def is_url_or_relative_url(value: object) -> bool:
    """Check whether *value* is acceptable as a base URL.

    ``"/"``, any relative pathname, or an absolute URL.
    """
    return is_valid_pathname(value) or is_absolute_url(value)


def parse_base_url(value: object, *, route: str | None = None, key: str | None = None) -> str:
    """Return *value* unchanged if it is a valid base URL.

    Raises ``InvalidBaseUrl`` naming the value and, when given, the route
    or configuration key it came from.
    """
    if not is_url_or_relative_url(value):
        raise InvalidBaseUrl(value, route=route, key=key)
    return value  # type: ignore[return-value]


def parse_pathname(value: object, *, route: str | None = None) -> str:
    """Return *value* unchanged if it is a valid pathname.

    Raises ``InvalidPath`` naming the value and the route.
    """
    if not is_valid_pathname(value):
        raise InvalidPath(value, route=route)
    return value  # type: ignore[return-value]


def build_url(base: str, path: str) -> str:
    """Join an already-validated *base* and *path* into one URL.

    Pure and total: performs no validation and never raises. A trailing
    slash on the path is kept as-is.

    Examples::

        >>> build_url("/", "/users/42")
        '/users/42'
        >>> build_url("https://api.example.com/", "/users/42")
        'https://api.example.com/users/42'
        >>> build_url("/app", "settings")
        '/app/settings'
        >>> build_url("app", "/settings")
        '/app/settings'
    """
    clean_base = base[:-1] if base.endswith("/") else base
    clean_path = path if path.startswith("/") else f"/{path}"

    if base == "/":
        return clean_path

    if base.startswith(("http", "//", "/")):
        return f"{clean_base}{clean_path}"

    return f"/{clean_base}{clean_path}"
