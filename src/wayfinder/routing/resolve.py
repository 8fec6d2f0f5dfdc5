"""Base URL resolution and href assembly.

Precedence for the base of one href, highest first:

1. the ``base_url`` passed to the call (``navigate``, ``link``, ``push``)
2. the ``base_url`` the route was declared with
3. the builder's ``default_base_url``

A candidate naming a key of ``additional_base_urls`` resolves to that
pre-validated URL; any other candidate must itself be a valid base URL.
"""

import logging

from wayfinder.config import RouteBuilderConfig
from wayfinder.urls import build_url, parse_base_url, parse_pathname

logger = logging.getLogger("wayfinder.routing")


def resolve_base(
    call_override: str | None,
    route_default: str | None,
    config: RouteBuilderConfig,
    *,
    route: str | None = None,
) -> str:
    """Pick and validate the base URL for one call.

    Raises ``InvalidBaseUrl`` naming *route* when the winning candidate
    is neither a configured key nor a valid URL or pathname.
    """
    candidate = call_override or route_default
    if not candidate:
        return config.default_base_url

    aliased = config.resolved_base_urls.get(candidate)
    if aliased is not None:
        logger.debug("Route %r: base %r -> %r", route, candidate, aliased)
        return aliased
    return parse_base_url(candidate, route=route)


def full_route(
    path: str,
    call_override: str | None,
    route_default: str | None,
    config: RouteBuilderConfig,
    *,
    route: str | None = None,
) -> str:
    """Validate *path* and join it onto the resolved base.

    Raises ``InvalidPath`` if *path* is not a pathname.
    """
    valid_path = parse_pathname(path, route=route)
    base = resolve_base(call_override, route_default, config, route=route)
    return build_url(base, valid_path)


def compose_href(url: str, query: str = "", hash: str | None = None) -> str:
    """Append ``?query`` and ``#hash`` when they are non-empty.

    Example::

        compose_href("/workspace/1", "tab=overview", "members")
        -> "/workspace/1?tab=overview#members"
    """
    parts = [url]
    if query:
        parts.append(f"?{query}")
    if hash:
        parts.append(f"#{hash}")
    return "".join(parts)
