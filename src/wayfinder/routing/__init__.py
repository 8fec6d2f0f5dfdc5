"""Routing — a registry of named, schema-validated routes.

Routes are declared once during setup; hrefs are rebuilt per call from
the route's schemas, its path function and the resolved base URL.
"""

from wayfinder.routing.builder import GlobalRouter, RouteBuilder, route_builder
from wayfinder.routing.resolve import compose_href, full_route, resolve_base
from wayfinder.routing.route import Route, RouteDefinition, RouteRouter

__all__ = [
    "GlobalRouter",
    "Route",
    "RouteBuilder",
    "RouteDefinition",
    "RouteRouter",
    "compose_href",
    "full_route",
    "resolve_base",
    "route_builder",
]
