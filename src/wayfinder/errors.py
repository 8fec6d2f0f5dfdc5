"""Wayfinder exception hierarchy.

Shared across the registry, resolver, schema adapter, and templating so
every module raises and catches the same types.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wayfinder.schema.protocol import Issue


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class ConfigurationError(WayfinderError):
    """Raised when a route declaration or builder configuration is invalid.

    These indicate a defect in how routes were declared, not bad input
    data, so the ``safe`` accessors never convert them into results.
    """


class DuplicateRouteName(ConfigurationError):  # noqa: N818
    """A route with this name is already registered on the builder."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A route named {name!r} is already registered.")


class UnknownRouteName(ConfigurationError, LookupError):  # noqa: N818
    """No route with this name is registered on the builder."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No route named {name!r} is registered.")


class InvalidBaseUrl(ConfigurationError):  # noqa: N818
    """A base URL candidate is neither a known alias nor a valid URL/path.

    Carries the offending value and, when known, the route being
    resolved or the ``additional_base_urls`` key being validated.
    """

    def __init__(self, value: object, route: str | None = None, key: str | None = None) -> None:
        self.value = value
        self.route = route
        self.key = key
        where = ""
        if route is not None:
            where = f" in route {route!r}"
        elif key is not None:
            where = f" for {key!r}"
        super().__init__(
            f"Invalid base URL {value!r}{where}: expected '/', a pathname "
            "starting with '/', an absolute URL (like https://example.com), "
            "or one of the configured base URL keys."
        )


class InvalidPath(ConfigurationError):  # noqa: N818
    """A route function (or a raw path) produced a malformed pathname."""

    def __init__(self, value: object, route: str | None = None) -> None:
        self.value = value
        self.route = route
        where = f" from route {route!r}" if route is not None else ""
        super().__init__(
            f"{value!r}{where} is not a valid pathname. It should start with a "
            "forward slash (/) and contain only allowed characters."
        )


class AsyncValidationUnsupported(ConfigurationError):  # noqa: N818
    """A schema's ``validate`` returned an awaitable.

    Route resolution is synchronous (link rendering, imperative push),
    so asynchronous schemas are rejected outright.
    """

    def __init__(self, route: str | None = None) -> None:
        self.route = route
        where = f" in route {route!r}" if route is not None else ""
        super().__init__(
            f"Schema validation{where} returned an awaitable; "
            "only synchronous schemas are supported."
        )


class ValidationError(WayfinderError, ValueError):
    """Params or search params failed their schema.

    ``issues`` holds the structured failures reported by the schema.
    ``prefix`` names the route and the parameter kind, e.g.
    ``Error in route "users" params``.
    """

    def __init__(
        self,
        issues: "Sequence[Issue]",
        prefix: str | None = None,
        route: str | None = None,
    ) -> None:
        self.issues = tuple(issues)
        self.prefix = prefix
        self.route = route
        super().__init__(self._format())

    def _format(self) -> str:
        details = "; ".join(str(issue) for issue in self.issues) or "Validation failed"
        if self.prefix:
            return f"{self.prefix}: {details}"
        return details
