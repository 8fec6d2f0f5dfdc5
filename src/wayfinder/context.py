"""Request-scoped location via ContextVar.

Provides:
- ``location_var``: The current ``Location`` for this task/thread.
- ``bind_location``: Set it for the duration of a request or render.
- ``use_live_params`` / ``use_live_search_params`` / ``current_router``:
  the default host hooks routes read from.

The host framework (or its middleware) binds a location before
dispatching. Reading it outside one raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from wayfinder.query import SearchParams

if TYPE_CHECKING:
    from wayfinder.navigation import RouterHandle


@dataclass(frozen=True, slots=True)
class Location:
    """What the host router knows about the current request.

    ``path_params`` are the matched path parameters (a catch-all
    parameter may be a list of segments). ``search_params`` is the
    parsed query string. ``router`` is the imperative handle used by
    ``use_router`` when no explicit hook is given.
    """

    path_params: Mapping[str, str | list[str]] = field(default_factory=dict)
    search_params: SearchParams = field(default_factory=SearchParams)
    router: "RouterHandle | None" = None


location_var: ContextVar[Location] = ContextVar("wayfinder_location")
"""The current location. Set by the host before dispatch."""


def get_location() -> Location:
    """Return the current location.

    Raises ``LookupError`` if called outside a bound location.
    """
    return location_var.get()


@contextmanager
def bind_location(
    path_params: Mapping[str, str | list[str]] | None = None,
    search_params: SearchParams | bytes | str = "",
    router: "RouterHandle | None" = None,
) -> Iterator[Location]:
    """Bind a location for the duration of the ``with`` block.

    Usage::

        with bind_location({"id": "42"}, b"tab=overview"):
            route.use_params()        # {"id": "42"}
            route.use_search_params() # {"tab": "overview"}
    """
    if not isinstance(search_params, SearchParams):
        search_params = SearchParams(search_params)
    location = Location(
        path_params=MappingProxyType(dict(path_params or {})),
        search_params=search_params,
        router=router,
    )
    token = location_var.set(location)
    try:
        yield location
    finally:
        location_var.reset(token)


# -- Default host hooks --


def use_live_params() -> dict[str, Any]:
    """Path parameters of the current location."""
    return dict(get_location().path_params)


def use_live_search_params() -> SearchParams:
    """Query parameters of the current location."""
    return get_location().search_params


def current_router() -> "RouterHandle":
    """The router handle bound to the current location.

    Raises ``LookupError`` if the location carries no router.
    """
    router = get_location().router
    if router is None:
        msg = "No router handle is bound to the current location"
        raise LookupError(msg)
    return router
