"""Host framework capabilities consumed by routes.

Wayfinder never talks to a router or renderer directly. It calls the
four hooks bundled in ``Navigation``; the defaults read the location
bound in ``wayfinder.context`` and render plain ``<a>`` elements.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from wayfinder.context import current_router, use_live_params, use_live_search_params
from wayfinder.templating import render_link


@runtime_checkable
class RouterHandle(Protocol):
    """Imperative navigation primitives supplied by the host."""

    def push(self, href: str, options: Any = None) -> Any: ...
    def replace(self, href: str, options: Any = None) -> Any: ...
    def prefetch(self, href: str, options: Any = None) -> Any: ...


type ParamsHook = Callable[[], Mapping[str, Any]]
type SearchParamsHook = Callable[[], Any]
type LinkComponent = Callable[..., Any]
type RouterHook = Callable[[], RouterHandle]


@dataclass(frozen=True, slots=True)
class Navigation:
    """The hooks a route builder calls into. Immutable.

    Override any of them to bind another host::

        Navigation(
            use_params=lambda: request.path_params,
            use_search_params=lambda: request.query,
            router=lambda: htmx_router,
        )

    ``link`` is called as ``link(href, children, **attrs)``.
    """

    use_params: ParamsHook = use_live_params
    use_search_params: SearchParamsHook = use_live_search_params
    link: LinkComponent = render_link
    router: RouterHook = current_router
