"""Route builder — the registry of named routes and the global façade.

Routes are registered during setup and looked up by name afterwards::

    builder = route_builder(additional_base_urls={"API": "https://api.example.com"})

    users = builder.create_route(
        name="users",
        fn=lambda p: f"/users/{p['id']}",
        params_schema=RulesSchema({"id": [required]}),
        base_url="API",
    )

    users.navigate({"id": "42"})           # "https://api.example.com/users/42"
    builder.href("/about", hash="team")    # "/about#team"
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from wayfinder.config import RouteBuilderConfig
from wayfinder.errors import DuplicateRouteName, UnknownRouteName
from wayfinder.navigation import Navigation, RouterHandle, RouterHook
from wayfinder.query import QueryOptions, stringify
from wayfinder.routing.resolve import compose_href, full_route
from wayfinder.routing.route import Route, RouteDefinition
from wayfinder.schema.adapters import QUERY_OBJECT
from wayfinder.schema.parse import parse
from wayfinder.schema.protocol import StandardSchema

logger = logging.getLogger("wayfinder.routing")


class RouteBuilder:
    """Registry of named routes sharing one configuration.

    Each builder is independent; tests can create as many as they like.
    Names are unique per builder and routes are never removed.
    """

    __slots__ = ("_config", "_navigation", "_routes")

    def __init__(
        self,
        config: RouteBuilderConfig | None = None,
        navigation: Navigation | None = None,
    ) -> None:
        self._config = config or RouteBuilderConfig()
        self._navigation = navigation or Navigation()
        self._routes: dict[str, Route] = {}

    @property
    def config(self) -> RouteBuilderConfig:
        return self._config

    @property
    def navigation(self) -> Navigation:
        return self._navigation

    @property
    def routes(self) -> Mapping[str, Route]:
        """Read-only view of the registered routes, keyed by name."""
        return MappingProxyType(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteBuilder(routes={list(self._routes)!r})"

    def get_route(self, name: str) -> Route:
        """Return the route registered as *name*.

        Raises ``UnknownRouteName`` if there is none.
        """
        try:
            return self._routes[name]
        except KeyError:
            raise UnknownRouteName(name) from None

    def create_route(
        self,
        name: str,
        fn: Callable[[Any], str],
        params_schema: StandardSchema,
        search_params_schema: StandardSchema | None = None,
        base_url: str | None = None,
    ) -> Route:
        """Declare and register a route.

        Raises ``DuplicateRouteName`` if *name* is taken on this builder.
        """
        if name in self._routes:
            raise DuplicateRouteName(name)

        route = Route(
            definition=RouteDefinition(
                name=name,
                fn=fn,
                params_schema=params_schema,
                search_params_schema=search_params_schema,
                base_url=base_url,
            ),
            config=self._config,
            navigation=self._navigation,
        )
        self._routes[name] = route
        logger.debug("Registered route %r (base_url=%r)", name, base_url)
        return route

    # -- Global façade: raw paths, no params schema --

    def href(
        self,
        path: str,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
    ) -> str:
        """Build an href for a path that is not a registered route.

        The path must still be a valid pathname (``InvalidPath``).
        Search params are serialized as given, but must be a mapping or a
        model (``ValidationError`` otherwise).
        """
        url = full_route(path, base_url, None, self._config)
        query = ""
        if search_params is not None:
            query = stringify(
                parse(QUERY_OBJECT, search_params, prefix="Error in search params"),
                search_params_options or self._config.search_params_options,
            )
        return compose_href(url, query, hash)

    def link(
        self,
        path: str,
        children: Any = "",
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        **attrs: Any,
    ) -> Any:
        """Render a link to a raw path with the host's link primitive."""
        href = self.href(
            path,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self._navigation.link(href, children, **attrs)

    def use_router(self, router_hook: RouterHook | None = None) -> "GlobalRouter":
        """Bind the host's router handle for raw-path navigation."""
        hook = router_hook or self._navigation.router
        return GlobalRouter(builder=self, handle=hook())


@dataclass(frozen=True, slots=True)
class GlobalRouter:
    """Imperative navigation to raw paths through the builder's bases."""

    builder: RouteBuilder
    handle: RouterHandle

    def push(
        self,
        path: str,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        navigation_options: Any = None,
    ) -> Any:
        href = self.builder.href(
            path,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.handle.push(href, navigation_options)

    def replace(
        self,
        path: str,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        navigation_options: Any = None,
    ) -> Any:
        href = self.builder.href(
            path,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.handle.replace(href, navigation_options)

    def prefetch(
        self,
        path: str,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        prefetch_options: Any = None,
    ) -> Any:
        href = self.builder.href(
            path,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.handle.prefetch(href, prefetch_options)


def route_builder(
    *,
    additional_base_urls: Mapping[str, str] | None = None,
    default_base_url: str = "/",
    search_params_options: QueryOptions | None = None,
    navigation: Navigation | None = None,
) -> RouteBuilder:
    """Create a ``RouteBuilder`` from keyword configuration.

    Shorthand for ``RouteBuilder(RouteBuilderConfig(...), navigation)``.
    """
    config = RouteBuilderConfig(
        additional_base_urls=dict(additional_base_urls or {}),
        default_base_url=default_base_url,
        search_params_options=search_params_options or QueryOptions(),
    )
    return RouteBuilder(config, navigation)
