"""RouteDefinition, Route and RouteRouter frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wayfinder.config import RouteBuilderConfig
from wayfinder.navigation import Navigation, RouterHandle, RouterHook
from wayfinder.query import QueryOptions, search_params_to_dict, stringify
from wayfinder.routing.resolve import compose_href, full_route
from wayfinder.schema.adapters import QUERY_OBJECT
from wayfinder.schema.parse import parse, safe_parse
from wayfinder.schema.protocol import StandardSchema


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A frozen route declaration.

    ``fn`` receives the validated params and returns the pathname.
    Without a ``search_params_schema`` search params pass through
    unvalidated. ``base_url`` is a configured key or a literal URL.
    """

    name: str
    fn: Callable[[Any], str]
    params_schema: StandardSchema
    search_params_schema: StandardSchema | None = None
    base_url: str | None = None

    @property
    def params_prefix(self) -> str:
        return f'Error in route "{self.name}" params'

    @property
    def search_params_prefix(self) -> str:
        return f'Error in route "{self.name}" search params'


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route and everything derived from it.

    Created by ``RouteBuilder.create_route``; holds no mutable state.

    Usage::

        users = builder.create_route(
            name="users",
            fn=lambda p: f"/users/{p['id']}",
            params_schema=RulesSchema({"id": [required]}),
            base_url="API",
        )
        users.navigate({"id": "42"})  # "https://api.example.com/users/42"
    """

    definition: RouteDefinition
    config: RouteBuilderConfig
    navigation: Navigation

    @property
    def name(self) -> str:
        return self.definition.name

    # -- Validation --

    def parse_params(self, value: Any, safe: bool = False) -> Any:
        """Validate params obtained outside live navigation.

        Returns the validated params, or a ``SafeResult`` when *safe*.
        """
        d = self.definition
        if safe:
            return safe_parse(d.params_schema, value, prefix=d.params_prefix, route=d.name)
        return parse(d.params_schema, value, prefix=d.params_prefix, route=d.name)

    def parse_search_params(self, value: Any, safe: bool = False) -> Any:
        """Validate search params obtained outside live navigation.

        Returns the validated search params, or a ``SafeResult`` when *safe*.
        """
        d = self.definition
        schema = d.search_params_schema or QUERY_OBJECT
        if safe:
            return safe_parse(schema, value, prefix=d.search_params_prefix, route=d.name)
        return parse(schema, value, prefix=d.search_params_prefix, route=d.name)

    # -- Building hrefs --

    def navigate(
        self,
        params: Any,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
    ) -> str:
        """Build the href for this route.

        Raises ``ValidationError`` (naming the route) for invalid params
        or search params, ``InvalidPath`` if ``fn`` returns a malformed
        pathname, ``InvalidBaseUrl`` for an unusable base.

        Example::

            workspace.navigate({"id": "1"}, search_params={"tab": "overview"})
            -> "/workspace/1?tab=overview"
        """
        d = self.definition
        url = full_route(
            d.fn(self.parse_params(params)),
            base_url,
            d.base_url,
            self.config,
            route=d.name,
        )
        query = ""
        if search_params is not None:
            query = stringify(
                self.parse_search_params(search_params),
                search_params_options or self.config.search_params_options,
            )
        return compose_href(url, query, hash)

    href = navigate

    def link(
        self,
        params: Any,
        children: Any = "",
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        **attrs: Any,
    ) -> Any:
        """Render a link to this route with the host's link primitive.

        The href is built exactly as ``navigate`` builds it, so invalid
        params raise during render.
        """
        href = self.navigate(
            params,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.navigation.link(href, children, **attrs)

    # -- Live parameters --

    def use_params(self, *, safe: bool = False) -> Any:
        """Validate the path params of the current location."""
        return self.parse_params(self.navigation.use_params(), safe=safe)

    def use_search_params(self, *, safe: bool = False) -> Any:
        """Validate the query params of the current location."""
        raw = search_params_to_dict(self.navigation.use_search_params())
        return self.parse_search_params(raw, safe=safe)

    def use_router(self, router_hook: RouterHook | None = None) -> "RouteRouter":
        """Bind the host's router handle to this route.

        *router_hook* defaults to the builder's ``Navigation.router``.
        """
        hook = router_hook or self.navigation.router
        return RouteRouter(route=self, handle=hook())


@dataclass(frozen=True, slots=True)
class RouteRouter:
    """Imperative navigation to one route, validated by its schemas."""

    route: Route
    handle: RouterHandle

    def push(
        self,
        params: Any,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        navigation_options: Any = None,
    ) -> Any:
        """Push a new history entry for the route."""
        href = self.route.navigate(
            params,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.handle.push(href, navigation_options)

    def replace(
        self,
        params: Any,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        navigation_options: Any = None,
    ) -> Any:
        """Replace the current history entry with the route."""
        href = self.route.navigate(
            params,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.handle.replace(href, navigation_options)

    def prefetch(
        self,
        params: Any,
        *,
        search_params: Any = None,
        search_params_options: QueryOptions | None = None,
        base_url: str | None = None,
        hash: str | None = None,
        prefetch_options: Any = None,
    ) -> Any:
        """Ask the host to prefetch the route."""
        href = self.route.navigate(
            params,
            search_params=search_params,
            search_params_options=search_params_options,
            base_url=base_url,
            hash=hash,
        )
        return self.handle.prefetch(href, prefetch_options)
