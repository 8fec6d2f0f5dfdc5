"""Tests for links and routers — route-bound and global navigation."""

import pytest

from wayfinder.context import bind_location
from wayfinder.errors import InvalidBaseUrl, InvalidPath, ValidationError
from wayfinder.navigation import Navigation, RouterHandle
from wayfinder.query import QueryOptions
from wayfinder.routing import GlobalRouter, Route, RouteBuilder, RouteRouter, route_builder
from wayfinder.schema import RulesSchema, digits, required
from wayfinder.testing import RecordingRouter, RouterCall


@pytest.fixture
def builder() -> RouteBuilder:
    return route_builder(additional_base_urls={"API": "https://api.example.com"})


@pytest.fixture
def users(builder: RouteBuilder) -> Route:
    return builder.create_route(
        name="users",
        fn=lambda p: f"/users/{p['id']}",
        params_schema=RulesSchema({"id": [required, digits]}),
        search_params_schema=RulesSchema({"tab": []}),
    )


class TestRecordingRouter:
    def test_is_router_handle(self) -> None:
        assert isinstance(RecordingRouter(), RouterHandle)

    def test_records_calls(self) -> None:
        router = RecordingRouter()
        router.push("/a", {"scroll": False})
        router.prefetch("/b")
        assert router.calls == [RouterCall("push", "/a", {"scroll": False}), RouterCall("prefetch", "/b")]
        assert router.last.method == "prefetch"


class TestRouteLink:
    def test_default_renders_anchor(self, users: Route) -> None:
        html = str(users.link({"id": "42"}, "Profile", search_params={"tab": "posts"}, cls="nav"))
        assert html == '<a href="/users/42?tab=posts" class="nav">Profile</a>'

    def test_base_and_hash(self, users: Route) -> None:
        html = str(users.link({"id": "42"}, "Profile", base_url="API", hash="bio"))
        assert 'href="https://api.example.com/users/42#bio"' in html

    def test_invalid_params_raise_during_render(self, users: Route) -> None:
        with pytest.raises(ValidationError, match="users"):
            users.link({"id": "abc"}, "Profile")

    def test_custom_link_component(self) -> None:
        def link(href: str, children: object, **attrs: object) -> dict[str, object]:
            return {"href": href, "children": children, **attrs}

        builder = route_builder(navigation=Navigation(link=link))
        home = builder.create_route(name="home", fn=lambda _: "/", params_schema=RulesSchema({}))
        assert home.link({}, "Home", prefetch=False) == {"href": "/", "children": "Home", "prefetch": False}


class TestRouteRouter:
    def test_push_replace_prefetch(self, users: Route) -> None:
        router = RecordingRouter()
        route_router = users.use_router(lambda: router)
        assert isinstance(route_router, RouteRouter)

        route_router.push({"id": "1"}, search_params={"tab": "posts"}, navigation_options={"scroll": False})
        route_router.replace({"id": "2"}, hash="top")
        route_router.prefetch({"id": "3"}, base_url="API", prefetch_options={"kind": "full"})

        assert router.calls == [
            RouterCall("push", "/users/1?tab=posts", {"scroll": False}),
            RouterCall("replace", "/users/2#top"),
            RouterCall("prefetch", "https://api.example.com/users/3", {"kind": "full"}),
        ]

    def test_replace_validates_params(self, users: Route) -> None:
        router = RecordingRouter()
        with pytest.raises(ValidationError):
            users.use_router(lambda: router).replace({"id": "x"})
        assert router.calls == []

    def test_default_hook_reads_bound_router(self, users: Route) -> None:
        router = RecordingRouter()
        with bind_location(router=router):
            users.use_router().push({"id": "42"})
        assert router.hrefs == ["/users/42"]

    def test_default_hook_outside_location(self, users: Route) -> None:
        with pytest.raises(LookupError):
            users.use_router()


class TestGlobalHref:
    def test_raw_path(self, builder: RouteBuilder) -> None:
        assert builder.href("/about") == "/about"

    def test_search_params_unvalidated(self, builder: RouteBuilder) -> None:
        assert builder.href("/search", search_params={"q": "rust", "page": 2}) == "/search?page=2&q=rust"

    def test_alias_and_hash(self, builder: RouteBuilder) -> None:
        assert builder.href("/v1/status", base_url="API", hash="db") == "https://api.example.com/v1/status#db"

    def test_literal_base(self, builder: RouteBuilder) -> None:
        assert builder.href("/docs", base_url="https://docs.example.com/") == "https://docs.example.com/docs"

    def test_options(self, builder: RouteBuilder) -> None:
        result = builder.href(
            "/s",
            search_params={"t": ["a", "b"]},
            search_params_options=QueryOptions(array_format="index"),
        )
        assert result == "/s?t[0]=a&t[1]=b"

    def test_empty_search_params_add_nothing(self, builder: RouteBuilder) -> None:
        assert builder.href("/search", search_params={}) == "/search"

    def test_search_params_must_be_an_object(self, builder: RouteBuilder) -> None:
        with pytest.raises(ValidationError, match="Error in search params: Expected an object, received str"):
            builder.href("/search", search_params="q=rust")

    def test_invalid_path(self, builder: RouteBuilder) -> None:
        with pytest.raises(InvalidPath):
            builder.href("about")

    def test_invalid_base(self, builder: RouteBuilder) -> None:
        with pytest.raises(InvalidBaseUrl):
            builder.href("/about", base_url="not a base")


class TestGlobalLink:
    def test_renders_anchor(self, builder: RouteBuilder) -> None:
        html = str(builder.link("/about", "About us", search_params={"ref": "nav"}))
        assert html == '<a href="/about?ref=nav">About us</a>'


class TestGlobalRouter:
    def test_delegates(self, builder: RouteBuilder) -> None:
        router = RecordingRouter()
        global_router = builder.use_router(lambda: router)
        assert isinstance(global_router, GlobalRouter)

        global_router.push("/a", search_params={"x": "1"})
        global_router.replace("/b", base_url="API", navigation_options={"scroll": True})
        global_router.prefetch("/c", hash="h")

        assert router.calls == [
            RouterCall("push", "/a?x=1"),
            RouterCall("replace", "https://api.example.com/b", {"scroll": True}),
            RouterCall("prefetch", "/c#h"),
        ]
