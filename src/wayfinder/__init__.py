"""Wayfinder — typed, schema-validated URLs and navigation for web apps.

Declare a route once, then build hrefs, render links, and read live
parameters through the same validation schema.

Basic usage::

    from wayfinder import RulesSchema, required, route_builder

    builder = route_builder(additional_base_urls={"API": "https://api.example.com"})

    users = builder.create_route(
        name="users",
        fn=lambda p: f"/users/{p['id']}",
        params_schema=RulesSchema({"id": [required]}),
        base_url="API",
    )

    users.navigate({"id": "42"})  # "https://api.example.com/users/42"

Inside a request, with the location bound by the host::

    params = users.use_params()
    result = users.use_search_params(safe=True)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AsyncValidationUnsupported",
    "ConfigurationError",
    "DuplicateRouteName",
    "InvalidBaseUrl",
    "InvalidPath",
    "Issue",
    "Navigation",
    "PydanticSchema",
    "QueryOptions",
    "Route",
    "RouteBuilder",
    "RouteBuilderConfig",
    "RulesSchema",
    "SafeResult",
    "UnknownRouteName",
    "ValidationError",
    "WayfinderError",
    "bind_location",
    "build_url",
    "required",
    "route_builder",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast while providing a clean top-level API.
    """
    if name in ("Route", "RouteBuilder", "route_builder"):
        from wayfinder import routing as _routing

        return getattr(_routing, name)

    if name == "RouteBuilderConfig":
        from wayfinder.config import RouteBuilderConfig

        return RouteBuilderConfig

    if name == "Navigation":
        from wayfinder.navigation import Navigation

        return Navigation

    if name == "bind_location":
        from wayfinder.context import bind_location

        return bind_location

    if name == "QueryOptions":
        from wayfinder.query import QueryOptions

        return QueryOptions

    if name == "build_url":
        from wayfinder.urls import build_url

        return build_url

    if name in ("Issue", "PydanticSchema", "RulesSchema", "SafeResult", "required"):
        from wayfinder import schema as _schema

        return getattr(_schema, name)

    if name in (
        "AsyncValidationUnsupported",
        "ConfigurationError",
        "DuplicateRouteName",
        "InvalidBaseUrl",
        "InvalidPath",
        "UnknownRouteName",
        "ValidationError",
        "WayfinderError",
    ):
        from wayfinder import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
