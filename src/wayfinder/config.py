"""Route builder configuration.

RouteBuilderConfig is a frozen dataclass — immutable after creation,
validated once, shared read-only by every route on the builder.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from wayfinder.query import QueryOptions
from wayfinder.urls import parse_base_url


@dataclass(frozen=True, slots=True)
class RouteBuilderConfig:
    """Route builder configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouteBuilderConfig(
            additional_base_urls={"API": "https://api.example.com"},
            default_base_url="/app",
        )

    Every base URL is validated here; an invalid one raises
    ``InvalidBaseUrl`` naming its key.
    """

    # Named base URLs routes and callers can refer to by key
    additional_base_urls: Mapping[str, str] = field(default_factory=dict)

    # Used when neither the call nor the route names a base
    default_base_url: str = "/"

    # Query string formatting applied when a call passes no options
    search_params_options: QueryOptions = field(default_factory=QueryOptions)

    # Validated copy of additional_base_urls
    resolved_base_urls: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        parse_base_url(self.default_base_url, key="default_base_url")
        resolved = {key: parse_base_url(value, key=key) for key, value in self.additional_base_urls.items()}
        object.__setattr__(self, "resolved_base_urls", MappingProxyType(resolved))
