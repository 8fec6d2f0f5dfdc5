"""Link rendering and kida integration.

``render_link`` is the default link primitive: it turns an href and
children into a safe ``<a>`` element. ``register_routes`` exposes a
builder's routes to kida templates::

    from kida import Environment
    from wayfinder.templating import register_routes

    env = Environment(autoescape=True)
    register_routes(env, builder)

    # In a template
    <a href="{{ route_url("users", params=user) }}">Profile</a>
    {{ route_link("workspace", params=ws, children="Open", search_params={"tab": "overview"}) }}
"""

import html
from typing import TYPE_CHECKING, Any

from kida.template import Markup

if TYPE_CHECKING:
    from kida import Environment

    from wayfinder.routing.builder import RouteBuilder


def _attr_name(name: str) -> str:
    if name == "cls":
        return "class"
    return name.rstrip("_").replace("_", "-")


def render_link(href: str, children: Any = "", **attrs: Any) -> Markup:
    """Render an ``<a>`` element pointing at *href*.

    Attribute values are escaped. Children are escaped unless they are
    markup already (anything with ``__html__``). ``None`` and ``False``
    attributes are omitted, ``True`` renders as a bare attribute.

    Example:
        render_link("/users/42", "Profile", cls="nav", hx_boost=True)
        → <a href="/users/42" class="nav" hx-boost>Profile</a>

    """
    parts = [f'<a href="{html.escape(href, quote=True)}"']
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {_attr_name(name)}")
        else:
            parts.append(f' {_attr_name(name)}="{html.escape(str(value), quote=True)}"')
    parts.append(">")

    if hasattr(children, "__html__"):
        parts.append(children.__html__())
    else:
        parts.append(html.escape(str(children)))
    parts.append("</a>")
    return Markup("".join(parts))


def register_routes(env: "Environment", builder: "RouteBuilder") -> None:
    """Add ``route_url``, ``route_link`` and ``href`` globals to *env*.

    Templates look routes up by name; an unknown name raises
    ``UnknownRouteName`` during render.
    """

    def route_url(name: str, params: Any = None, **options: Any) -> str:
        return builder.get_route(name).navigate({} if params is None else params, **options)

    def route_link(name: str, params: Any = None, children: Any = "", **options: Any) -> Any:
        return builder.get_route(name).link({} if params is None else params, children, **options)

    env.add_global("route_url", route_url)
    env.add_global("route_link", route_link)
    env.add_global("href", builder.href)
