"""Query strings — immutable parsed parameters and serialization.

``SearchParams`` is what a host hands to wayfinder as the live query of
the current request. ``stringify`` is the other direction: a validated
mapping turned into the part of an href after ``?``.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable
from urllib.parse import parse_qs, quote

type ArrayFormat = Literal["none", "bracket", "index", "comma"]


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get_list(self, key: str) -> list[str]: ...


class SearchParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _raw: Raw query string.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes | str = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        query_string = query_string.removeprefix("?")
        object.__setattr__(self, "_raw", query_string)
        parsed = parse_qs(query_string, keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "SearchParams is immutable."
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SearchParams({self._raw!r})"

    def __str__(self) -> str:
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def to_dict(self) -> dict[str, str | list[str]]:
        """Collapse into a plain dict; repeated keys become lists."""
        return {key: values[0] if len(values) == 1 else list(values) for key, values in self._data.items()}


def search_params_to_dict(params: Any) -> dict[str, Any]:
    """Convert whatever a host exposes as live query params into a dict.

    Accepts ``None`` (empty), any ``MultiValueMapping`` (repeated keys
    become lists), a raw query string, or a plain mapping.
    """
    if params is None:
        return {}
    if isinstance(params, SearchParams):
        return params.to_dict()
    if isinstance(params, (str, bytes)):
        return SearchParams(params).to_dict()
    if isinstance(params, MultiValueMapping):
        result: dict[str, Any] = {}
        for key in params:
            values = params.get_list(key)
            result[key] = values if len(values) > 1 else params[key]
        return result
    return dict(params)


@dataclass(frozen=True, slots=True)
class QueryOptions:
    """How ``stringify`` formats a query string. Immutable.

    Defaults match the common browser-side formatter: keys sorted,
    ``None`` kept as a bare key, lists written as repeated keys::

        QueryOptions(array_format="bracket")  # tag[]=a&tag[]=b
    """

    sort: bool = True
    skip_null: bool = False
    skip_empty_string: bool = False
    array_format: ArrayFormat = "none"
    array_separator: str = ","


_DEFAULT_OPTIONS = QueryOptions()


def _encode(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return quote(str(value), safe="")


def _as_mapping(value: Any) -> Mapping[str, Any]:
    # Pydantic models and similar carry their own serialization.
    dump = getattr(value, "model_dump", None)
    if callable(dump):
        return dump(mode="json", exclude_unset=True)
    if isinstance(value, Mapping):
        return value
    msg = f"Cannot build a query string from {type(value).__name__}"
    raise TypeError(msg)


def _pairs(key: str, values: list[Any], options: QueryOptions) -> list[str]:
    k = _encode(key)
    kept = [
        v
        for v in values
        if not (options.skip_null and v is None) and not (options.skip_empty_string and v == "")
    ]
    if not kept:
        return []
    match options.array_format:
        case "bracket":
            return [f"{k}[]" if v is None else f"{k}[]={_encode(v)}" for v in kept]
        case "index":
            return [f"{k}[{i}]" if v is None else f"{k}[{i}]={_encode(v)}" for i, v in enumerate(kept)]
        case "comma":
            joined = options.array_separator.join("" if v is None else _encode(v) for v in kept)
            return [f"{k}={joined}"]
        case _:
            return [k if v is None else f"{k}={_encode(v)}" for v in kept]


def stringify(params: Any, options: QueryOptions | None = None) -> str:
    """Serialize *params* into a query string (without the leading ``?``).

    Example::

        stringify({"tab": "overview", "archived": 1})
        -> "archived=1&tab=overview"
        stringify({"tag": ["a", "b"]}, QueryOptions(array_format="comma"))
        -> "tag=a,b"
    """
    opts = options or _DEFAULT_OPTIONS
    mapping = _as_mapping(params)
    keys = sorted(mapping) if opts.sort else list(mapping)

    parts: list[str] = []
    for key in keys:
        value = mapping[key]
        if isinstance(value, (list, tuple)):
            parts.extend(_pairs(key, list(value), opts))
            continue
        if value is None:
            if not opts.skip_null:
                parts.append(_encode(key))
            continue
        if opts.skip_empty_string and value == "":
            continue
        parts.append(f"{_encode(key)}={_encode(value)}")
    return "&".join(parts)
