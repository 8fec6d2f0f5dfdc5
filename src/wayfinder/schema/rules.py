"""Parameter checks for ``RulesSchema``.

Route and query parameters arrive as strings. A rule looks at one of
them and returns an error message, or ``None`` if the value is fine::

    from wayfinder.schema import RulesSchema, digits, required, segment

    params = RulesSchema({"id": [required, digits], "slug": [segment]})

Any callable of shape ``(str) -> str | None`` is a rule. The built-in
ones are ``Check`` objects, which also tell ``RulesSchema`` whether they
test for presence.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from wayfinder.urls import is_absolute_url

type Rule = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class Check:
    """A predicate over one parameter value, with its failure message.

    A ``presence`` check is also reported for parameters that are absent,
    and once it fails the remaining rules of that field are skipped.
    """

    accepts: Callable[[str], bool]
    message: str
    presence: bool = False

    def __call__(self, value: str) -> str | None:
        return None if self.accepts(value) else self.message


def _fullmatch(regex: str, message: str) -> Check:
    compiled = re.compile(regex)
    return Check(lambda value: compiled.fullmatch(value) is not None, message)


required = Check(lambda value: value.strip() != "", "Required", presence=True)

# One path segment: no separators, nothing the URL parser would split on,
# and not a dot segment.
segment = Check(
    lambda value: value not in (".", "..") and re.fullmatch(r"[^/?#\s]+", value) is not None,
    "Must be a single path segment",
)

digits = _fullmatch(r"[0-9]+", "Must contain only digits")
slug = _fullmatch(r"[a-z0-9]+(?:-[a-z0-9]+)*", "Must be lowercase words joined by hyphens")
uuid = _fullmatch(r"[0-9a-fA-F]{8}(?:-[0-9a-fA-F]{4}){3}-[0-9a-fA-F]{12}", "Must be a UUID")
email = _fullmatch(r"[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+", "Must be an email address")
url = Check(is_absolute_url, "Must be an absolute URL")


def length(*, at_least: int = 0, at_most: int | None = None) -> Check:
    """Bound the number of characters, inclusive on both ends."""
    if at_most is None:
        return Check(lambda value: len(value) >= at_least, f"Must be at least {at_least} characters long")
    return Check(
        lambda value: at_least <= len(value) <= at_most,
        f"Must be between {at_least} and {at_most} characters long",
    )


def pattern(regex: str, message: str | None = None) -> Check:
    """The whole value must match *regex*."""
    return _fullmatch(regex, message or f"Must match {regex}")


def choice(*options: str) -> Check:
    """The value must be one of *options*, compared exactly."""
    allowed = frozenset(options)
    listed = " | ".join(repr(option) for option in options)
    return Check(lambda value: value in allowed, f"Expected {listed}")
