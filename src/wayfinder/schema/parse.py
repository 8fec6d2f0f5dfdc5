"""Schema parse adapter — throwing and safe variants over ``validate``.

Usage::

    from wayfinder.schema.parse import parse, safe_parse

    user = parse(schema, {"id": "42"}, prefix='Error in route "users" params')

    result = safe_parse(schema, {"id": 42})
    if not result:
        print(result.error)
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any

from wayfinder.errors import AsyncValidationUnsupported, ValidationError
from wayfinder.schema.protocol import Failure, StandardSchema, Success

logger = logging.getLogger("wayfinder.schema")


@dataclass(frozen=True, slots=True)
class SafeResult[T]:
    """The outcome of a ``safe`` parse.

    ``success`` is True when validation passed and ``data`` holds the
    validated value. Otherwise ``error`` holds the ``ValidationError``.
    The result is falsy on failure, so you can write::

        result = route.parse_params(value, safe=True)
        if not result:
            return Template("404.html", error=result.error)
    """

    success: bool
    data: T | None = None
    error: ValidationError | None = None

    @classmethod
    def ok(cls, data: T) -> "SafeResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ValidationError) -> "SafeResult[T]":
        return cls(success=False, error=error)

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.success


def run_validate(schema: StandardSchema, value: Any, *, route: str | None = None) -> Success | Failure:
    """Call ``schema.validate`` and reject asynchronous outcomes.

    Raises ``AsyncValidationUnsupported`` if the schema returned an
    awaitable. A coroutine is closed first so it is never left pending.
    """
    outcome = schema.validate(value)
    if inspect.isawaitable(outcome):
        if inspect.iscoroutine(outcome):
            outcome.close()
        raise AsyncValidationUnsupported(route=route)
    return outcome


def parse(
    schema: StandardSchema,
    value: Any,
    *,
    prefix: str | None = None,
    route: str | None = None,
) -> Any:
    """Validate *value* and return the schema's output.

    Raises ``ValidationError`` carrying the schema's issues, with
    *prefix* prepended to the message.
    """
    outcome = run_validate(schema, value, route=route)
    if isinstance(outcome, Failure):
        raise ValidationError(outcome.issues, prefix=prefix, route=route)
    return outcome.value


def safe_parse(
    schema: StandardSchema,
    value: Any,
    *,
    prefix: str | None = None,
    route: str | None = None,
) -> SafeResult[Any]:
    """Validate *value* without raising on invalid data.

    Only validation failures become a failed ``SafeResult``;
    ``AsyncValidationUnsupported`` still propagates.
    """
    try:
        data = parse(schema, value, prefix=prefix, route=route)
    except ValidationError as exc:
        logger.debug("%s", exc)
        return SafeResult.fail(exc)
    return SafeResult.ok(data)
