"""Route parameter validation — a standard contract and its adapters.

Usage::

    from wayfinder.schema import RulesSchema, required, slug

    params = RulesSchema({"slug": [required, slug]})
    result = safe_parse(params, {"slug": "Hello World"})
    if not result:
        # result.error.issues == (Issue('Must be lowercase words ...', ('slug',)),)
        ...
"""

from wayfinder.schema.adapters import QUERY_OBJECT, PydanticSchema, QueryObjectSchema, RulesSchema
from wayfinder.schema.parse import SafeResult, parse, run_validate, safe_parse
from wayfinder.schema.protocol import Failure, Issue, StandardSchema, Success
from wayfinder.schema.rules import (
    Check,
    Rule,
    choice,
    digits,
    email,
    length,
    pattern,
    required,
    segment,
    slug,
    url,
    uuid,
)

__all__ = [
    "QUERY_OBJECT",
    "Check",
    "Failure",
    "Issue",
    "PydanticSchema",
    "QueryObjectSchema",
    "Rule",
    "RulesSchema",
    "SafeResult",
    "StandardSchema",
    "Success",
    "choice",
    "digits",
    "email",
    "length",
    "parse",
    "pattern",
    "required",
    "run_validate",
    "safe_parse",
    "segment",
    "slug",
    "url",
    "uuid",
]
