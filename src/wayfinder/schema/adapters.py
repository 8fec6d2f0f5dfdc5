"""Schema adapters — concrete validators behind the standard contract.

``RulesSchema`` validates string parameters against rule lists::

    from wayfinder.schema import RulesSchema, digits, required

    params = RulesSchema({"id": [required, digits]}, strict=True)

``PydanticSchema`` wraps a pydantic model, dataclass, ``TypedDict`` or any
type pydantic can validate::

    class Workspace(BaseModel):
        workspace_id: str

    params = PydanticSchema(Workspace)

``QueryObjectSchema`` passes mappings through unchanged. Search params
without a declared schema go through it.
"""

from collections.abc import Mapping
from typing import Any

import pydantic

from wayfinder.schema.protocol import Failure, Issue, Success
from wayfinder.schema.rules import Rule


class RulesSchema:
    """Validate a mapping of string values against per-field rule lists.

    Args:
        rules: Field name -> list of rules. Each rule returns an error
            message string on failure, or ``None`` on success.
        strict: Reject keys that have no rules.

    Fields with a presence rule such as ``required`` must be present and
    non-empty. Other fields may be absent and are then left out of the
    output.
    """

    __slots__ = ("rules", "strict")

    def __init__(self, rules: Mapping[str, list[Rule]], *, strict: bool = False) -> None:
        self.rules = {name: list(field_rules) for name, field_rules in rules.items()}
        self.strict = strict

    def __repr__(self) -> str:
        return f"RulesSchema(fields={sorted(self.rules)!r}, strict={self.strict})"

    def validate(self, value: Any) -> Success | Failure:
        if not isinstance(value, Mapping):
            return Failure.of([Issue(f"Expected an object, received {type(value).__name__}")])

        issues: list[Issue] = []
        cleaned: dict[str, str] = {}

        if self.strict:
            issues.extend(Issue("Unrecognized key", (key,)) for key in value if key not in self.rules)

        for field_name, field_rules in self.rules.items():
            if field_name not in value or value[field_name] is None:
                issues.extend(
                    Issue(rule.message, (field_name,)) for rule in field_rules if getattr(rule, "presence", False)
                )
                continue

            raw = value[field_name]
            if not isinstance(raw, str):
                issues.append(Issue(f"Must be a string, received {type(raw).__name__}", (field_name,)))
                continue

            field_issues: list[Issue] = []
            for rule in field_rules:
                error = rule(raw)
                if error is not None:
                    field_issues.append(Issue(error, (field_name,)))
                    if getattr(rule, "presence", False):
                        break

            if field_issues:
                issues.extend(field_issues)
            else:
                cleaned[field_name] = raw

        if issues:
            return Failure.of(issues)
        return Success(cleaned)


class PydanticSchema:
    """Validate with pydantic through a ``TypeAdapter``.

    The output is whatever pydantic produces: a model instance for a
    model, a dict for a ``TypedDict``, and so on.
    """

    __slots__ = ("adapter", "type_")

    def __init__(self, type_: Any) -> None:
        self.type_ = type_
        self.adapter: pydantic.TypeAdapter[Any] = pydantic.TypeAdapter(type_)

    def __repr__(self) -> str:
        return f"PydanticSchema({getattr(self.type_, '__name__', self.type_)!r})"

    def validate(self, value: Any) -> Success | Failure:
        try:
            return Success(self.adapter.validate_python(value))
        except pydantic.ValidationError as exc:
            return Failure.of([Issue(err["msg"], tuple(err["loc"])) for err in exc.errors()])


class QueryObjectSchema:
    """Pass-through for search params nobody declared a schema for.

    Any mapping, or any object with pydantic's ``model_dump``, comes back
    unchanged. Anything else cannot become a query string and fails.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "QueryObjectSchema()"

    def validate(self, value: Any) -> Success | Failure:
        if isinstance(value, Mapping) or callable(getattr(value, "model_dump", None)):
            return Success(value)
        return Failure.of([Issue(f"Expected an object, received {type(value).__name__}")])


QUERY_OBJECT = QueryObjectSchema()
