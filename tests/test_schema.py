"""Tests for wayfinder.schema — rules, adapters, and the parse adapter."""

import pytest
from pydantic import BaseModel, ConfigDict

from wayfinder.errors import AsyncValidationUnsupported, ValidationError
from wayfinder.schema import (
    QUERY_OBJECT,
    Check,
    Failure,
    Issue,
    PydanticSchema,
    RulesSchema,
    SafeResult,
    StandardSchema,
    Success,
    choice,
    digits,
    email,
    length,
    parse,
    pattern,
    required,
    safe_parse,
    segment,
    slug,
    url,
    uuid,
)

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestRules:
    def test_required(self) -> None:
        assert required("x") is None
        assert required("") == "Required"
        assert required("   ") == "Required"
        assert required.presence is True

    def test_segment(self) -> None:
        assert segment("report-2024.pdf") is None
        assert segment("a/b") == "Must be a single path segment"
        assert segment("..") is not None
        assert segment("a b") is not None
        assert segment("a?b") is not None

    def test_length(self) -> None:
        assert length(at_most=3)("abc") is None
        assert length(at_most=3)("abcd") == "Must be between 0 and 3 characters long"
        assert length(at_least=2)("a") == "Must be at least 2 characters long"
        assert length(at_least=2, at_most=4)("abc") is None

    def test_digits(self) -> None:
        assert digits("42") is None
        assert digits("4.2") == "Must contain only digits"
        assert digits("-1") is not None
        assert digits("٤٢") is not None

    def test_slug(self) -> None:
        assert slug("my-post-1") is None
        assert slug("My Post") is not None
        assert slug("trailing-") is not None

    def test_uuid(self) -> None:
        assert uuid("123e4567-e89b-12d3-a456-426614174000") is None
        assert uuid("not-a-uuid") == "Must be a UUID"
        assert uuid("123e4567-e89b-12d3-a456-426614174000x") is not None

    def test_email(self) -> None:
        assert email("ada@example.com") is None
        assert email("ada@localhost") == "Must be an email address"
        assert email("ada example.com") is not None
        assert email("a@b@example.com") is not None

    def test_url(self) -> None:
        assert url("https://example.com/cb") is None
        assert url("/relative") == "Must be an absolute URL"
        assert url("https://example.com:99999") is not None

    def test_pattern_is_anchored(self) -> None:
        rule = pattern(r"v\d+", "Must be a version")
        assert rule("v2") is None
        assert rule("v2-beta") == "Must be a version"
        assert pattern(r"\d+")("x") == r"Must match \d+"

    def test_choice(self) -> None:
        rule = choice("list", "grid")
        assert rule("grid") is None
        assert rule("table") == "Expected 'list' | 'grid'"

    def test_custom_check(self) -> None:
        even = Check(lambda value: value.isdigit() and int(value) % 2 == 0, "Must be even")
        assert even("4") is None
        assert even("3") == "Must be even"
        assert even.presence is False


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


class TestRulesSchema:
    def test_valid(self) -> None:
        schema = RulesSchema({"id": [required, digits]})
        assert schema.validate({"id": "42"}) == Success({"id": "42"})

    def test_missing_required(self) -> None:
        outcome = RulesSchema({"id": [required]}).validate({})
        assert outcome == Failure((Issue("Required", ("id",)),))

    def test_optional_field_omitted(self) -> None:
        outcome = RulesSchema({"tab": [choice("a", "b")]}).validate({})
        assert outcome == Success({})

    def test_non_string_rejected(self) -> None:
        outcome = RulesSchema({"id": [required]}).validate({"id": 124})
        assert isinstance(outcome, Failure)
        assert outcome.issues[0].path == ("id",)
        assert "Must be a string" in outcome.issues[0].message

    def test_required_failure_stops_other_rules(self) -> None:
        outcome = RulesSchema({"name": [required, length(at_least=3)]}).validate({"name": ""})
        assert isinstance(outcome, Failure)
        assert [i.message for i in outcome.issues] == ["Required"]

    def test_collects_all_failures(self) -> None:
        outcome = RulesSchema({"name": [length(at_least=5), slug]}).validate({"name": "A B"})
        assert isinstance(outcome, Failure)
        assert len(outcome.issues) == 2

    def test_strict_rejects_unknown_keys(self) -> None:
        outcome = RulesSchema({}, strict=True).validate({"extra": "1"})
        assert outcome == Failure((Issue("Unrecognized key", ("extra",)),))

    def test_lenient_drops_unknown_keys(self) -> None:
        assert RulesSchema({}).validate({"extra": "1"}) == Success({})

    def test_custom_presence_check(self) -> None:
        present = Check(lambda value: value != "-", "Pick a workspace", presence=True)
        schema = RulesSchema({"workspace": [present, digits]})
        assert schema.validate({}) == Failure((Issue("Pick a workspace", ("workspace",)),))
        assert schema.validate({"workspace": "-"}) == Failure((Issue("Pick a workspace", ("workspace",)),))

    def test_plain_callable_rules(self) -> None:
        def no_spaces(value: str) -> str | None:
            return "No spaces" if " " in value else None

        schema = RulesSchema({"q": [no_spaces]})
        assert schema.validate({}) == Success({})
        assert schema.validate({"q": "a b"}) == Failure((Issue("No spaces", ("q",)),))

    def test_non_mapping_input(self) -> None:
        outcome = RulesSchema({}).validate("nope")
        assert isinstance(outcome, Failure)
        assert outcome.issues[0].path == ()

    def test_satisfies_protocol(self) -> None:
        assert isinstance(RulesSchema({}), StandardSchema)


class _User(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    page: int = 1


class TestPydanticSchema:
    def test_valid_returns_model(self) -> None:
        outcome = PydanticSchema(_User).validate({"id": "42"})
        assert isinstance(outcome, Success)
        assert outcome.value == _User(id="42")

    def test_issue_paths_from_loc(self) -> None:
        outcome = PydanticSchema(_User).validate({})
        assert isinstance(outcome, Failure)
        assert outcome.issues[0].path == ("id",)

    def test_non_string_rejected(self) -> None:
        outcome = PydanticSchema(_User).validate({"id": 124})
        assert isinstance(outcome, Failure)

    def test_plain_types(self) -> None:
        outcome = PydanticSchema(dict[str, int]).validate({"a": "1"})
        assert outcome == Success({"a": 1})


class TestQueryObjectSchema:
    def test_mapping_passes_through(self) -> None:
        value = {"anything": object()}
        assert QUERY_OBJECT.validate(value).value is value

    def test_model_passes_through(self) -> None:
        user = _User(id="1")
        assert QUERY_OBJECT.validate(user) == Success(user)

    @pytest.mark.parametrize("value", ["tab=1", ["tab", "1"], 3])
    def test_rejects_non_objects(self, value: object) -> None:
        outcome = QUERY_OBJECT.validate(value)
        assert isinstance(outcome, Failure)
        assert outcome.issues[0].message == f"Expected an object, received {type(value).__name__}"


# ---------------------------------------------------------------------------
# Parse adapter
# ---------------------------------------------------------------------------


class _AsyncSchema:
    async def _check(self, value: object) -> Success:
        return Success(value)

    def validate(self, value: object):  # type: ignore[no-untyped-def]
        return self._check(value)


class TestIssue:
    def test_str_with_path(self) -> None:
        assert str(Issue("Required", ("user", "id"))) == 'Required at "user.id"'

    def test_str_without_path(self) -> None:
        assert str(Issue("Required")) == "Required"


class TestParse:
    def test_returns_output(self) -> None:
        assert parse(RulesSchema({"id": [required]}), {"id": "1"}) == {"id": "1"}

    def test_raises_with_prefix(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse(
                RulesSchema({"id": [required]}),
                {},
                prefix='Error in route "users" params',
                route="users",
            )
        err = exc_info.value
        assert str(err) == 'Error in route "users" params: Required at "id"'
        assert err.route == "users"
        assert err.issues == (Issue("Required", ("id",)),)

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse(RulesSchema({"id": [required]}), {})

    def test_async_schema_rejected(self) -> None:
        with pytest.raises(AsyncValidationUnsupported, match="users"):
            parse(_AsyncSchema(), {}, route="users")


class TestSafeParse:
    def test_success(self) -> None:
        result = safe_parse(RulesSchema({"id": [required]}), {"id": "1"})
        assert result == SafeResult(success=True, data={"id": "1"})
        assert result

    def test_failure(self) -> None:
        result = safe_parse(RulesSchema({"id": [required]}), {}, prefix="p")
        assert not result
        assert result.success is False
        assert result.data is None
        assert isinstance(result.error, ValidationError)
        assert str(result.error).startswith("p: ")

    def test_async_schema_still_raises(self) -> None:
        with pytest.raises(AsyncValidationUnsupported):
            safe_parse(_AsyncSchema(), {})

    def test_frozen(self) -> None:
        result = SafeResult.ok(1)
        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]
