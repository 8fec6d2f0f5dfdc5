"""The standard schema contract.

Any object with a ``validate`` method returning ``Success`` or
``Failure`` can back a route. Wayfinder ships adapters for its own
rule lists and for pydantic, but never depends on a concrete library
at this seam.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Issue:
    """A single validation failure.

    ``path`` locates the failing value inside the input, e.g.
    ``("user", "id")`` or ``("tags", 0)``. Empty for the input itself.
    """

    message: str
    path: tuple[str | int, ...] = ()

    @property
    def location(self) -> str:
        """Dotted form of ``path`` (``"user.id"``)."""
        return ".".join(str(part) for part in self.path)

    def __str__(self) -> str:
        if self.path:
            return f'{self.message} at "{self.location}"'
        return self.message


@dataclass(frozen=True, slots=True)
class Success:
    """Validation passed; ``value`` is the schema's output."""

    value: Any


@dataclass(frozen=True, slots=True)
class Failure:
    """Validation failed with one or more issues."""

    issues: tuple[Issue, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, issues: Sequence[Issue]) -> "Failure":
        return cls(issues=tuple(issues))


type ValidationOutcome = Success | Failure


@runtime_checkable
class StandardSchema(Protocol):
    """Structural validation capability.

    ``validate`` must be synchronous. Returning an awaitable is treated
    as a programming error by the parse adapter.
    """

    def validate(self, value: Any) -> ValidationOutcome: ...
