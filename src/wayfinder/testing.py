"""Test utilities for wayfinder applications.

``RecordingRouter`` stands in for the host's router handle and keeps
every call for assertions::

    from wayfinder.context import bind_location
    from wayfinder.testing import RecordingRouter

    router = RecordingRouter()
    with bind_location(router=router):
        users.use_router().push({"id": "42"})
    assert router.hrefs == ["/users/42"]
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class RouterCall:
    """One call made on a ``RecordingRouter``."""

    method: str
    href: str
    options: Any = None


@dataclass(slots=True)
class RecordingRouter:
    """A router handle that records instead of navigating."""

    calls: list[RouterCall] = field(default_factory=list)

    def push(self, href: str, options: Any = None) -> None:
        self.calls.append(RouterCall("push", href, options))

    def replace(self, href: str, options: Any = None) -> None:
        self.calls.append(RouterCall("replace", href, options))

    def prefetch(self, href: str, options: Any = None) -> None:
        self.calls.append(RouterCall("prefetch", href, options))

    @property
    def hrefs(self) -> list[str]:
        return [call.href for call in self.calls]

    @property
    def last(self) -> RouterCall:
        """The most recent call. Raises ``IndexError`` if there is none."""
        return self.calls[-1]
