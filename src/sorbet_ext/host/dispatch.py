"""Calling extension entry points on behalf of the host.

Entry points raise ``ExtensionError`` for conditions the user can fix.
``invoke`` turns those into a failed ``Outcome`` so the host can show the
message; anything else is a bug and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from ..errors import ExtensionError
from ..util.error import format_error
from ..util.log import Log

log = Log.create({"service": "host.dispatch"})

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an entry point call: a value or a user-facing error."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def invoke(entry_point: Callable[..., T], *args: Any) -> Outcome[T]:
    """Call ``entry_point`` and capture user-facing failures."""
    name = getattr(entry_point, "__name__", repr(entry_point))
    try:
        value = entry_point(*args)
    except ExtensionError as e:
        message = format_error(e) or str(e)
        log.warn("entry point failed", {"entry_point": name, "error": message})
        return Outcome(error=message)
    return Outcome(value=value)
