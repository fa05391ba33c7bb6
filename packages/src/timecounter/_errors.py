"""Error hierarchy and structured error payloads for timecounter.

Every library failure derives from :class:`CounterError` *and* from the
matching builtin exception, so callers can catch either the precise
domain error or the generic ``ValueError`` / ``OverflowError``.

Error kinds::

    TimeParseError          ← instant text could not be parsed
    TimeOverflowError       ← instant displaced outside its range
    InvalidDirectionError   ← direction token is neither Up nor Down
    MalformedDataError      ← persisted record unusable (wraps the above)

Each class carries a machine-readable ``error_type``.
:func:`build_error_payload` converts any exception into an
:class:`ErrorPayload` so front ends can report failures as JSON.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime


class CounterError(Exception):
    """Base class for all timecounter errors."""

    error_type = "counter_error"


class TimeParseError(CounterError, ValueError):
    """A textual instant could not be parsed."""

    error_type = "time_parse"


class TimeOverflowError(CounterError, OverflowError):
    """Displacing an instant left its representable range."""

    error_type = "time_overflow"


class InvalidDirectionError(CounterError, ValueError):
    """A direction token was neither ``Up`` nor ``Down``."""

    error_type = "invalid_direction"


class MalformedDataError(CounterError, ValueError):
    """A persisted counter record is incomplete or has an invalid field.

    When a single field failed to parse, the underlying
    :class:`TimeParseError` or :class:`InvalidDirectionError` is
    available as ``__cause__``.
    """

    error_type = "malformed_data"


@dataclass(frozen=True, slots=True)
class ErrorPayload:
    """Immutable structured error report."""

    error_type: str
    message: str
    timestamp: str
    details: dict[str, object] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialise to a JSON string."""
        return json.dumps(asdict(self))


def build_error_payload(
    error: Exception,
    *,
    details: dict[str, object] | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ErrorPayload:
    """Convert an exception into an :class:`ErrorPayload`.

    Args:
        error: The exception to convert.  :class:`CounterError`
            subclasses report their own ``error_type``; anything
            else falls back to ``"error"``.
        details: Optional extra context.  When the error was raised
            from another exception, its type name is recorded under
            ``"cause"`` unless already present.
        clock: Optional callable returning a :class:`~datetime.datetime`.
            Defaults to ``datetime.now(UTC)``.
    """
    error_type = error.error_type if isinstance(error, CounterError) else "error"
    resolved = dict(details or {})
    if error.__cause__ is not None:
        resolved.setdefault("cause", type(error.__cause__).__name__)
    now = clock() if clock is not None else datetime.now(UTC)
    return ErrorPayload(
        error_type=error_type,
        message=str(error),
        timestamp=now.isoformat(),
        details=resolved,
    )
