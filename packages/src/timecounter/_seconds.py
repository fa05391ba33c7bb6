"""Integer-seconds instant for deterministic clocks.

:class:`EpochSeconds` is a bare signed 64-bit count of seconds.  Its
``now()`` always returns ``0``, which makes counters built on it fully
reproducible; tests wanting a moving clock inject
:class:`~timecounter.testing.FakeClock` instead.

**Why a second instant type?** Wall-clock counters cannot be asserted
exactly in tests or reproduced from a saved file.  A bare integer can.

See Also:
    :mod:`timecounter._timestamp` for the wall-clock instant.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from timecounter._errors import TimeOverflowError, TimeParseError
from timecounter._span import Span, SpanLike

MIN_SECONDS = -(2**63)
MAX_SECONDS = 2**63 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, order=True, slots=True)
class EpochSeconds:
    """Seconds since an arbitrary epoch, limited to the signed 64-bit range."""

    value: int = 0

    def __post_init__(self) -> None:
        if not MIN_SECONDS <= self.value <= MAX_SECONDS:
            raise TimeOverflowError(f"{self.value} is outside the 64-bit range")

    @classmethod
    def now(cls) -> EpochSeconds:
        """Return ``EpochSeconds(0)``; this type has no ambient clock."""
        return cls(0)

    @classmethod
    def zero(cls) -> EpochSeconds:
        """Return ``EpochSeconds(0)``."""
        return cls(0)

    @classmethod
    def parse(cls, text: str) -> EpochSeconds:
        """Parse an optionally signed decimal integer.

        Raises:
            TimeParseError: *text* is not decimal digits or does not fit
                in 64 bits.
        """
        if _INTEGER.fullmatch(text) is None:
            raise TimeParseError(f"Invalid integer seconds {text!r}")
        value = int(text)
        if not MIN_SECONDS <= value <= MAX_SECONDS:
            raise TimeParseError(f"{text!r} is outside the 64-bit range")
        return cls(value)

    def render(self) -> str:
        """Return the decimal form, e.g. ``-42``."""
        return str(self.value)

    def add_seconds(self, span: SpanLike) -> EpochSeconds:
        """Return this instant displaced by *span*.

        Raises:
            TimeOverflowError: The sum leaves the signed 64-bit range.
        """
        return EpochSeconds(self.value + Span.of(span).total_seconds())

    def __add__(self, span: SpanLike) -> EpochSeconds:
        return self.add_seconds(span)

    def __sub__(self, other: EpochSeconds | SpanLike) -> Span | EpochSeconds:
        if isinstance(other, EpochSeconds):
            return Span(self.value - other.value)
        return self.add_seconds(-Span.of(other))

    def __str__(self) -> str:
        return self.render()
