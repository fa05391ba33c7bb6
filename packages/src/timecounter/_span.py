"""Signed whole-second durations.

:class:`Span` is the duration type shared by every shipped instant.
It stores a plain Python ``int`` so construction from any unit is an
exact multiplication and ``Span.seconds(n).total_seconds() == n``
holds for every integer ``n``.  Range limits belong to the instants,
not to the span: displacing an instant by a huge span is where
overflow is detected.

**Why one span type?** Both shipped instants count in whole seconds,
so a per-instant duration type would only add conversions.  Python
ints are unbounded, so no unit constructor can overflow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY


@dataclass(frozen=True, order=True, slots=True)
class Span:
    """A signed duration measured in whole seconds.

    Build spans through the unit constructors rather than the raw
    field::

        Span.minutes(10) == Span.seconds(600)
        Span.weeks(-1).total_seconds() == -604800
    """

    whole_seconds: int = 0

    @classmethod
    def seconds(cls, seconds: int) -> Span:
        """Span of *seconds* seconds."""
        return cls(seconds)

    @classmethod
    def minutes(cls, minutes: int) -> Span:
        """Span of *minutes* minutes."""
        return cls(minutes * _MINUTE)

    @classmethod
    def hours(cls, hours: int) -> Span:
        """Span of *hours* hours."""
        return cls(hours * _HOUR)

    @classmethod
    def days(cls, days: int) -> Span:
        """Span of *days* 24-hour days."""
        return cls(days * _DAY)

    @classmethod
    def weeks(cls, weeks: int) -> Span:
        """Span of *weeks* seven-day weeks."""
        return cls(weeks * _WEEK)

    @classmethod
    def of(cls, value: SpanLike) -> Span:
        """Coerce a bare ``int`` (seconds) or a :class:`Span` to a span."""
        if isinstance(value, Span):
            return value
        # bool is an int subclass but never a meaningful duration
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected Span or int seconds, got {type(value).__name__}")
        return cls(value)

    def total_seconds(self) -> int:
        """Return the signed length in whole seconds."""
        return self.whole_seconds

    def __int__(self) -> int:
        return self.whole_seconds

    def __neg__(self) -> Span:
        return Span(-self.whole_seconds)

    def __add__(self, other: SpanLike) -> Span:
        return Span(self.whole_seconds + Span.of(other).whole_seconds)

    def __sub__(self, other: SpanLike) -> Span:
        return Span(self.whole_seconds - Span.of(other).whole_seconds)


SpanLike: TypeAlias = "Span | int"
