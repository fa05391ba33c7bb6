"""Wall-clock instant backed by a timezone-aware UTC ``datetime``.

Canonical text is RFC 3339 as produced by :meth:`datetime.isoformat`,
e.g. ``2026-02-14T12:34:56.123456+00:00``.  Parsing accepts exactly the
RFC 3339 ``date-time`` grammar: full date, ``T`` (or ``t`` or a space),
``HH:MM:SS`` with an optional fraction, then ``Z`` or ``+HH:MM``.  The
result is normalised to UTC, so ``Timestamp.parse(ts.render()) == ts``.

**Why not datetime.fromisoformat?** Since Python 3.11 it accepts most
of ISO 8601: week dates, compact "basic" dates, times without seconds.
A hand-edited state file in any of those forms should be reported as
malformed, not silently loaded, so the grammar is matched first and
the fields are assembled directly.

The representable range is that of :class:`datetime.datetime`
(years 1 to 9999); displacement beyond it raises
:class:`~timecounter.TimeOverflowError`.

See Also:
    RFC 3339 section 5.6 for the ``date-time`` production.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from timecounter._errors import TimeOverflowError, TimeParseError
from timecounter._span import Span, SpanLike

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_RFC3339 = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[Tt ]"
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})",
    re.ASCII,
)


def _span_from_timedelta(delta: timedelta) -> Span:
    # timedelta normalises to days/seconds plus non-negative microseconds;
    # drop the fraction toward zero.
    whole = delta.days * 86400 + delta.seconds
    if whole < 0 and delta.microseconds:
        whole += 1
    return Span(whole)


def _offset(token: str) -> timezone:
    if token in ("Z", "z"):
        return UTC
    sign = -1 if token[0] == "-" else 1
    hours, minutes = int(token[1:3]), int(token[4:6])
    if minutes > 59:
        raise ValueError(f"offset minutes out of range in {token!r}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _parse_rfc3339(text: str) -> datetime:
    """Assemble an aware datetime from RFC 3339 text or raise ValueError."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError("not an RFC 3339 date-time with a UTC offset")
    # digits beyond microseconds are truncated
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        int(fraction),
        tzinfo=_offset(match["offset"]),
    )


@dataclass(frozen=True, order=True, slots=True)
class Timestamp:
    """A UTC point in time.

    Usage::

        deadline = Timestamp.now() + Span.minutes(25)
        Counter.down(end=deadline)
    """

    time: datetime = _EPOCH

    def __post_init__(self) -> None:
        if self.time.tzinfo is None or self.time.utcoffset() is None:
            raise ValueError("Timestamp requires a timezone-aware datetime")
        object.__setattr__(self, "time", self.time.astimezone(UTC))

    @classmethod
    def now(cls) -> Timestamp:
        """Return the current wall-clock time in UTC."""
        return cls(datetime.now(UTC))

    @classmethod
    def zero(cls) -> Timestamp:
        """Unix epoch, ``1970-01-01T00:00:00+00:00``."""
        return cls(_EPOCH)

    @classmethod
    def parse(cls, text: str) -> Timestamp:
        """Parse an RFC 3339 date-time and normalise it to UTC.

        Raises:
            TimeParseError: *text* does not match the grammar, names an
                impossible date or offset, or falls outside years 1-9999
                once shifted to UTC.
        """
        try:
            parsed = _parse_rfc3339(text)
        except ValueError as exc:
            raise TimeParseError(f"Invalid timestamp {text!r}: {exc}") from exc
        try:
            return cls(parsed)
        except OverflowError as exc:
            # e.g. 0001-01-01T00:00:00+05:00 has no UTC equivalent
            raise TimeParseError(f"Timestamp {text!r} is out of range") from exc

    def render(self) -> str:
        """Return the canonical ``isoformat()`` text with a ``+00:00`` offset."""
        return self.time.isoformat()

    def add_seconds(self, span: SpanLike) -> Timestamp:
        """Return this instant displaced by *span*.

        Raises:
            TimeOverflowError: The result falls outside years 1-9999.
        """
        seconds = Span.of(span).total_seconds()
        try:
            return Timestamp(self.time + timedelta(seconds=seconds))
        except OverflowError as exc:
            raise TimeOverflowError(
                f"Cannot move {self.render()} by {seconds} seconds"
            ) from exc

    def __add__(self, span: SpanLike) -> Timestamp:
        return self.add_seconds(span)

    def __sub__(self, other: Timestamp | SpanLike) -> Span | Timestamp:
        if isinstance(other, Timestamp):
            return _span_from_timedelta(self.time - other.time)
        return self.add_seconds(-Span.of(other))

    def __str__(self) -> str:
        return self.render()
