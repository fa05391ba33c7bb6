"""Counter engine: elapsed/remaining time between two instants.

A :class:`Counter` holds a ``start``, an ``end`` and a
:class:`Direction`.  Nothing is cached: every query reads "now" once
from the injected :class:`~timecounter.ClockPort` (or, by default, from
the endpoints' own instant class) and recomputes.

- ``Direction.UP`` reports time elapsed since ``start``.
- ``Direction.DOWN`` reports time remaining until ``end``.

Negative results are clamped to ``00:00:00``.

Persisted form is three newline-separated fields::

    <start>
    <end>
    <Up|Down>

Fields after the third are ignored on load.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum
from pathlib import Path
from typing import Generic, TextIO, TypeVar

from timecounter._clock import ClockPort
from timecounter._errors import (
    InvalidDirectionError,
    MalformedDataError,
    TimeParseError,
)
from timecounter._span import Span, SpanLike
from timecounter._time import Instant, elapsed

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Instant)

_FIELD_COUNT = 3


class Direction(StrEnum):
    """Which way a counter runs.  The value is the persisted token."""

    UP = "Up"
    DOWN = "Down"

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse the exact token ``Up`` or ``Down`` (case-sensitive)."""
        try:
            return cls(text)
        except ValueError as exc:
            raise InvalidDirectionError(
                f"Invalid direction {text!r}; expected 'Up' or 'Down'"
            ) from exc

    def flipped(self) -> Direction:
        return Direction.DOWN if self is Direction.UP else Direction.UP


def _resolve_instant(
    start: T | None,
    end: T | None,
    instant: type[T] | None,
) -> type[T]:
    """Return the one instant class shared by *instant* and the endpoints.

    Raises:
        TypeError: Nothing to infer from, or the classes disagree.
    """
    kinds = {type(given) for given in (start, end) if given is not None}
    if instant is not None:
        kinds.add(instant)
    if not kinds:
        raise TypeError("Cannot infer the instant type; pass start, end or instant=")
    if len(kinds) > 1:
        names = ", ".join(sorted(kind.__name__ for kind in kinds))
        raise TypeError(f"Counter endpoints mix instant types: {names}")
    return kinds.pop()


@dataclass
class Counter(Generic[T]):
    """Elapsed/remaining time counter, generic over the instant type.

    Prefer the :meth:`up` and :meth:`down` constructors.  ``start`` and
    ``end`` are independent: a down counter whose end has passed is
    valid and simply shows zero.

    Attributes:
        start: Reference point for ``Direction.UP``.
        end: Target point for ``Direction.DOWN``.
        direction: Current counting direction.
        clock: Optional source of "now".  Excluded from equality and
            repr.  Defaults to the class of ``start``.

    Example::

        counter = Counter.down(end=Timestamp.now() + Span.minutes(25))
        print(counter)  # 00:24:59
    """

    start: T
    end: T
    direction: Direction
    clock: ClockPort[T] | None = field(default=None, compare=False, repr=False)

    # -- construction ---------------------------------------------------------

    @classmethod
    def down(
        cls,
        start: T | None = None,
        end: T | None = None,
        *,
        instant: type[T] | None = None,
        clock: ClockPort[T] | None = None,
    ) -> Counter[T]:
        """Build a counter showing the time remaining until *end*.

        Omitted endpoints default to ``instant.zero()``.  The instant
        type is taken from *instant* or else from the given endpoints.
        No ordering between *start* and *end* is enforced.
        """
        return cls._build(start, end, Direction.DOWN, instant, clock)

    @classmethod
    def up(
        cls,
        start: T | None = None,
        end: T | None = None,
        *,
        instant: type[T] | None = None,
        clock: ClockPort[T] | None = None,
    ) -> Counter[T]:
        """Build a counter showing the time elapsed since *start*."""
        return cls._build(start, end, Direction.UP, instant, clock)

    @classmethod
    def _build(
        cls,
        start: T | None,
        end: T | None,
        direction: Direction,
        instant: type[T] | None,
        clock: ClockPort[T] | None,
    ) -> Counter[T]:
        kind = _resolve_instant(start, end, instant)
        return cls(
            start=start if start is not None else kind.zero(),
            end=end if end is not None else kind.zero(),
            direction=direction,
            clock=clock,
        )

    # -- mutation -------------------------------------------------------------

    def flip(self) -> None:
        """Toggle between counting up and counting down, in place."""
        self.direction = self.direction.flipped()

    def flipped(self) -> Counter[T]:
        """Return a copy running in the opposite direction."""
        return replace(self, direction=self.direction.flipped())

    def try_move_start(self, offset: SpanLike) -> None:
        """Shift ``start`` by *offset*.

        Raises:
            TimeOverflowError: The new start is not representable.
                ``start`` is left untouched.
        """
        self.start = self.start.add_seconds(offset)

    def try_move_end(self, offset: SpanLike) -> None:
        """Shift ``end`` by *offset*; same overflow guarantee as ``try_move_start``."""
        self.end = self.end.add_seconds(offset)

    # -- queries --------------------------------------------------------------

    def now(self) -> T:
        source = self.clock if self.clock is not None else type(self.start)
        return source.now()

    def duration(self) -> Span:
        """Signed remaining (DOWN) or elapsed (UP) time, unclamped."""
        if self.direction is Direction.DOWN:
            return elapsed(self.end, self.now())
        return elapsed(self.now(), self.start)

    def _clamped_seconds(self) -> int:
        return max(self.duration().total_seconds(), 0)

    def counter(self) -> tuple[int, int, int]:
        """Return ``(hours, minutes, seconds)`` for display.

        Hours are unbounded.  Any negative duration yields ``(0, 0, 0)``.
        """
        total = self._clamped_seconds()
        return total // 3600, total // 60 % 60, total % 60

    def hours(self) -> int:
        """Total whole hours of the clamped duration."""
        return self._clamped_seconds() // 3600

    def minutes(self) -> int:
        """Total whole minutes of the clamped duration, hours included."""
        return self._clamped_seconds() // 60

    def seconds(self) -> int:
        """Total whole seconds of the clamped duration."""
        return self._clamped_seconds()

    def __str__(self) -> str:
        hours, minutes, seconds = self.counter()
        return f"{hours:02}:{minutes:02}:{seconds:02}"

    # -- serialisation --------------------------------------------------------

    def to_text(self) -> str:
        return "\n".join(
            (self.start.render(), self.end.render(), self.direction.value)
        )

    def write(self, sink: TextIO) -> None:
        sink.write(self.to_text())

    def to_file(self, path: str | Path) -> None:
        """Write the counter to *path*, replacing any existing content."""
        Path(path).write_text(self.to_text(), encoding="utf-8")
        logger.debug("Saved %s counter to %s", self.direction.value, path)

    @classmethod
    def from_text(
        cls,
        text: str,
        instant: type[T],
        *,
        clock: ClockPort[T] | None = None,
    ) -> Counter[T]:
        """Parse the three-field text form.

        Raises:
            MalformedDataError: Fewer than three fields, or a field
                failed to parse (the parse error is chained as
                ``__cause__``).
        """
        fields = text.split("\n")
        if len(fields) < _FIELD_COUNT:
            raise MalformedDataError(
                f"Expected {_FIELD_COUNT} fields, found {len(fields)}"
            )
        if len(fields) > _FIELD_COUNT and any(fields[_FIELD_COUNT:]):
            logger.debug("Ignoring %d trailing field(s)", len(fields) - _FIELD_COUNT)
        start_text, end_text, direction_text = fields[:_FIELD_COUNT]
        try:
            start = instant.parse(start_text)
            end = instant.parse(end_text)
            direction = Direction.parse(direction_text)
        except (TimeParseError, InvalidDirectionError) as exc:
            raise MalformedDataError(f"Invalid counter record: {exc}") from exc
        return cls(start=start, end=end, direction=direction, clock=clock)

    @classmethod
    def read(
        cls,
        source: TextIO,
        instant: type[T],
        *,
        clock: ClockPort[T] | None = None,
    ) -> Counter[T]:
        return cls.from_text(source.read(), instant, clock=clock)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        instant: type[T],
        *,
        clock: ClockPort[T] | None = None,
    ) -> Counter[T]:
        """Load a counter saved with :meth:`to_file`.

        OS errors (missing file, permissions) propagate unchanged.
        """
        counter = cls.from_text(
            Path(path).read_text(encoding="utf-8"), instant, clock=clock
        )
        logger.debug("Loaded %s counter from %s", counter.direction.value, path)
        return counter
