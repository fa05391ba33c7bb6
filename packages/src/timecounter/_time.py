"""Instant protocol: the contract a clock type must meet to drive a Counter.

The counter engine never touches ``datetime`` or integers directly.
It only relies on the capabilities below, so a calendar clock
(:class:`~timecounter.Timestamp`) and a synthetic integer clock
(:class:`~timecounter.EpochSeconds`) are interchangeable.  Embedders
can plug in their own type by satisfying this protocol structurally
(PEP 544); no base class is required.

Contract summary:

- ``now()`` / ``zero()`` are classmethods, so the instant *class*
  doubles as a :class:`~timecounter.ClockPort`.
- ``parse(render(x)) == x`` for every representable ``x``; the
  rendered text never contains a newline.
- ``add_seconds`` raises :class:`~timecounter.TimeOverflowError`
  instead of wrapping or clamping.
- ``a - b`` between two instants yields a
  :class:`~timecounter.Span`, truncated toward zero.
"""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable

from timecounter._span import Span, SpanLike


@runtime_checkable
class Instant(Protocol):
    """An opaque, totally ordered point in time."""

    @classmethod
    def now(cls) -> Self:
        """Return the current instant of this clock type."""
        ...

    @classmethod
    def zero(cls) -> Self:
        """Return the default instant used when an endpoint is omitted."""
        ...

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the canonical text form.

        Raises:
            TimeParseError: *text* is not a valid rendering.
        """
        ...

    def render(self) -> str:
        """Return the canonical, newline-free text form."""
        ...

    def add_seconds(self, span: SpanLike) -> Self:
        """Return this instant displaced by *span*.

        Raises:
            TimeOverflowError: The result is not representable.
        """
        ...

    def __sub__(self, other: Any) -> Any:
        """``instant - instant`` yields a :class:`Span`."""
        ...

    def __lt__(self, other: Any) -> bool: ...


def elapsed(later: Instant, earlier: Instant) -> Span:
    """Return ``later - earlier`` as a :class:`Span`.

    Thin typed wrapper so the engine does not depend on how a concrete
    instant overloads ``-``.
    """
    return Span.of(later - earlier)
