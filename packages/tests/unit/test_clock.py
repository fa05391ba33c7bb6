"""Unit tests for timecounter._clock: clock port and fake clock.

Test Techniques Used:
    - Protocol Conformance: isinstance checks for structural subtyping
    - Specification-based Testing: FakeClock controls "now"
"""

from __future__ import annotations

from datetime import UTC, datetime

from timecounter._clock import ClockPort
from timecounter._seconds import EpochSeconds
from timecounter._span import Span
from timecounter._timestamp import Timestamp
from timecounter.testing import FakeClock


class TestClockPortProtocol:
    """Tests for the ClockPort protocol definition.

    Technique: Protocol Conformance via structural subtyping checks.
    """

    def test_instant_classes_satisfy_protocol(self) -> None:
        """Timestamp and EpochSeconds classes are ClockPorts."""
        assert isinstance(Timestamp, ClockPort)
        assert isinstance(EpochSeconds, ClockPort)

    def test_fake_clock_satisfies_protocol(self) -> None:
        """FakeClock is recognized as ClockPort."""
        assert isinstance(FakeClock(), ClockPort)

    def test_class_without_now_does_not_satisfy(self) -> None:
        """A class without now() does not satisfy ClockPort."""
        class NotAClock:
            pass

        assert not isinstance(NotAClock(), ClockPort)


class TestFakeClock:
    """FakeClock returns and advances a manually set instant.

    Technique: Specification-based Testing of the test double.
    """

    def test_defaults_to_epoch_seconds_zero(self) -> None:
        """A fresh FakeClock reads EpochSeconds(0)."""
        assert FakeClock().now() == EpochSeconds(0)

    def test_advance_accepts_ints_and_spans(self) -> None:
        """advance() takes seconds or a Span, forward or back."""
        clock = FakeClock(EpochSeconds(10))
        clock.advance(5)
        clock.advance(Span.minutes(-1))
        assert clock.now() == EpochSeconds(-45)

    def test_holds_any_instant_type(self) -> None:
        """A FakeClock can hold and advance a Timestamp."""
        start = Timestamp(datetime(2026, 1, 1, tzinfo=UTC))
        clock = FakeClock(start)
        clock.advance(Span.days(1))
        assert clock.now() == Timestamp(datetime(2026, 1, 2, tzinfo=UTC))
