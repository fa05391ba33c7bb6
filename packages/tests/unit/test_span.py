"""Unit tests for timecounter._span: whole-second durations.

Test Techniques Used:
    - Specification-based Testing: Unit constructors are exact products
    - Boundary Value Analysis: Values beyond the 64-bit range stay lossless
    - Error Condition Testing: Non-integer coercion is rejected
"""

from __future__ import annotations

import pytest

from timecounter._span import Span


class TestConstructors:
    """Unit constructors multiply into seconds without rounding.

    Technique: Specification-based Testing of unit multipliers.
    """

    @pytest.mark.parametrize(
        ("span", "expected"),
        [
            (Span.seconds(45), 45),
            (Span.minutes(10), 600),
            (Span.hours(10), 36_000),
            (Span.days(10), 864_000),
            (Span.weeks(2), 1_209_600),
            (Span.hours(-1), -3600),
        ],
    )
    def test_total_seconds(self, span: Span, expected: int) -> None:
        """Each unit constructor yields the expected seconds."""
        assert span.total_seconds() == expected

    @pytest.mark.parametrize("n", [0, 1, -1, 2**63 - 1, -(2**63), 10**30])
    def test_seconds_are_lossless(self, n: int) -> None:
        """Any integer, even beyond 64 bits, survives unchanged."""
        assert Span.seconds(n).total_seconds() == n

    def test_default_is_zero(self) -> None:
        """Span() is a zero-length span."""
        assert Span() == Span.seconds(0)


class TestCoercion:
    """Span.of accepts spans and bare integers.

    Technique: Error Condition Testing of Span.of().
    """

    def test_int_becomes_span(self) -> None:
        """A bare int is read as seconds."""
        assert Span.of(10) == Span.seconds(10)

    def test_span_passes_through(self) -> None:
        """A Span is returned as-is."""
        span = Span.minutes(1)
        assert Span.of(span) is span

    @pytest.mark.parametrize("value", [1.5, "10", True, None])
    def test_other_values_are_rejected(self, value: object) -> None:
        """Floats, strings, bools and None raise TypeError."""
        with pytest.raises(TypeError):
            Span.of(value)  # type: ignore[arg-type]


class TestArithmetic:
    """Negation, addition and ordering.

    Technique: Specification-based Testing of operators.
    """

    def test_negation(self) -> None:
        """Unary minus flips the sign."""
        assert -Span.seconds(5) == Span.seconds(-5)

    def test_add_and_subtract(self) -> None:
        """Spans combine with spans and bare ints."""
        assert Span.minutes(1) + 30 == Span.seconds(90)
        assert Span.minutes(1) - Span.seconds(90) == Span.seconds(-30)

    def test_ordering(self) -> None:
        """Spans order by length."""
        assert Span.seconds(59) < Span.minutes(1) < Span.hours(1)

    def test_int_conversion(self) -> None:
        """int() gives the total seconds."""
        assert int(Span.hours(2)) == 7200
