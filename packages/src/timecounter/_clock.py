"""Clock port: where a Counter reads "now" from.

Every :class:`~timecounter.Instant` class already satisfies
:class:`ClockPort` through its ``now`` classmethod, so production code
passes nothing and the counter asks its own instant type.  Tests inject
:class:`~timecounter.testing.FakeClock` to control time without
touching process-wide state.

See Also:
    PEP 544 for structural subtyping with ``Protocol``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ClockPort(Protocol[T_co]):
    """Source of the current instant.

    Implementations must be callable with no prior state and return
    an instant of the same type as the counter's endpoints.
    """

    def now(self) -> T_co:
        """Return the current instant."""
        ...
