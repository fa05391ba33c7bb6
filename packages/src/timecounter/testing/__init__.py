"""Public test-support utilities for timecounter.

Provided symbols:

- :class:`FakeClock`: controllable clock for deterministic counters.
- :class:`IsolatedSettings`: ``Settings`` that ignore env and ``.env``.
- :func:`make_settings`: factory for isolated ``Settings``.
"""

from timecounter.testing._clock import FakeClock
from timecounter.testing._settings import IsolatedSettings, make_settings

__all__ = [
    "FakeClock",
    "IsolatedSettings",
    "make_settings",
]
