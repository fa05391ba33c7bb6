"""timecounter.

Elapsed/remaining time counters, generic over the notion of time.
"""

from importlib.metadata import PackageNotFoundError, version

from timecounter._cli import build_cli
from timecounter._clock import ClockPort
from timecounter._counter import Counter, Direction
from timecounter._errors import (
    CounterError,
    ErrorPayload,
    InvalidDirectionError,
    MalformedDataError,
    TimeOverflowError,
    TimeParseError,
    build_error_payload,
)
from timecounter._logging import JsonFormatter, configure_logging
from timecounter._seconds import EpochSeconds
from timecounter._settings import LoggingSettings, Settings
from timecounter._span import Span, SpanLike
from timecounter._time import Instant
from timecounter._timestamp import Timestamp

try:
    __version__ = version("timecounter")
except PackageNotFoundError:
    # Source checkout without installed metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Counter
    "Counter",
    "Direction",
    # Time
    "ClockPort",
    "EpochSeconds",
    "Instant",
    "Span",
    "SpanLike",
    "Timestamp",
    # Errors
    "CounterError",
    "ErrorPayload",
    "InvalidDirectionError",
    "MalformedDataError",
    "TimeOverflowError",
    "TimeParseError",
    "build_error_payload",
    # CLI
    "build_cli",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "Settings",
]
