"""Command-line configuration via pydantic-settings.

Settings are read from ``TIMECOUNTER_``-prefixed environment variables
and an optional ``.env`` file.  Nested models use ``__`` as the
delimiter, e.g. ``TIMECOUNTER_LOGGING__LEVEL=DEBUG``.

The library itself (``Counter`` and the instants) takes no
configuration; these settings only drive the ``timecounter`` CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseModel):
    """Logging configuration.

    Environment variables::

        TIMECOUNTER_LOGGING__LEVEL=DEBUG
        TIMECOUNTER_LOGGING__FORMAT=json
        TIMECOUNTER_LOGGING__FILE=/var/log/timecounter.log
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description=(
            "'text' emits human-readable lines; 'json' emits one JSON "
            "object per line and switches CLI error reports to JSON."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class Settings(BaseSettings):
    """Root settings for the ``timecounter`` command.

    Example ``.env``::

        TIMECOUNTER_STATE_FILE=~/.local/state/pomodoro.txt
        TIMECOUNTER_INSTANT=timestamp
        TIMECOUNTER_REFRESH_INTERVAL=0.5
        TIMECOUNTER_LOGGING__LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMECOUNTER_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    state_file: Path = Field(
        default=Path("counter.txt"),
        description="File the CLI saves the counter to and loads it from.",
    )
    instant: Literal["timestamp", "seconds"] = Field(
        default="timestamp",
        description=(
            "Instant type for persisted counters: 'timestamp' (UTC "
            "calendar time) or 'seconds' (bare integer seconds)."
        ),
    )
    refresh_interval: Annotated[float, Field(gt=0)] = Field(
        default=1.0,
        description="Seconds between redraws in ``timecounter watch``.",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
