"""Log formatting and root-logger setup for the ``timecounter`` CLI.

The CLI owns two output streams: the counter display on ``stdout``
(one ``HH:MM:SS`` line per frame, meant to be piped or captured) and
diagnostics on ``stderr``.  Library modules only call
``logging.getLogger(__name__)``: :mod:`timecounter._counter` logs
state-file reads, writes and discarded trailing fields at DEBUG, and
:mod:`timecounter._cli` logs each saved change at INFO.  Handlers are
installed here, once, from the CLI callback, so importing the library
never configures logging behind an application's back.

Two output formats are supported:

- ``text``: ``2026-02-14 12:00:00,000 [INFO] timecounter._cli: message``
- ``json``: one JSON object per line (NDJSON), UTC timestamps.  The
  same ``--log-format json`` switch makes command failures print an
  :class:`~timecounter.ErrorPayload` line, so a ``watch`` loop under a
  supervisor produces uniformly machine-readable stderr.

``LoggingSettings.file`` adds a size-rotated copy for long-running
``watch`` sessions.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from timecounter._settings import LoggingSettings

_MAX_LOG_BYTES = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single-line JSON object.

    Fields: ``timestamp`` (ISO 8601, UTC), ``level``, ``logger``,
    ``message``, ``service``, and ``exception`` when a traceback is
    attached.
    """

    def __init__(self, *, service: str = "timecounter") -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings, *, service: str = "timecounter"
) -> None:
    """Replace the root logger's handlers according to *settings*.

    Always logs to ``stderr`` so the counter display on ``stdout``
    stays clean; adds a rotating file handler when ``settings.file``
    is set.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=_MAX_LOG_BYTES,
                backupCount=settings.backup_count,
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(settings.level)
