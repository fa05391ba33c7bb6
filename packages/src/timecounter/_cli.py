"""Typer front end for timecounter.

The CLI is a thin presentation layer: it builds a :class:`Counter`,
persists it to the configured state file, applies ``flip`` / ``shift``
in response to commands, and re-renders the display.

Usage::

    timecounter create down --seconds 1500   # 25 minute countdown
    timecounter show
    timecounter shift end -- -300             # five minutes less
    timecounter flip
    timecounter watch

Without a command it prints a 20-day sample countdown and count-up.
"""

from __future__ import annotations

import contextlib
import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any, get_args

import typer
from pydantic import ValidationError

from timecounter._clock import ClockPort
from timecounter._counter import Counter, Direction
from timecounter._errors import CounterError, build_error_payload
from timecounter._logging import configure_logging
from timecounter._seconds import EpochSeconds
from timecounter._settings import LoggingSettings, Settings
from timecounter._span import Span
from timecounter._time import Instant
from timecounter._timestamp import Timestamp

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 3
EXIT_DATA_ERROR = 4

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)

INSTANT_TYPES: dict[str, type[Instant]] = {
    "timestamp": Timestamp,
    "seconds": EpochSeconds,
}

_SAMPLE_SPAN = Span.days(20)


class Endpoint(StrEnum):
    START = "start"
    END = "end"


@dataclass
class _Session:
    settings: Settings
    instant: type[Instant]
    clock: ClockPort[Any] | None

    def now(self) -> Any:
        source = self.clock if self.clock is not None else self.instant
        return source.now()

    def load(self) -> Counter[Any]:
        return Counter.from_file(
            self.settings.state_file, self.instant, clock=self.clock
        )

    def save(self, counter: Counter[Any]) -> None:
        counter.to_file(self.settings.state_file)


@contextlib.contextmanager
def _reporting_errors(settings: Settings) -> Iterator[None]:
    """Turn library and OS failures into an error report and exit code."""
    try:
        yield
    except CounterError as exc:
        _report(exc, settings)
        raise typer.Exit(EXIT_DATA_ERROR) from exc
    except OSError as exc:
        _report(exc, settings)
        raise typer.Exit(EXIT_RUNTIME_ERROR) from exc


def _report(error: Exception, settings: Settings) -> None:
    logger.debug("Command failed", exc_info=error)
    if settings.logging.format == "json":
        typer.echo(build_error_payload(error).to_json(), err=True)
    else:
        typer.echo(f"Error: {error}", err=True)


def build_cli(
    *,
    settings_class: type[Settings] = Settings,
    clock: ClockPort[Any] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> typer.Typer:
    """Construct the ``timecounter`` Typer application.

    Args:
        settings_class: Settings model to instantiate.  Tests pass an
            isolated subclass that ignores the environment.
        clock: Optional source of "now" shared by every command.
            Defaults to the configured instant type's own clock.
        sleep: Delay function used between ``watch`` redraws.
    """
    cli = typer.Typer(help="Count up from a start time or down to an end time.")

    @cli.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option("--version", is_eager=True, help="Show version and exit."),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
        state_file: Annotated[
            Path | None,
            typer.Option("--state-file", help="Override the counter state file."),
        ] = None,
        instant: Annotated[
            str | None,
            typer.Option("--instant", help="Instant type: timestamp or seconds."),
        ] = None,
    ) -> None:
        if version_flag:
            from timecounter import __version__

            typer.echo(f"timecounter v{__version__}")
            raise typer.Exit()

        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )
        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )
        if instant is not None and instant.lower() not in INSTANT_TYPES:
            raise typer.BadParameter(
                f"Invalid instant type '{instant}'. "
                f"Choose from: {', '.join(INSTANT_TYPES)}",
                param_hint="'--instant'",
            )

        try:
            settings = settings_class(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            typer.echo(f"Configuration error: {exc}", err=True)
            raise typer.Exit(EXIT_CONFIG_ERROR) from exc

        logging_updates: dict[str, str] = {}
        if log_level is not None:
            logging_updates["level"] = log_level.upper()
        if log_format is not None:
            logging_updates["format"] = log_format.lower()
        if logging_updates:
            settings.logging = settings.logging.model_copy(update=logging_updates)
        if state_file is not None:
            settings.state_file = state_file
        if instant is not None:
            settings.instant = instant.lower()  # type: ignore[assignment]

        configure_logging(settings.logging)
        session = _Session(
            settings=settings,
            instant=INSTANT_TYPES[settings.instant],
            clock=clock,
        )
        ctx.obj = session
        logger.debug(
            "Using %s instants, state file %s",
            settings.instant,
            settings.state_file,
        )

        if ctx.invoked_subcommand is None:
            now = session.now()
            with _reporting_errors(settings):
                down = Counter.down(now, now + _SAMPLE_SPAN, clock=clock)
                up = Counter.up(now - _SAMPLE_SPAN, now, clock=clock)
            typer.echo(f"Down: {down}\nUp: {up}")

    # -- create ---------------------------------------------------------------

    @cli.command()
    def create(
        ctx: typer.Context,
        direction: Annotated[
            Direction,
            typer.Argument(case_sensitive=False, help="Up or Down."),
        ],
        start: Annotated[
            str | None,
            typer.Option("--start", help="Start instant in canonical text form."),
        ] = None,
        end: Annotated[
            str | None,
            typer.Option("--end", help="End instant in canonical text form."),
        ] = None,
        seconds: Annotated[
            int | None,
            typer.Option(
                "--seconds",
                help=(
                    "Down: end this many seconds from now. "
                    "Up: start this many seconds ago."
                ),
            ),
        ] = None,
    ) -> None:
        """Create a new counter and save it to the state file."""
        session: _Session = ctx.obj
        with _reporting_errors(session.settings):
            start_at = session.instant.parse(start) if start is not None else None
            end_at = session.instant.parse(end) if end is not None else None
            now = session.now()
            if direction is Direction.UP and start_at is None:
                start_at = now - Span.of(seconds or 0)
            if direction is Direction.DOWN and end_at is None:
                end_at = now + Span.of(seconds or 0)

            build = Counter.up if direction is Direction.UP else Counter.down
            counter = build(
                start_at, end_at, instant=session.instant, clock=session.clock
            )
            session.save(counter)
        logger.info("Created %s counter", counter.direction.value)
        typer.echo(str(counter))

    # -- show / flip / shift ---------------------------------------------------

    @cli.command()
    def show(ctx: typer.Context) -> None:
        """Print the saved counter."""
        session: _Session = ctx.obj
        with _reporting_errors(session.settings):
            counter = session.load()
        typer.echo(str(counter))

    @cli.command()
    def flip(ctx: typer.Context) -> None:
        """Switch the saved counter between counting up and down."""
        session: _Session = ctx.obj
        with _reporting_errors(session.settings):
            counter = session.load()
            counter.flip()
            session.save(counter)
        logger.info("Flipped counter to %s", counter.direction.value)
        typer.echo(str(counter))

    @cli.command()
    def shift(
        ctx: typer.Context,
        endpoint: Annotated[Endpoint, typer.Argument(help="start or end.")],
        offset: Annotated[
            int,
            typer.Argument(help="Seconds to move by; use '--' before negatives."),
        ],
    ) -> None:
        """Move the start or end of the saved counter."""
        session: _Session = ctx.obj
        with _reporting_errors(session.settings):
            counter = session.load()
            if endpoint is Endpoint.START:
                counter.try_move_start(offset)
            else:
                counter.try_move_end(offset)
            session.save(counter)
        logger.info("Moved %s by %d seconds", endpoint.value, offset)
        typer.echo(str(counter))

    # -- watch ----------------------------------------------------------------

    @cli.command()
    def watch(
        ctx: typer.Context,
        ticks: Annotated[
            int | None,
            typer.Option("--ticks", min=1, help="Stop after this many redraws."),
        ] = None,
        interval: Annotated[
            float | None,
            typer.Option("--interval", min=0.0, help="Seconds between redraws."),
        ] = None,
    ) -> None:
        """Redraw the saved counter until interrupted."""
        session: _Session = ctx.obj
        period = interval if interval is not None else session.settings.refresh_interval
        with _reporting_errors(session.settings):
            counter = session.load()
        drawn = 0
        with contextlib.suppress(KeyboardInterrupt):
            while True:
                typer.echo(str(counter))
                drawn += 1
                if ticks is not None and drawn >= ticks:
                    break
                sleep(period)

    return cli


def main() -> None:
    """Console-script entry point."""
    build_cli()()
