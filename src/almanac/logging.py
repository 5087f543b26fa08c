"""Logging setup for the ALMANAC CLI.

Console records go through Rich on stderr so stdout stays machine-readable.
A flight recorder keeps recent records of every level in memory and writes
them to a file only when something goes wrong: a WARNING or worse, a command
that fails with an almanac error, or an explicit ``--force-flush``. All
timestamps are UTC.

Library modules only create loggers; handlers are installed here, once per
CLI invocation, by `configure_logging`.
"""

from __future__ import annotations

import logging
import platform
import sys
import time
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

FLIGHT_RECORDER_CAPACITY = 2000
UTC_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices made on the command line.

    A `log_path` of None turns the flight recorder off.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def verbosity_level(verbose: int, quiet: int) -> int:
    """Map ``-v``/``-q`` counts to a level, one step from WARNING per flag."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def _utc_formatter(fmt: str) -> logging.Formatter:
    formatter = logging.Formatter(fmt=fmt, datefmt=UTC_DATEFMT)
    formatter.converter = time.gmtime
    return formatter


def console_handler(level: int, debug: bool = False, color: bool = True) -> RichHandler:
    """Return a Rich handler on stderr.

    With `debug` every record is shown, prefixed by its UTC time and logger
    name, and Rich adds the source file and line of each call.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    handler.setFormatter(
        _utc_formatter("%(asctime)s %(name)s: %(message)s" if debug else "%(message)s")
    )
    return handler


def flight_recorder(
    path: Path, flush_on_close: bool = False, capacity: int = FLIGHT_RECORDER_CAPACITY
) -> MemoryHandler:
    """Return a memory buffer that writes to `path` when flushed.

    The file is only created on the first flush and is truncated then, so a
    run that never flushes leaves the previous log in place.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(_utc_formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger passes everything; each handler applies its own level.
    Per-logger levels from `settings.logger_levels` apply to both handlers.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(settings.level, debug=settings.debug, color=settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(flight_recorder(settings.log_path, flush_on_close=settings.force_flush))
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def flush_flight_recorders() -> None:
    """Write out whatever the flight recorders on the root logger hold."""
    for handler in logging.getLogger().handlers:
        if isinstance(handler, MemoryHandler):
            handler.flush()


def _tzdata_version() -> str:
    try:
        return package_version("tzdata")
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: logging.Logger, settings: LoggingSettings, *, app_version: str, tz_provider: str
) -> None:
    """Log a one-line summary at INFO and the environment at DEBUG.

    The DEBUG lines cover what changes calendar and timezone answers between
    machines: the interpreter, the platform, the rule provider and the tzdata
    release.
    """
    logger.info(
        "ALMANAC %s - console=%s, flight-recorder=%s",
        app_version,
        "DEBUG" if settings.debug else logging.getLevelName(settings.level),
        "OFF" if settings.log_path is None else "ON",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("Timezone provider: %s", tz_provider)
    logger.debug("tzdata: %s", _tzdata_version())
    if settings.log_path is not None:
        logger.debug(
            "Flight recorder: %s (flush on exit: %s)",
            settings.log_path,
            "yes" if settings.force_flush else "no",
        )
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(level) for name, level in settings.logger_levels.items()},
    )
