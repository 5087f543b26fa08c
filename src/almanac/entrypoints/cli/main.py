"""ALMANAC CLI entry point.

The top-level ``almanac`` group sets up logging for the invocation and hosts
the command groups:

- ``almanac cal``: leap years, month lengths, Julian Day Numbers, Easter.
- ``almanac tz``: timezone offsets, abbreviations and sampled transitions.
- ``almanac interval``: calendar-aware differences and interval arithmetic.

Results go to stdout; log records, warnings and errors go to stderr. When a
command fails, the recent DEBUG trail is written to ``--log-path``.

Examples
    $ almanac --version
    $ almanac -vv cal easter 2025
    $ almanac --no-flight-recorder tz list
"""

import logging
import os
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from almanac import __version__, config
from almanac.logging import LoggingSettings, configure_logging, log_startup, verbosity_level

from .calendar_cmds import cal as cal_group
from .helpers.log_level_parser import parse_log_level
from .interval_cmds import interval as interval_group
from .tz_cmds import tz as tz_group

logger = logging.getLogger(__name__)


HELP = """ALMANAC command-line interface.

    Calendar and temporal arithmetic on explicit inputs: Julian Day Numbers,
    Gregorian and Julian calendar rules, Easter dates, timezone offsets and
    abbreviations, and calendar-aware intervals. Nothing depends on the
    current time or the machine's timezone.
    """

DEFAULT_LOG_PATH = Path(user_log_dir("almanac", appauthor=False, ensure_exists=True)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[clickx.ColorOption(show_envvar=True), clickx.ExtraVersionOption()],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more log records on stderr: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show fewer log records on stderr: ERROR with -q, CRITICAL with -qq.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show every record with its UTC time, logger name and source line.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="ALMANAC_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="ALMANAC_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer every record, DEBUG included, and write the buffer to --log-path "
        "when a command fails or a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="ALMANAC_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder to --log-path when the command succeeds.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar="ALMANAC_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
    help=(
        "Set the level of one logger as NAME=LEVEL, for both stderr and the "
        "flight recorder (e.g. -L almanac.service_layer=INFO). Repeatable; "
        "ALMANAC_LOGGER_LEVELS takes a comma or space separated list."
    ),
)
@clickx.pass_context
def almanac(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """ALMANAC command-line interface."""
    settings = LoggingSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(
        logger,
        settings,
        app_version=__version__,
        tz_provider=os.environ.get(config.TZ_PROVIDER_ENV) or config.ProviderName.ZONEINFO.value,
    )
    ctx.call_on_close(logging.shutdown)


almanac.add_command(cal_group)
almanac.add_command(tz_group)
almanac.add_command(interval_group)
