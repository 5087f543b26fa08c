"""ALMANAC timezone CLI: offsets, abbreviations and sampled transitions.

Every query that depends on time takes an explicit ``--at`` instant; there is
no implicit "now".

Behavior
- The rule provider is chosen through ``ALMANAC_TZ_PROVIDER`` (``zoneinfo`` by
  default, ``memory`` for a small fixed-offset table) and loaded once per
  invocation.
- A provider that fails to load aborts the command with status 1.

Examples
    $ almanac tz offset America/New_York --at 2024-07-01
    $ almanac tz resolve CST --at 2024-01-15T12:00
    $ almanac tz transitions Europe/Paris --from-year 2024 --span 1
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx

from almanac import config
from almanac.bootstrap import bootstrap
from almanac.domain.julian_day import format_instant
from almanac.service_layer.timezone_resolver import TimezoneResolver

from .helpers import INSTANT, domain_errors, warn

logger = logging.getLogger(__name__)

at_option = click.option(
    "--at",
    "instant",
    type=INSTANT,
    required=True,
    help="Instant to evaluate, as Unix seconds or a UTC YYYY-MM-DD[THH:MM[:SS]] timestamp.",
)


def _resolver() -> TimezoneResolver:
    with domain_errors():
        return bootstrap().resolver


def _format_offset(minutes: int) -> str:
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


@click.group(cls=clickx.ExtraGroup)
def tz() -> None:
    """Timezone identifiers, offsets and abbreviations."""


@tz.command("list")
def list_cmd() -> None:
    """List all timezone identifiers in canonical order."""
    for identifier in _resolver().identifiers():
        click.echo(identifier)


@tz.command()
@click.argument("identifier")
@at_option
def offset(identifier: str, instant: int) -> None:
    """Print the UTC offset of IDENTIFIER in minutes and as ±HH:MM."""
    resolver = _resolver()
    with domain_errors():
        minutes = resolver.offset_at(identifier, instant)
    click.echo(f"{minutes} {_format_offset(minutes)}")


@tz.command()
@click.argument("identifier")
@at_option
def abbr(identifier: str, instant: int) -> None:
    """Print the abbreviation IDENTIFIER uses at the given instant."""
    resolver = _resolver()
    with domain_errors():
        click.echo(resolver.abbreviation_at(identifier, instant))


@tz.command()
@click.argument("abbreviation")
@at_option
def resolve(abbreviation: str, instant: int) -> None:
    """Print the first identifier that uses ABBREVIATION at the given instant."""
    resolver = _resolver()
    with domain_errors():
        identifier = resolver.resolve_abbreviation(abbreviation, instant)
    sharing = resolver.abbreviations(instant).get(abbreviation, ())
    if len(sharing) > 1:
        warn(f"{abbreviation} is used by {len(sharing)} timezones; picked {identifier}.")
    click.echo(identifier)


@tz.command()
@at_option
def abbreviations(instant: int) -> None:
    """List every abbreviation in use at the given instant with its timezones."""
    resolver = _resolver()
    with domain_errors():
        grouped = resolver.abbreviations(instant)
    for abbreviation in sorted(grouped):
        click.echo(f"{abbreviation}: {', '.join(grouped[abbreviation])}")


@tz.command()
@click.argument("identifier")
@click.option("--from-year", type=int, required=True, help="First year to sample.")
@click.option(
    "--span",
    type=click.IntRange(min=0),
    default=None,
    help=f"Number of years after --from-year to sample [default: ${config.TRANSITION_YEARS_ENV} or {config.DEFAULT_TRANSITION_YEARS}].",
)
@click.option(
    "--changes-only",
    is_flag=True,
    help="Only print samples whose offset differs from the previous sample.",
)
def transitions(identifier: str, from_year: int, span: int | None, changes_only: bool) -> None:
    """Sample the offset of IDENTIFIER at month and year boundaries.

    Samples are taken at local midnight on the first of each month and at the
    last local second of each year, on the wall clock of IDENTIFIER. This
    approximates where offset changes happen; it does not pinpoint the exact
    transition instants.
    """
    resolver = _resolver()
    with domain_errors():
        year_span = config.get_transition_years() if span is None else span
        points = resolver.transitions(identifier, from_year, year_span)
    logger.debug("Sampled %d points for %s", len(points), identifier)
    previous: int | None = None
    for point in points:
        if not changes_only or point.utc_offset_minutes != previous:
            stamp = format_instant("Y-m-dTH:i:sZ", point.instant)
            click.echo(f"{stamp} {point.utc_offset_minutes} {_format_offset(point.utc_offset_minutes)}")
        previous = point.utc_offset_minutes


@tz.command()
def version() -> None:
    """Print the version of the loaded timezone data."""
    click.echo(_resolver().version())
