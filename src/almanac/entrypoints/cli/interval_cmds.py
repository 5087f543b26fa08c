"""ALMANAC interval CLI: calendar-aware differences and interval arithmetic.

Examples
    $ almanac interval diff 2024-01-01 2024-03-01
    2 months
    $ almanac interval add 2024-01-31 "+1 month"
    2024-02-29T00:00:00Z
"""

from __future__ import annotations

import click
import click_extra as clickx

from almanac.domain.duration import diff as diff_instants
from almanac.domain.duration import format_interval, modify, parse_interval
from almanac.domain.julian_day import format_instant

from .helpers import INSTANT, domain_errors

TIMESTAMP_FORMAT = "Y-m-dTH:i:sZ"


@click.group(cls=clickx.ExtraGroup)
def interval() -> None:
    """Differences between instants and interval strings."""


@interval.command()
@click.argument("start", type=INSTANT)
@click.argument("end", type=INSTANT)
def diff(start: int, end: int) -> None:
    """Print the calendar duration from START to END.

    When END precedes START the magnitude is printed followed by "(inverted)".
    """
    with domain_errors():
        duration = diff_instants(start, end)
    text = format_interval(duration) or "0 seconds"
    click.echo(f"{text} (inverted)" if duration.invert else text)


@interval.command("format")
@click.argument("text")
def format_cmd(text: str) -> None:
    """Parse an interval such as "3 days" and print it normalized."""
    with domain_errors():
        click.echo(format_interval(parse_interval(text)))


@interval.command()
@click.argument("instant", type=INSTANT)
@click.argument("text")
def add(instant: int, text: str) -> None:
    """Apply an interval such as "+1 month" or "-2 days" to INSTANT."""
    with domain_errors():
        click.echo(format_instant(TIMESTAMP_FORMAT, modify(instant, text)))
