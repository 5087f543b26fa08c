"""ALMANAC calendar CLI: leap years, month lengths, day numbers and Easter.

All results go to stdout, one value per line, so they can be piped; errors go
to stderr and exit with status 1.

Examples
    $ almanac cal leap 1900 --calendar julian
    $ almanac cal to-jd 2000-01-01
    $ almanac cal easter 2025
"""

from __future__ import annotations

import click
import click_extra as clickx

from almanac.domain.calendar import Calendar, days_in_month, is_leap_year
from almanac.domain.easter import easter_date, easter_days
from almanac.domain.julian_day import DAY_NAMES, day_of_week, from_jd, to_jd

from .helpers import CALENDAR, DATE, INSTANT, domain_errors
from .helpers.params import to_calendar_date

calendar_option = click.option(
    "--calendar",
    "-c",
    type=CALENDAR,
    default="gregorian",
    show_default=True,
    help="Calendar system the date is expressed in.",
)


@click.group(cls=clickx.ExtraGroup)
def cal() -> None:
    """Calendar rules and Julian Day Number conversions."""


@cal.command()
@click.argument("year", type=int)
@calendar_option
def leap(year: int, calendar: Calendar) -> None:
    """Tell whether YEAR is a leap year."""
    click.echo("yes" if is_leap_year(calendar, year) else "no")


@cal.command("days-in-month")
@click.argument("year", type=int)
@click.argument("month", type=int)
@calendar_option
def days_in_month_cmd(year: int, month: int, calendar: Calendar) -> None:
    """Print the number of days in MONTH of YEAR."""
    with domain_errors():
        click.echo(days_in_month(calendar, year, month))


@cal.command("to-jd")
@click.argument("date", type=DATE)
@calendar_option
def to_jd_cmd(date: tuple[int, int, int], calendar: Calendar) -> None:
    """Print the Julian Day Number of DATE (YYYY-MM-DD)."""
    with domain_errors():
        click.echo(to_jd(to_calendar_date(date, calendar)))


@cal.command("from-jd")
@click.argument("jdn", type=int)
@calendar_option
def from_jd_cmd(jdn: int, calendar: Calendar) -> None:
    """Print the date and weekday of Julian Day Number JDN."""
    with domain_errors():
        date = from_jd(jdn, calendar)
    click.echo(f"{date} {DAY_NAMES[day_of_week(jdn)]}")


@cal.command()
@click.argument("year", type=int)
@calendar_option
def easter(year: int, calendar: Calendar) -> None:
    """Print the date of Easter Sunday in YEAR.

    With --calendar julian the Julian computus is used and the date is printed
    in the Julian calendar.
    """
    click.echo(easter_date(year, calendar))


@cal.command("easter-days")
@click.argument("instant", type=INSTANT)
@calendar_option
def easter_days_cmd(instant: int, calendar: Calendar) -> None:
    """Print the signed number of days from that year's Easter to INSTANT."""
    with domain_errors():
        click.echo(easter_days(instant, calendar))
