"""Ecclesiastical Easter Sunday.

The Gregorian computus follows the anonymous algorithm published by Meeus
(also known as the Meeus/Jones/Butcher algorithm); the Julian computus is
Meeus' Julian variant, used by the Eastern churches. Reference dates:
2000-04-23, 2024-03-31, 2025-04-20 (Gregorian).
"""

from __future__ import annotations

import logging

from almanac.domain.calendar import Calendar, CalendarDate, as_calendar
from almanac.domain.julian_day import instant_to_jd, jd_to_gregorian, to_jd

logger = logging.getLogger(__name__)


def _gregorian_easter(year: int) -> tuple[int, int]:
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return month, day + 1


def _julian_easter(year: int) -> tuple[int, int]:
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, day = divmod(d + e + 114, 31)
    return month, day + 1


def easter_date(
    year: int, calendar: Calendar | int | str = Calendar.GREGORIAN
) -> CalendarDate:
    """Return the date of Easter Sunday in `year`.

    Args:
        year: The year to compute Easter for.
        calendar: Which computus to apply. The result is expressed in the same
            calendar, so a Julian Easter comes back as a Julian date.

    Returns:
        Easter Sunday as a `CalendarDate`.
    """
    calendar = as_calendar(calendar)
    if calendar is Calendar.JULIAN:
        month, day = _julian_easter(year)
    else:
        month, day = _gregorian_easter(year)
    return CalendarDate(year, month, day, calendar)


def easter_days(instant: int, calendar: Calendar | int | str = Calendar.GREGORIAN) -> int:
    """Return the signed number of days from Easter Sunday to `instant`.

    Easter is taken from the Gregorian year of the instant's UTC date. Both
    ends are turned into Julian Day Numbers before subtracting, so the count
    is exact across month and year boundaries. Negative values mean the
    instant falls before Easter.
    """
    jdn = instant_to_jd(instant)
    year = jd_to_gregorian(jdn).year
    easter_jdn = to_jd(easter_date(year, calendar))
    logger.debug("Easter %s for year %s is JDN %s", as_calendar(calendar).label, year, easter_jdn)
    return jdn - easter_jdn
