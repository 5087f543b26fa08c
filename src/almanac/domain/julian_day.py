"""Julian Day Number conversions.

A Julian Day Number (JDN) is a continuous integer day count. Dates of both
supported calendars map onto it one-to-one, which makes it the common ground
for comparing dates, counting days and bridging to Unix instants.

Dates are converted with the closed-form integer formulas of Fliegel & Van
Flandern (1968) as restated by Richards; Python's floor division keeps them
exact for negative years as well.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from almanac.domain.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    Calendar,
    CalendarDate,
    as_calendar,
)
from almanac.domain.errors import InvalidTime, OutOfRange

SECONDS_PER_DAY = 86_400
UNIX_EPOCH_JDN = 2_440_588  # 1970-01-01 (Gregorian)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


# ============================================================================
#                         Calendar date <-> JDN
# ============================================================================


def _fields_to_jdn(year: int, month: int, day: int, calendar: Calendar) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4
    if calendar is Calendar.GREGORIAN:
        return jdn - y // 100 + y // 400 - 32045
    return jdn - 32083


def _jdn_to_fields(jdn: int, calendar: Calendar) -> tuple[int, int, int]:
    if calendar is Calendar.GREGORIAN:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def jdn_bounds(calendar: Calendar | int | str = Calendar.GREGORIAN) -> tuple[int, int]:
    """Return the smallest and largest JDN convertible in `calendar`."""
    calendar = as_calendar(calendar)
    return (
        _fields_to_jdn(MIN_YEAR, 1, 1, calendar),
        _fields_to_jdn(MAX_YEAR, 12, 31, calendar),
    )


def to_jd(date: CalendarDate, calendar: Calendar | int | str | None = None) -> int:
    """Convert a calendar date to its Julian Day Number.

    Args:
        date: The date to convert.
        calendar: Calendar the fields are read in. Defaults to the date's own
            calendar; when given, the fields are revalidated in it.

    Returns:
        The Julian Day Number.

    Raises:
        InvalidDate: If the fields do not exist in `calendar`.
        OutOfRange: If the year is outside the supported span.
    """
    if calendar is not None and as_calendar(calendar) is not date.calendar:
        date = CalendarDate(date.year, date.month, date.day, as_calendar(calendar))
    if not MIN_YEAR <= date.year <= MAX_YEAR:
        raise OutOfRange(date.year, MIN_YEAR, MAX_YEAR)
    return _fields_to_jdn(date.year, date.month, date.day, date.calendar)


def from_jd(jdn: int, calendar: Calendar | int | str = Calendar.GREGORIAN) -> CalendarDate:
    """Convert a Julian Day Number to a date in `calendar`.

    Raises:
        OutOfRange: If `jdn` maps outside the supported span.
    """
    calendar = as_calendar(calendar)
    lower, upper = jdn_bounds(calendar)
    if not lower <= jdn <= upper:
        raise OutOfRange(jdn, lower, upper)
    return CalendarDate(*_jdn_to_fields(jdn, calendar), calendar=calendar)


def gregorian_to_jd(month: int, day: int, year: int) -> int:
    """Return the JDN of a Gregorian date (argument order as in `gregoriantojd`)."""
    return to_jd(CalendarDate(year, month, day, Calendar.GREGORIAN))


def julian_to_jd(month: int, day: int, year: int) -> int:
    """Return the JDN of a Julian-calendar date (argument order as in `juliantojd`)."""
    return to_jd(CalendarDate(year, month, day, Calendar.JULIAN))


def jd_to_gregorian(jdn: int) -> CalendarDate:
    """Return the Gregorian date of `jdn`."""
    return from_jd(jdn, Calendar.GREGORIAN)


def jd_to_julian(jdn: int) -> CalendarDate:
    """Return the Julian-calendar date of `jdn`."""
    return from_jd(jdn, Calendar.JULIAN)


# ============================================================================
#                            Instant <-> JDN
# ============================================================================


def instant_to_jd(instant: int) -> int:
    """Return the JDN of the UTC day containing `instant`."""
    return instant // SECONDS_PER_DAY + UNIX_EPOCH_JDN


def jd_to_instant(jdn: int) -> int:
    """Return the instant of 00:00:00 UTC on day `jdn`."""
    return (jdn - UNIX_EPOCH_JDN) * SECONDS_PER_DAY


def day_of_week(jdn: int) -> int:
    """Return the weekday of `jdn`, 0 = Sunday through 6 = Saturday."""
    return (jdn + 1) % 7


def month_name(jdn: int, calendar: Calendar | int | str = Calendar.GREGORIAN) -> str:
    """Return the English name of the month containing `jdn` in `calendar`."""
    return MONTH_NAMES[from_jd(jdn, calendar).month - 1]


# ============================================================================
#                        Instant <-> date/time fields
# ============================================================================


@dataclass(frozen=True, slots=True)
class DateTimeFields:
    """Broken-down UTC representation of an instant."""

    date: CalendarDate
    hour: int
    minute: int
    second: int
    weekday: int
    instant: int


def instant_from_fields(  # pylint: disable=too-many-arguments
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    calendar: Calendar | int | str = Calendar.GREGORIAN,
) -> int:
    """Build a UTC instant from calendar and clock fields.

    Unlike `gmmktime`, out-of-range fields are rejected instead of rolled over.

    Raises:
        InvalidMonth, InvalidDate: If the date does not exist.
        InvalidTime: If the clock fields are out of range.
        OutOfRange: If the year is outside the supported span.
    """
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        raise InvalidTime(hour, minute, second)
    jdn = to_jd(CalendarDate(year, month, day, as_calendar(calendar)))
    return jd_to_instant(jdn) + hour * 3600 + minute * 60 + second


def instant_to_fields(
    instant: int, calendar: Calendar | int | str = Calendar.GREGORIAN
) -> DateTimeFields:
    """Break a UTC instant into date, clock and weekday fields."""
    jdn = instant_to_jd(instant)
    hour, rest = divmod(instant % SECONDS_PER_DAY, 3600)
    minute, second = divmod(rest, 60)
    return DateTimeFields(
        date=from_jd(jdn, calendar),
        hour=hour,
        minute=minute,
        second=second,
        weekday=day_of_week(jdn),
        instant=instant,
    )


_FORMAT_TOKENS = re.compile(r"[YmdHis]")


def format_instant(fmt: str, instant: int) -> str:
    """Render `instant` in UTC using the `Y m d H i s` tokens of `date()`.

    Every other character of `fmt` is copied as is.

    Example:
        ``format_instant("Y-m-d H:i:s", 0)`` gives ``"1970-01-01 00:00:00"``.
    """
    fields = instant_to_fields(instant)
    values = {
        "Y": str(fields.date).rsplit("-", 2)[0],
        "m": f"{fields.date.month:02d}",
        "d": f"{fields.date.day:02d}",
        "H": f"{fields.hour:02d}",
        "i": f"{fields.minute:02d}",
        "s": f"{fields.second:02d}",
    }
    return _FORMAT_TOKENS.sub(lambda match: values[match.group(0)], fmt)
