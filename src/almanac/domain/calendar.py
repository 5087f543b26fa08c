"""Calendar systems, leap-year rules and validated calendar dates.

Two proleptic calendars are supported: Gregorian and Julian. They carry the
numeric ids 1 and 2 (as PHP's ``CAL_GREGORIAN`` and ``CAL_JULIAN`` do), so
plain integers are accepted wherever a calendar is expected and coerced
through `as_calendar`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from almanac.domain.errors import InvalidCalendar, InvalidDate, InvalidMonth

# Supported years for day-number conversion (about 5000 years either side of
# the Unix epoch).
MIN_YEAR = -3000
MAX_YEAR = 7000

# Days in each month of a common year, index 0 unused.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Calendar(Enum):
    """Enumeration of supported calendar systems."""

    GREGORIAN = 1
    JULIAN = 2

    @property
    def label(self) -> str:
        """Lower-case name used in messages and on the command line."""
        return self.name.lower()


def as_calendar(calendar: Calendar | int | str) -> Calendar:
    """Coerce a calendar id, name or member into a `Calendar`.

    Args:
        calendar: A `Calendar` member, its numeric id (1 = Gregorian,
            2 = Julian) or its case-insensitive name.

    Returns:
        The matching `Calendar` member.

    Raises:
        InvalidCalendar: If the value names no supported calendar.
    """
    if isinstance(calendar, Calendar):
        return calendar
    if isinstance(calendar, str):
        try:
            return Calendar[calendar.strip().upper()]
        except KeyError as e:
            raise InvalidCalendar(calendar) from e
    if isinstance(calendar, int) and not isinstance(calendar, bool):
        try:
            return Calendar(calendar)
        except ValueError as e:
            raise InvalidCalendar(calendar) from e
    raise InvalidCalendar(calendar)


def is_leap_year(calendar: Calendar | int | str, year: int) -> bool:
    """Return True if `year` is a leap year in `calendar`."""
    if as_calendar(calendar) is Calendar.JULIAN:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(calendar: Calendar | int | str, year: int, month: int) -> int:
    """Return the number of days in `month` of `year`.

    Raises:
        InvalidCalendar: If `calendar` is not Gregorian or Julian.
        InvalidMonth: If `month` is outside 1..12.
    """
    calendar = as_calendar(calendar)
    if not 1 <= month <= 12:
        raise InvalidMonth(month)
    if month == 2 and is_leap_year(calendar, year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_in_year(calendar: Calendar | int | str, year: int) -> int:
    """Return 366 for leap years in `calendar`, otherwise 365."""
    return 366 if is_leap_year(calendar, year) else 365


def check_date(
    year: int, month: int, day: int, calendar: Calendar | int | str = Calendar.GREGORIAN
) -> bool:
    """Return True if the date exists, without raising for bad months or days.

    An unknown calendar is still a caller error and raises `InvalidCalendar`.
    """
    calendar = as_calendar(calendar)
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(calendar, year, month)


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """Value object for a day in a given calendar.

    Construction validates the fields and never rolls an impossible day over
    into the following month.

    Raises:
        InvalidCalendar: If `calendar` is not a supported calendar.
        InvalidMonth: If `month` is outside 1..12.
        InvalidDate: If `day` is below 1 or past the end of the month.
    """

    year: int
    month: int
    day: int
    calendar: Calendar = Calendar.GREGORIAN

    def __post_init__(self) -> None:
        calendar = as_calendar(self.calendar)
        object.__setattr__(self, "calendar", calendar)
        if not 1 <= self.day <= days_in_month(calendar, self.year, self.month):
            raise InvalidDate(self.year, self.month, self.day, calendar.label)

    def as_tuple(self) -> tuple[int, int, int]:
        """Return `(year, month, day)`, handy for ordering within one calendar."""
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"
