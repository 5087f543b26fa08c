"""Calendar-aware durations: diff, parse, format and apply.

Years and months are calendar units: adding a month moves to the same day of
the next month, clamped to that month's last day when it is shorter
(Jan 31 + 1 month is Feb 29 in 2024, Feb 29 + 1 year is Feb 28). Days and
smaller units are fixed lengths counted on the Julian Day Number line.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace

from almanac.domain.calendar import Calendar, CalendarDate, days_in_month
from almanac.domain.errors import ParseError
from almanac.domain.julian_day import (
    SECONDS_PER_DAY,
    instant_to_jd,
    jd_to_gregorian,
    jd_to_instant,
    to_jd,
)

FIELDS = ("years", "months", "days", "hours", "minutes", "seconds")

_UNIT_SECONDS = {"days": SECONDS_PER_DAY, "hours": 3600, "minutes": 60, "seconds": 1}

_INTERVAL = re.compile(r"([+-]?\d+)\s*(year|month|day|hour|minute|second)s?\b")


@dataclass(frozen=True, slots=True)
class Duration:
    """Value object for a calendar duration.

    `invert` is the direction flag set by `diff` when the first instant is
    later than the second; the fields themselves stay non-negative there.
    Parsed durations may carry a signed field instead.
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    invert: bool = False

    def is_zero(self) -> bool:
        """Return True if every field is zero."""
        return not any(getattr(self, name) for name in FIELDS)


# ============================================================================
#                              Calendar shifts
# ============================================================================


def _shift_months(jdn: int, months: int) -> int:
    date = jd_to_gregorian(jdn)
    year, month0 = divmod(date.year * 12 + date.month - 1 + months, 12)
    day = min(date.day, days_in_month(Calendar.GREGORIAN, year, month0 + 1))
    return to_jd(CalendarDate(year, month0 + 1, day))


def _whole_units(shift_by: Callable[[int], int], end: int, upper: int) -> int:
    """Count how many units fit before `end`, knowing the answer is `upper` or `upper - 1`."""
    count = max(upper - 1, 0)
    while count < upper and shift_by(count + 1) <= end:
        count += 1
    return count


# ============================================================================
#                                Operations
# ============================================================================


def diff(a: int, b: int) -> Duration:
    """Return the calendar duration between two instants.

    The elapsed time from the earlier to the later instant is broken down into
    whole years, then whole months, then days, hours, minutes and seconds.
    `invert` is True when `a` is later than `b`.

    Example:
        2024-01-01 to 2024-03-01 is ``Duration(months=2)``.
    """
    start, end = (b, a) if a > b else (a, b)
    start_jdn = instant_to_jd(start)
    time_of_day = start % SECONDS_PER_DAY

    def shifted(months: int) -> int:
        return jd_to_instant(_shift_months(start_jdn, months)) + time_of_day

    first = jd_to_gregorian(start_jdn)
    last = jd_to_gregorian(instant_to_jd(end))
    month_span = max((last.year - first.year) * 12 + last.month - first.month, 0)

    years = _whole_units(lambda n: shifted(12 * n), end, month_span // 12)
    months = _whole_units(
        lambda n: shifted(12 * years + n), end, month_span - 12 * years
    )

    rest = end - shifted(12 * years + months)
    days, rest = divmod(rest, SECONDS_PER_DAY)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return Duration(years, months, days, hours, minutes, seconds, invert=a > b)


def parse_interval(text: str) -> Duration:
    """Parse a single `<signed-integer> <unit>` token, e.g. ``"-2 months"``.

    Only the first token is read; composite durations are not supported.
    The matching field is set as given (not normalized), all others are zero.

    Raises:
        ParseError: If `text` contains no such token.
    """
    if (match := _INTERVAL.search(text)) is None:
        raise ParseError(text)
    amount, unit = match.groups()
    return Duration(**{f"{unit}s": int(amount)})


def format_interval(duration: Duration) -> str:
    """Render the non-zero fields as ``"1 year, 2 months, 3 days"``.

    Returns an empty string for a zero duration. The `invert` flag is not
    rendered.
    """
    parts = []
    for name in FIELDS:
        if value := getattr(duration, name):
            unit = name if abs(value) != 1 else name[:-1]
            parts.append(f"{value} {unit}")
    return ", ".join(parts)


def add_interval(instant: int, duration: Duration) -> int:
    """Return `instant` moved forward by `duration` (backward if inverted).

    Years and months are applied first, with end-of-month clamping, then the
    fixed-length units.
    """
    sign = -1 if duration.invert else 1
    jdn = instant_to_jd(instant)
    time_of_day = instant % SECONDS_PER_DAY
    months = sign * (12 * duration.years + duration.months)
    if months:
        jdn = _shift_months(jdn, months)
    offset = sum(getattr(duration, name) * size for name, size in _UNIT_SECONDS.items())
    return jd_to_instant(jdn) + time_of_day + sign * offset


def sub_interval(instant: int, duration: Duration) -> int:
    """Return `instant` moved backward by `duration`."""
    return add_interval(instant, replace(duration, invert=not duration.invert))


def modify(instant: int, text: str) -> int:
    """Apply an interval string such as ``"+1 day"`` or ``"-2 months"``.

    Raises:
        ParseError: If `text` contains no interval token.
    """
    return add_interval(instant, parse_interval(text))
