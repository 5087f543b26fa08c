"""Click parameter types for calendars, dates and instants.

Instants are accepted either as integer Unix seconds or as UTC timestamps of
the form ``YYYY-MM-DD``, ``YYYY-MM-DDTHH:MM`` or ``YYYY-MM-DDTHH:MM:SS``
(optionally suffixed with ``Z``). Dates are ``YYYY-MM-DD`` with an optional
leading minus sign for years before 1 BC.
"""

from __future__ import annotations

import re
from typing import Any

import click

from almanac.domain.calendar import Calendar, CalendarDate, as_calendar
from almanac.domain.errors import AlmanacError
from almanac.domain.julian_day import instant_from_fields

_DATE = r"(?P<year>-?\d{4,})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
_TIME = r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?Z?"

DATE_RE = re.compile(rf"^{_DATE}$")
TIMESTAMP_RE = re.compile(rf"^{_DATE}{_TIME}$")


class CalendarParamType(click.Choice):
    """Case-insensitive calendar choice converted to a `Calendar` member."""

    name = "calendar"

    def __init__(self) -> None:
        super().__init__([c.label for c in Calendar], case_sensitive=False)

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Calendar:
        if isinstance(value, Calendar):
            return value
        return as_calendar(super().convert(value, param, ctx))


class DateParamType(click.ParamType):
    """A Gregorian ``YYYY-MM-DD`` date, validated but not yet tied to a calendar."""

    name = "date"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[int, int, int]:
        if isinstance(value, tuple):
            return value
        if (match := DATE_RE.match(str(value).strip())) is None:
            self.fail(f"{value!r} is not a YYYY-MM-DD date.", param, ctx)
        return int(match["year"]), int(match["month"]), int(match["day"])


class InstantParamType(click.ParamType):
    """Unix seconds or a UTC timestamp, converted to integer seconds."""

    name = "instant"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return value
        text = str(value).strip()
        if re.fullmatch(r"[+-]?\d+", text):
            return int(text)
        if (match := TIMESTAMP_RE.match(text)) is None:
            self.fail(f"{value!r} is neither Unix seconds nor a UTC timestamp.", param, ctx)
        fields = {name: int(v) for name, v in match.groupdict().items() if v is not None}
        try:
            return instant_from_fields(**fields)
        except AlmanacError as e:
            self.fail(str(e), param, ctx)


def to_calendar_date(fields: tuple[int, int, int], calendar: Calendar) -> CalendarDate:
    """Build a `CalendarDate` in `calendar` from parsed `(year, month, day)` fields."""
    year, month, day = fields
    return CalendarDate(year, month, day, calendar)


CALENDAR = CalendarParamType()
DATE = DateParamType()
INSTANT = InstantParamType()
