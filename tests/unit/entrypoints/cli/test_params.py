"""Unit tests for the CLI parameter types."""

import click
import pytest

from almanac.domain.calendar import Calendar, CalendarDate
from almanac.domain.errors import InvalidDate
from almanac.entrypoints.cli.helpers import CALENDAR, DATE, INSTANT
from almanac.entrypoints.cli.helpers.params import to_calendar_date


class TestCalendarParam:
    """Tests for the calendar choice."""

    @staticmethod
    @pytest.mark.parametrize(
        "value, expected",
        [("gregorian", Calendar.GREGORIAN), ("JULIAN", Calendar.JULIAN)],
    )
    def test_convert(value: str, expected: Calendar) -> None:
        """Choices are case-insensitive and come back as members."""
        assert CALENDAR.convert(value, None, None) is expected

    @staticmethod
    def test_rejects_other_names() -> None:
        """Unsupported calendars fail the parameter."""
        with pytest.raises(click.BadParameter):
            CALENDAR.convert("hebrew", None, None)


class TestDateParam:
    """Tests for the date parameter."""

    @staticmethod
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-02-29", (2024, 2, 29)),
            ("1900-2-29", (1900, 2, 29)),
            ("-0044-03-15", (-44, 3, 15)),
        ],
    )
    def test_convert(value: str, expected: tuple[int, int, int]) -> None:
        """Fields are parsed; existence is checked once a calendar is known."""
        assert DATE.convert(value, None, None) == expected

    @staticmethod
    @pytest.mark.parametrize("value", ["2024/02/29", "24-1-1", "today"])
    def test_rejects_malformed(value: str) -> None:
        """Anything that is not YYYY-MM-DD fails."""
        with pytest.raises(click.BadParameter):
            DATE.convert(value, None, None)

    @staticmethod
    def test_to_calendar_date() -> None:
        """Parsed fields are validated in the chosen calendar."""
        assert to_calendar_date((1900, 2, 29), Calendar.JULIAN) == CalendarDate(
            1900, 2, 29, Calendar.JULIAN
        )
        with pytest.raises(InvalidDate):
            to_calendar_date((1900, 2, 29), Calendar.GREGORIAN)


class TestInstantParam:
    """Tests for the instant parameter."""

    @staticmethod
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("0", 0),
            ("-1", -1),
            ("1704067200", 1_704_067_200),
            ("2024-01-01", 1_704_067_200),
            ("2024-01-01T00:01", 1_704_067_260),
            ("2024-01-01 00:00:30Z", 1_704_067_230),
            (42, 42),
        ],
    )
    def test_convert(value, expected: int) -> None:
        """Unix seconds and UTC timestamps are both accepted."""
        assert INSTANT.convert(value, None, None) == expected

    @staticmethod
    @pytest.mark.parametrize("value", ["yesterday", "2024-01-01T25:00", "2023-02-29"])
    def test_rejects_bad_values(value: str) -> None:
        """Unparsable or impossible timestamps fail the parameter."""
        with pytest.raises(click.BadParameter):
            INSTANT.convert(value, None, None)
