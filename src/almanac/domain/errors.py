"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class AlmanacError(Exception):
    """Base class for all almanac errors."""


# ============================================================================
#                       Calendar and conversion errors
# ============================================================================


class CalendarError(AlmanacError):
    """Base class for calendar validation and conversion errors."""


class InvalidCalendar(CalendarError):
    """Raised when a calendar id is not one of the supported calendars."""

    def __init__(self, calendar: object) -> None:
        super().__init__(f"Unknown calendar {calendar!r}.")
        self.calendar = calendar


class InvalidMonth(CalendarError):
    """Raised when a month number lies outside 1..12."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Month {month} is outside 1..12.")
        self.month = month


class InvalidDate(CalendarError):
    """Raised when a day does not exist in its year/month/calendar."""

    def __init__(self, year: int, month: int, day: int, calendar: str) -> None:
        super().__init__(
            f"Day {day} does not exist in {year:04d}-{month:02d} ({calendar} calendar)."
        )
        self.year = year
        self.month = month
        self.day = day
        self.calendar = calendar


class InvalidTime(CalendarError):
    """Raised when a time of day has an hour, minute or second out of range."""

    def __init__(self, hour: int, minute: int, second: int) -> None:
        super().__init__(
            f"Time {hour:02d}:{minute:02d}:{second:02d} is not a valid time of day."
        )
        self.hour = hour
        self.minute = minute
        self.second = second


class OutOfRange(CalendarError):
    """Raised when a year or day number falls outside the supported span.

    Attributes:
        value (int): The offending value.
        lower (int): Smallest supported value.
        upper (int): Largest supported value.
    """

    def __init__(self, value: int, lower: int, upper: int) -> None:
        super().__init__(f"{value} is outside the supported range [{lower}, {upper}].")
        self.value = value
        self.lower = lower
        self.upper = upper


# ============================================================================
#                              Interval errors
# ============================================================================


class ParseError(AlmanacError):
    """Raised when interval text carries no recognizable `<n> <unit>` token."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No interval found in {text!r}.")
        self.text = text


# ============================================================================
#                              Timezone errors
# ============================================================================


class NotFound(AlmanacError):
    """Base class for failed timezone lookups."""


class AbbreviationNotFound(NotFound):
    """Raised when no identifier uses an abbreviation at the given instant."""

    def __init__(self, abbreviation: str, instant: int) -> None:
        super().__init__(
            f"No timezone uses abbreviation '{abbreviation}' at instant {instant}."
        )
        self.abbreviation = abbreviation
        self.instant = instant


class UnknownTimezone(NotFound):
    """Raised when an identifier is not known to the rule provider."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown timezone identifier '{identifier}'.")
        self.identifier = identifier


class TimezoneDataUnavailable(AlmanacError):
    """Raised when the timezone rule provider cannot load its data."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Timezone data could not be loaded: {reason}")
        self.reason = reason
