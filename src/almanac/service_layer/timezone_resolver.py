"""Timezone identifier, offset and abbreviation queries.

`TimezoneResolver` answers every question through a `TimezoneRuleProvider`
loaded beforehand. It keeps no state of its own besides the provider, and
every query takes its instant explicitly, so results are reproducible and
safe to compute from several threads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from almanac.domain.errors import AbbreviationNotFound, UnknownTimezone
from almanac.domain.julian_day import instant_from_fields
from almanac.interfaces.timezone_provider import TimezoneRuleProvider, TransitionPoint

logger = logging.getLogger(__name__)


class TimezoneResolver:
    """Queries over a loaded timezone rule provider."""

    def __init__(self, provider: TimezoneRuleProvider) -> None:
        self._provider = provider

    def identifiers(self) -> Sequence[str]:
        """Return all identifiers in the provider's canonical sorted order."""
        return self._provider.list_identifiers()

    def zone_name(self, identifier: str) -> str:
        """Return `identifier` after checking that the provider knows it.

        Raises:
            UnknownTimezone: If the identifier is not known.
        """
        if identifier not in self.identifiers():
            raise UnknownTimezone(identifier)
        return identifier

    def offset_at(self, identifier: str, instant: int) -> int:
        """Return the offset in effect at `instant`, in minutes east of UTC.

        Daylight-saving time is included; this is never the zone's nominal
        standard offset unless that is what applies at `instant`.
        """
        return self._provider.offset_minutes(identifier, instant)

    def abbreviation_at(self, identifier: str, instant: int) -> str:
        """Return the abbreviation in effect at `instant`."""
        return self._provider.abbreviation(identifier, instant)

    def resolve_abbreviation(self, abbreviation: str, instant: int) -> str:
        """Return the first identifier using `abbreviation` at `instant`.

        Identifiers are scanned in canonical order, so an abbreviation shared
        by several zones (``"CST"``, ``"IST"``) always resolves to the same
        identifier for the same instant and rule set.

        Raises:
            AbbreviationNotFound: If no identifier uses the abbreviation.
        """
        for identifier in self.identifiers():
            if self._provider.abbreviation(identifier, instant) == abbreviation:
                logger.debug("Resolved %s at %s to %s", abbreviation, instant, identifier)
                return identifier
        logger.debug("No timezone uses %s at %s", abbreviation, instant)
        raise AbbreviationNotFound(abbreviation, instant)

    def abbreviations(self, instant: int) -> dict[str, tuple[str, ...]]:
        """Group identifiers by the abbreviation each uses at `instant`.

        Returns:
            Mapping of abbreviation to identifiers in canonical order; keys
            appear in order of first use.
        """
        grouped: dict[str, list[str]] = {}
        for identifier in self.identifiers():
            abbreviation = self._provider.abbreviation(identifier, instant)
            if abbreviation:
                grouped.setdefault(abbreviation, []).append(identifier)
        return {abbreviation: tuple(ids) for abbreviation, ids in grouped.items()}

    def local_instant(
        self,
        identifier: str,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> int:
        """Return the instant at which the wall clock of `identifier` shows the fields.

        The offset is read once at the wall time taken as UTC and once more
        at the first estimate. Exact for wall times an offset change neither
        skips nor repeats; those resolve to an instant next to the change.

        Raises:
            OutOfRange: If the date or the resulting instant is unsupported.
            UnknownTimezone: If the identifier is not known.
        """
        wall = instant_from_fields(year, month, day, hour, minute, second)
        estimate = wall - 60 * self._provider.offset_minutes(identifier, wall)
        return wall - 60 * self._provider.offset_minutes(identifier, estimate)

    def transitions(
        self, identifier: str, from_year: int, year_span: int
    ) -> list[TransitionPoint]:
        """Sample offsets across `[from_year, from_year + year_span]`.

        For each year, the offset is read at local midnight on the first day
        of every month and at 23:59:59 local time on December 31st, giving 13
        ordered points per year. Local means the wall clock of `identifier`.

        Note:
            This is an approximation for spotting offset changes, not a
            transition finder. A change is only seen at the next sampling
            point, and a change that is undone within the same month is
            missed entirely.

        Raises:
            ValueError: If `year_span` is negative.
            OutOfRange: If a sampled year is outside the supported span.
            UnknownTimezone: If the identifier is not known.
        """
        if year_span < 0:
            raise ValueError(f"year_span must be >= 0, got {year_span}")
        self.zone_name(identifier)
        points: list[TransitionPoint] = []
        for year in range(from_year, from_year + year_span + 1):
            samples = [self.local_instant(identifier, year, month, 1) for month in range(1, 13)]
            samples.append(self.local_instant(identifier, year, 12, 31, 23, 59, 59))
            points.extend(
                TransitionPoint(instant, self._provider.offset_minutes(identifier, instant))
                for instant in samples
            )
        return points

    def version(self) -> str:
        """Return the provider's timezone data version."""
        return self._provider.version()
