"""In-memory timezone rule provider.

Rules are explicit tables of spans: each span starts at an instant and fixes
the offset and abbreviation until the next span starts. The first span of a
zone also covers everything before it. Useful for tests, demos and
environments without timezone data.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from almanac.domain.errors import TimezoneDataUnavailable, UnknownTimezone
from almanac.interfaces.timezone_provider import TimezoneRuleProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneSpan:
    """Offset and abbreviation in effect from `start` until the next span."""

    start: int
    offset_minutes: int
    abbreviation: str


# Fixed-offset zones used when no timezone database is configured.
FIXED_ZONES: dict[str, tuple[int, str]] = {
    "Etc/GMT": (0, "GMT"),
    "Etc/GMT+5": (-300, "-05"),
    "Etc/GMT+6": (-360, "-06"),
    "Etc/GMT-1": (60, "+01"),
    "Etc/GMT-9": (540, "+09"),
    "Etc/UTC": (0, "UTC"),
    "UTC": (0, "UTC"),
}


class InMemoryRuleProvider(TimezoneRuleProvider):
    """Timezone rule provider backed by in-memory span tables."""

    def __init__(
        self, zones: Mapping[str, Sequence[ZoneSpan]], version: str = "memory"
    ) -> None:
        self._spans: dict[str, tuple[ZoneSpan, ...]] = {}
        self._starts: dict[str, list[int]] = {}
        for identifier in sorted(zones):
            spans = tuple(sorted(zones[identifier], key=lambda span: span.start))
            if not spans:
                raise TimezoneDataUnavailable(f"zone '{identifier}' has no spans")
            self._spans[identifier] = spans
            self._starts[identifier] = [span.start for span in spans]
        self._identifiers = tuple(self._spans)
        self._version = version
        logger.debug("Loaded %d in-memory timezone(s)", len(self._identifiers))

    @classmethod
    def from_fixed_offsets(
        cls, offsets: Mapping[str, tuple[int, str]] | None = None
    ) -> InMemoryRuleProvider:
        """Build a provider of fixed-offset zones from `{id: (minutes, abbr)}`."""
        offsets = FIXED_ZONES if offsets is None else offsets
        return cls(
            {
                identifier: [ZoneSpan(0, minutes, abbreviation)]
                for identifier, (minutes, abbreviation) in offsets.items()
            }
        )

    # --- lookups ---

    def _span_at(self, identifier: str, instant: int) -> ZoneSpan:
        if identifier not in self._spans:
            raise UnknownTimezone(identifier)
        position = bisect_right(self._starts[identifier], instant) - 1
        return self._spans[identifier][max(position, 0)]

    def list_identifiers(self) -> Sequence[str]:
        return self._identifiers

    def offset_minutes(self, identifier: str, instant: int) -> int:
        return self._span_at(identifier, instant).offset_minutes

    def abbreviation(self, identifier: str, instant: int) -> str:
        return self._span_at(identifier, instant).abbreviation

    def version(self) -> str:
        return self._version
