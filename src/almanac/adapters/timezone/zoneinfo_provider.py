"""Timezone rule provider backed by the IANA database through `zoneinfo`.

All zones are opened once, in the constructor, and kept for the lifetime of
the provider. `zoneinfo` reads the system timezone database when present and
falls back to the `tzdata` package otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from almanac.domain.errors import OutOfRange, TimezoneDataUnavailable, UnknownTimezone
from almanac.interfaces.timezone_provider import TimezoneRuleProvider

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Instants that stay inside `datetime`'s year 1..9999 after any UTC offset.
MIN_INSTANT = int((datetime(1, 1, 2, tzinfo=timezone.utc) - _EPOCH).total_seconds())
MAX_INSTANT = int((datetime(9999, 12, 30, tzinfo=timezone.utc) - _EPOCH).total_seconds())


class ZoneInfoRuleProvider(TimezoneRuleProvider):
    """Rule provider over the IANA timezone database.

    Args:
        identifiers: Zones to load. Defaults to every zone reported by
            `zoneinfo.available_timezones()`.

    Raises:
        TimezoneDataUnavailable: If no zones are found or one cannot be opened.
    """

    def __init__(self, identifiers: Iterable[str] | None = None) -> None:
        names = sorted(available_timezones() if identifiers is None else set(identifiers))
        if not names:
            raise TimezoneDataUnavailable("no timezone identifiers found")
        zones: dict[str, ZoneInfo] = {}
        for name in names:
            try:
                zones[name] = ZoneInfo(name)
            except (ZoneInfoNotFoundError, ValueError, OSError) as e:
                raise TimezoneDataUnavailable(f"cannot open zone '{name}'") from e
        self._zones = zones
        self._identifiers = tuple(names)
        logger.debug("Loaded %d timezone(s) from zoneinfo", len(self._identifiers))

    def _local(self, identifier: str, instant: int) -> datetime:
        if (zone := self._zones.get(identifier)) is None:
            raise UnknownTimezone(identifier)
        if not MIN_INSTANT <= instant <= MAX_INSTANT:
            raise OutOfRange(instant, MIN_INSTANT, MAX_INSTANT)
        return (_EPOCH + timedelta(seconds=instant)).astimezone(zone)

    def list_identifiers(self) -> Sequence[str]:
        return self._identifiers

    def offset_minutes(self, identifier: str, instant: int) -> int:
        offset = self._local(identifier, instant).utcoffset()
        assert offset is not None  # ZoneInfo always yields an offset
        return round(offset.total_seconds() / 60)

    def abbreviation(self, identifier: str, instant: int) -> str:
        return self._local(identifier, instant).tzname() or ""

    def version(self) -> str:
        try:
            return f"tzdata {package_version('tzdata')}"
        except PackageNotFoundError:
            return "system"
