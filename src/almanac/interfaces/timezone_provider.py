"""Interface for timezone rule providers.

A rule provider owns authoritative timezone data: the list of identifiers and,
for any identifier and instant, the UTC offset and abbreviation in effect.
Providers load their data once when constructed and are read-only afterwards,
so a single instance can be queried from several threads without locking.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TransitionPoint:
    """Offset observed at a sampled instant."""

    instant: int  # seconds since the Unix epoch
    utc_offset_minutes: int  # east-positive


class TimezoneRuleProvider(abc.ABC):
    """Contract for a source of timezone identifiers, offsets and abbreviations."""

    @abc.abstractmethod
    def list_identifiers(self) -> Sequence[str]:
        """Return every known identifier in a stable, sorted order.

        The order is part of the contract: abbreviation resolution returns the
        first matching identifier in this order.
        """

    @abc.abstractmethod
    def offset_minutes(self, identifier: str, instant: int) -> int:
        """Return the UTC offset in effect at `instant`, in minutes east of UTC.

        The offset includes any daylight-saving adjustment.

        Raises:
            UnknownTimezone: If `identifier` is not known to the provider.
            OutOfRange: If the provider cannot represent `instant`.
        """

    @abc.abstractmethod
    def abbreviation(self, identifier: str, instant: int) -> str:
        """Return the short abbreviation in effect at `instant` (e.g. ``"CEST"``).

        Raises:
            UnknownTimezone: If `identifier` is not known to the provider.
            OutOfRange: If the provider cannot represent `instant`.
        """

    @abc.abstractmethod
    def version(self) -> str:
        """Return a version string for the loaded timezone data."""
