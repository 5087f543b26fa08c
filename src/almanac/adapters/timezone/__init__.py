"""Timezone rule provider adapters.

`ZoneInfoRuleProvider` serves the IANA database through `zoneinfo`;
`InMemoryRuleProvider` serves explicit span tables for tests and offline use.
"""

from .memory import FIXED_ZONES, InMemoryRuleProvider, ZoneSpan
from .zoneinfo_provider import ZoneInfoRuleProvider

__all__ = ["FIXED_ZONES", "InMemoryRuleProvider", "ZoneInfoRuleProvider", "ZoneSpan"]
