"""Bootstrap the timezone resolver with its rule provider."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from almanac import config
from almanac.adapters.timezone import InMemoryRuleProvider, ZoneInfoRuleProvider
from almanac.interfaces.timezone_provider import TimezoneRuleProvider
from almanac.service_layer.timezone_resolver import TimezoneResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    provider: TimezoneRuleProvider
    resolver: TimezoneResolver


def build_rule_provider(name: config.ProviderName) -> TimezoneRuleProvider:
    """Build and load the named timezone rule provider.

    Raises:
        TimezoneDataUnavailable: If the provider cannot load its data.
    """
    match name:
        case config.ProviderName.ZONEINFO:
            provider: TimezoneRuleProvider = ZoneInfoRuleProvider()
        case config.ProviderName.MEMORY:
            provider = InMemoryRuleProvider.from_fixed_offsets()
        case _:
            raise ValueError(f"unknown timezone provider: {name}")
    logger.debug("Timezone provider %s loaded (%s)", name.value, provider.version())
    return provider


def bootstrap(provider: TimezoneRuleProvider | None = None) -> AppContainer:
    """Load the configured rule provider and wire the resolver around it.

    Args:
        provider: Use this provider instead of the configured one.
    """
    if provider is None:
        provider = build_rule_provider(config.get_tz_provider())
    return AppContainer(provider=provider, resolver=TimezoneResolver(provider))
