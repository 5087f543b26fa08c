"""Fixtures for timezone rule provider contract tests."""

from collections.abc import Iterable

import pytest

from almanac.adapters.timezone import InMemoryRuleProvider, ZoneInfoRuleProvider
from almanac.interfaces.timezone_provider import TimezoneRuleProvider
from tests.helpers.zones import sample_zones


@pytest.fixture(params=["memory", "zoneinfo"])
def rule_provider(request: pytest.FixtureRequest) -> Iterable[TimezoneRuleProvider]:
    """Return a provider loaded with the sample zones for the requested backend.

    Supported params:
      - `"memory"` → InMemoryRuleProvider over the 2024 span tables
      - `"zoneinfo"` → ZoneInfoRuleProvider restricted to the same identifiers

    Both describe the same zones, so for instants in 2024 they must agree.
    """
    match request.param:
        case "memory":
            yield InMemoryRuleProvider(sample_zones())
        case "zoneinfo":
            yield ZoneInfoRuleProvider(sample_zones())
        case _:
            raise ValueError(f"unknown rule provider type: {request.param}")
