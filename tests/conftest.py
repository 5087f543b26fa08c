"""Global pytest fixtures for ALMANAC."""

from __future__ import annotations

import pytest

from almanac.adapters.timezone import InMemoryRuleProvider
from almanac.service_layer.timezone_resolver import TimezoneResolver
from tests.helpers.zones import sample_zones

# pylint: disable=redefined-outer-name


@pytest.fixture
def memory_provider() -> InMemoryRuleProvider:
    """In-memory provider loaded with `sample_zones()`."""
    return InMemoryRuleProvider(sample_zones(), version="test-2024")


@pytest.fixture
def resolver(memory_provider: InMemoryRuleProvider) -> TimezoneResolver:
    """Resolver over the in-memory sample zones."""
    return TimezoneResolver(memory_provider)
