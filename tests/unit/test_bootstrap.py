"""Test the bootstrap function."""

import pytest

from almanac import config
from almanac.adapters.timezone import InMemoryRuleProvider, ZoneInfoRuleProvider
from almanac.bootstrap import AppContainer, bootstrap, build_rule_provider
from almanac.service_layer.timezone_resolver import TimezoneResolver

# pylint: disable=redefined-outer-name


class TestBuildRuleProvider:
    """Tests for the build_rule_provider function."""

    @staticmethod
    def test_memory() -> None:
        """The memory provider carries the fixed-offset zones."""
        provider = build_rule_provider(config.ProviderName.MEMORY)
        assert isinstance(provider, InMemoryRuleProvider)
        assert "Etc/UTC" in provider.list_identifiers()

    @staticmethod
    def test_zoneinfo() -> None:
        """The zoneinfo provider loads the IANA database."""
        provider = build_rule_provider(config.ProviderName.ZONEINFO)
        assert isinstance(provider, ZoneInfoRuleProvider)


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_uses_configured_provider(monkeypatch: pytest.MonkeyPatch) -> None:
        """ALMANAC_TZ_PROVIDER picks the provider."""
        monkeypatch.setenv(config.TZ_PROVIDER_ENV, "memory")
        container = bootstrap()
        assert isinstance(container, AppContainer)
        assert isinstance(container.provider, InMemoryRuleProvider)
        assert isinstance(container.resolver, TimezoneResolver)
        assert container.resolver.version() == "memory"

    @staticmethod
    def test_explicit_provider_wins(
        monkeypatch: pytest.MonkeyPatch, memory_provider: InMemoryRuleProvider
    ) -> None:
        """An explicit provider bypasses configuration entirely."""
        monkeypatch.setenv(config.TZ_PROVIDER_ENV, "not-a-provider")
        container = bootstrap(memory_provider)
        assert container.provider is memory_provider
        assert container.resolver.version() == "test-2024"

    @staticmethod
    def test_unknown_provider(monkeypatch: pytest.MonkeyPatch) -> None:
        """A bad provider name surfaces as UnknownProviderError."""
        monkeypatch.setenv(config.TZ_PROVIDER_ENV, "not-a-provider")
        with pytest.raises(config.UnknownProviderError):
            bootstrap()
