"""Configuration utilities for ALMANAC.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from enum import Enum

TZ_PROVIDER_ENV = "ALMANAC_TZ_PROVIDER"  # pragma: no mutate
TRANSITION_YEARS_ENV = "ALMANAC_TRANSITION_YEARS"  # pragma: no mutate

DEFAULT_TRANSITION_YEARS = 5


class ProviderName(Enum):
    """Timezone rule providers selectable through configuration."""

    ZONEINFO = "zoneinfo"
    MEMORY = "memory"


class UnknownProviderError(Exception):
    """Raised when ALMANAC_TZ_PROVIDER names no known provider."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(p.value for p in ProviderName)
        super().__init__(
            f"{TZ_PROVIDER_ENV}={value!r} is not a known provider (choose from: {choices})."
        )
        self.value = value


class InvalidSettingError(Exception):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid: expected {expected}.")
        self.name = name
        self.value = value


def get_tz_provider() -> ProviderName:
    """Get the timezone rule provider to use.

    Returns:
        The provider named by `ALMANAC_TZ_PROVIDER`, or `ProviderName.ZONEINFO`
        when it is unset or empty.

    Raises:
        UnknownProviderError: If the variable names no known provider.
    """
    if not (value := os.environ.get(TZ_PROVIDER_ENV, "").strip()):
        return ProviderName.ZONEINFO
    try:
        return ProviderName(value.lower())
    except ValueError as e:
        raise UnknownProviderError(value) from e


def get_transition_years() -> int:
    """Get the default number of years sampled by the transitions command.

    Returns:
        The value of `ALMANAC_TRANSITION_YEARS`, or `DEFAULT_TRANSITION_YEARS`.

    Raises:
        InvalidSettingError: If the value is not a non-negative integer.
    """
    if not (value := os.environ.get(TRANSITION_YEARS_ENV, "").strip()):
        return DEFAULT_TRANSITION_YEARS
    try:
        years = int(value)
    except ValueError as e:
        raise InvalidSettingError(TRANSITION_YEARS_ENV, value, "an integer") from e
    if years < 0:
        raise InvalidSettingError(TRANSITION_YEARS_ENV, value, "a non-negative integer")
    return years
