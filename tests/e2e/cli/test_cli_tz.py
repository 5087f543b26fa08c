"""End-to-end tests for `almanac tz`.

Most tests use the fixed-offset in-memory provider so results do not depend
on the installed timezone database; a few check the zoneinfo provider.
"""

import pytest

# pylint: disable=unused-argument


def test_list(invoke_memory):
    """Identifiers are printed one per line in canonical order."""
    result = invoke_memory(["tz", "list"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Etc/GMT",
        "Etc/GMT+5",
        "Etc/GMT+6",
        "Etc/GMT-1",
        "Etc/GMT-9",
        "Etc/UTC",
        "UTC",
    ]


@pytest.mark.parametrize(
    "identifier, expected",
    [("Etc/GMT+5", "-300 -05:00"), ("Etc/GMT-9", "540 +09:00"), ("UTC", "0 +00:00")],
)
def test_offset(invoke_memory, identifier, expected):
    """Offsets are printed in minutes and as +-HH:MM."""
    result = invoke_memory(["tz", "offset", identifier, "--at", "2024-07-01"])
    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_abbr(invoke_memory):
    """The abbreviation in effect is printed."""
    result = invoke_memory(["tz", "abbr", "Etc/GMT-1", "--at", "0"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "+01"


def test_resolve_unique(invoke_memory):
    """An abbreviation used by one zone resolves without a warning."""
    result = invoke_memory(["tz", "resolve", "GMT", "--at", "0"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Etc/GMT"
    assert "used by" not in result.stderr


def test_resolve_shared_warns(invoke_memory):
    """A shared abbreviation picks the first zone and warns on stderr."""
    result = invoke_memory(["tz", "resolve", "UTC", "--at", "0"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Etc/UTC"
    assert "UTC is used by 2 timezones; picked Etc/UTC." in result.stderr


def test_resolve_not_found(invoke_memory):
    """Unused abbreviations exit with status 1."""
    result = invoke_memory(["tz", "resolve", "XYZ", "--at", "0"])
    assert result.exit_code == 1
    assert "No timezone uses abbreviation 'XYZ' at instant 0." in result.stderr


def test_abbreviations(invoke_memory):
    """Abbreviations are listed alphabetically with their zones."""
    result = invoke_memory(["tz", "abbreviations", "--at", "0"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "+01: Etc/GMT-1",
        "+09: Etc/GMT-9",
        "-05: Etc/GMT+5",
        "-06: Etc/GMT+6",
        "GMT: Etc/GMT",
        "UTC: Etc/UTC, UTC",
    ]


def test_transitions(invoke_memory):
    """A single year gives thirteen samples at the zone's own midnights."""
    result = invoke_memory(
        ["tz", "transitions", "Etc/GMT-1", "--from-year", "2024", "--span", "0"]
    )
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 13
    assert lines[0] == "2023-12-31T23:00:00Z 60 +01:00"
    assert lines[-1] == "2024-12-31T22:59:59Z 60 +01:00"


def test_transitions_changes_only(invoke_memory):
    """A fixed offset never changes after the first sample."""
    result = invoke_memory(
        ["tz", "transitions", "UTC", "--from-year", "2024", "--span", "3", "--changes-only"]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["2024-01-01T00:00:00Z 0 +00:00"]


def test_transitions_span_from_environment(invoke_memory):
    """ALMANAC_TRANSITION_YEARS sets the default span."""
    result = invoke_memory(
        ["tz", "transitions", "UTC", "--from-year", "2024"],
        env={"ALMANAC_TRANSITION_YEARS": "1"},
    )
    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 26


def test_transitions_bad_span_setting(invoke_memory):
    """An unparsable span setting is reported, not ignored."""
    result = invoke_memory(
        ["tz", "transitions", "UTC", "--from-year", "2024"],
        env={"ALMANAC_TRANSITION_YEARS": "many"},
    )
    assert result.exit_code == 1
    assert "ALMANAC_TRANSITION_YEARS='many' is invalid" in result.stderr


def test_unknown_identifier(invoke_memory):
    """Unknown identifiers exit with status 1."""
    result = invoke_memory(["tz", "offset", "Mars/Olympus", "--at", "0"])
    assert result.exit_code == 1
    assert "Unknown timezone identifier 'Mars/Olympus'." in result.stderr


def test_unknown_provider(invoke):
    """A bad provider name aborts before any query."""
    result = invoke(["tz", "version"], env={"ALMANAC_TZ_PROVIDER": "pytz"})
    assert result.exit_code == 1
    assert "is not a known provider" in result.stderr


def test_at_is_required(invoke_memory):
    """There is no implicit current time."""
    result = invoke_memory(["tz", "offset", "UTC"])
    assert result.exit_code == 2


def test_version_memory(invoke_memory):
    """The memory provider reports its own version."""
    result = invoke_memory(["tz", "version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "memory"


@pytest.mark.parametrize(
    "at, expected",
    [("2024-01-15T12:00", "-300 -05:00"), ("2024-07-15T12:00", "-240 -04:00")],
)
def test_zoneinfo_offset(invoke, at, expected):
    """The default provider applies daylight-saving time."""
    result = invoke(["tz", "offset", "America/New_York", "--at", at])
    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_zoneinfo_abbr(invoke):
    """The default provider reports IANA abbreviations."""
    result = invoke(["tz", "abbr", "Europe/Paris", "--at", "2024-07-15"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "CEST"
