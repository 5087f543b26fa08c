"""Fixtures for end-to-end CLI tests.

Every test runs in an isolated filesystem. `invoke` points the flight
recorder at ``almanac.log`` inside it; `invoke_memory` also selects the
fixed-offset in-memory timezone provider.
"""

import logging

import pytest
from click.testing import CliRunner

from almanac.entrypoints.cli.main import almanac

# pylint: disable=redefined-outer-name

LOG_FILE = "almanac.log"


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo ``-L`` overrides, which outlive the invocation that set them."""
    loggers = logging.root.manager.loggerDict
    saved = {name: lg.level for name, lg in loggers.items() if isinstance(lg, logging.Logger)}
    yield
    for name, lg in list(loggers.items()):
        if isinstance(lg, logging.Logger):
            lg.setLevel(saved.get(name, logging.NOTSET))


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem so the flight recorder writes inside it."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Run `almanac` with the flight recorder pointed inside the isolated filesystem."""

    def _invoke(args, env=None):
        return runner.invoke(almanac, ["--log-path", LOG_FILE, *args], env=env)

    return _invoke


@pytest.fixture
def invoke_memory(invoke):
    """Like `invoke`, with the fixed-offset in-memory timezone provider."""

    def _invoke(args, env=None):
        return invoke(args, env={"ALMANAC_TZ_PROVIDER": "memory", **(env or {})})

    return _invoke
