"""Translate almanac errors into CLI failures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from almanac.config import InvalidSettingError, UnknownProviderError
from almanac.domain.errors import AlmanacError
from almanac.logging import flush_flight_recorders

from .messages import error

logger = logging.getLogger(__name__)


@contextmanager
def domain_errors() -> Iterator[None]:
    """Report almanac and configuration errors raised in the block, then exit 1.

    The error message goes to stderr with an error glyph. The traceback is
    logged at DEBUG and the flight recorder is written out, so the log file
    holds the trail that led to the failure.

    Raises:
        click.exceptions.Exit: With status 1 when an error was caught.
    """
    try:
        yield
    except (AlmanacError, UnknownProviderError, InvalidSettingError) as e:
        logger.debug("Command failed with %s", type(e).__name__, exc_info=True)
        flush_flight_recorders()
        error(str(e))
        raise click.exceptions.Exit(1) from e
