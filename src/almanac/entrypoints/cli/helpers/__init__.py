"""CLI helpers for ALMANAC.

Utilities used by the command-line interface: parameter types for instants
and dates, translation of domain errors into Click errors, and message
emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .errors import domain_errors
from .messages import error, warn
from .params import CALENDAR, DATE, INSTANT

__all__ = ["CALENDAR", "DATE", "INSTANT", "domain_errors", "error", "warn"]
