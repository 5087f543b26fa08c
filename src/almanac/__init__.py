"""ALMANAC

Calendar and temporal arithmetic: Julian Day Numbers, Gregorian and Julian
calendar rules, ecclesiastical Easter, timezone abbreviation resolution and
calendar-aware durations. Every temporal anchor is an explicit argument;
nothing depends on the current time or a process-wide timezone.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
