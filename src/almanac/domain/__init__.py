"""Domain layer for ALMANAC.

Contains the calendar rules and arithmetic: calendar dates, Julian Day
Numbers, Easter computation, durations and the error taxonomy. Everything
here is pure and synchronous.

Dependency rule: do not import from `almanac.adapters`, `almanac.service_layer`
or `almanac.entrypoints`.
"""
