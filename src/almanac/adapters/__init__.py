"""Adapters (infrastructure) for ALMANAC.

Provide concrete implementations of the interfaces, such as timezone rule
providers backed by the IANA database or by in-memory tables.

Dependency rule: may import `almanac.domain` and `almanac.interfaces`; the
domain must not import this package.
"""
