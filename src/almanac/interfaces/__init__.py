"""Interfaces (application boundary) for ALMANAC.

Defines framework-free contracts: the timezone rule provider port and the
small value objects it exchanges with the service layer.

Dependency rule: may import `almanac.domain` value types and errors only. It
may be imported by `almanac.service_layer`, `almanac.adapters` and
`almanac.bootstrap`.
"""
