"""Bootstrap (composition root) for ALMANAC.

Assembles the application at runtime: reads configuration, loads the
configured timezone rule provider once and wires it into the service layer.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain
  wiring directly).
- This package may import: `almanac.adapters`, `almanac.service_layer`,
  `almanac.interfaces`, `almanac.domain`, and `almanac.config`.
- Inner layers must not import `almanac.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_rule_provider

__all__ = ["AppContainer", "bootstrap", "build_rule_provider"]
