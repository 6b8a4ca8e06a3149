"""Bootstrap (composition root) for HEXCALC.

Assembles the application at runtime: picks the observer and store adapters
from configuration, wires them into the calculator service, and injects the
calculator into the service-layer handlers behind a message bus.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `hexcalc.adapters`, `hexcalc.service_layer`,
  `hexcalc.interfaces`, `hexcalc.domain`, and `hexcalc.config`.
- Inner layers must not import `hexcalc.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
