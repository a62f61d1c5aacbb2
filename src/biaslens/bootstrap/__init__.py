"""Bootstrap (composition root) for BIASLENS.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers, composes shared services (message bus, auth store), reads
configuration, and hands entrypoints a single `AppContainer`.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `biaslens.adapters`, `biaslens.service_layer`,
  `biaslens.interfaces`, `biaslens.domain`, and `biaslens.config`.
- Inner layers must not import `biaslens.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
