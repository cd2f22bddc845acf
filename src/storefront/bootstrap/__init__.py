"""Bootstrap (composition root) for STOREFRONT.

Assembles the application at runtime: reads configuration, builds the
`RuleBook`, and wires one concrete adapter for every capability the service
layer needs.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `storefront.adapters`, `storefront.service_layer`,
  `storefront.interfaces`, `storefront.domain`, and `storefront.config`.
- Inner layers must not import `storefront.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, inject_dependencies

__all__ = ["AppContainer", "bootstrap", "inject_dependencies"]
