"""Interfaces (application boundary) for STOREFRONT.

Defines framework-free contracts for the external services the shop relies
on (exchange rates, shipping quotes, analytics, payments, email, security
codes and the clock) plus the small DTOs they exchange. Business rules stay
out of this package.

Dependency rule: this package is independent; do not import from any other
`storefront.*` modules. It may be imported by `storefront.service_layer`,
`storefront.adapters`, and `storefront.bootstrap`.
"""
