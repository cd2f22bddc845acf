"""Domain layer for STOREFRONT.

Contains business rules: value objects, primitive validators, rule evaluators
and time-gated rules. Everything here is a pure function of its inputs; the
current time and any lookup tables are passed in by the caller.

Dependency rule: do not import from `storefront.adapters`,
`storefront.service_layer` or `storefront.entrypoints`.
"""
