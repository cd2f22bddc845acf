"""STOREFRONT

Pricing, eligibility and input-validation rules for a small online shop,
with the external services they depend on (exchange rates, shipping quotes,
payments, email) expressed as injectable capabilities.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
