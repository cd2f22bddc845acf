"""Contract tests.

Every adapter of an interface must pass the same suite, so adapters stay
interchangeable in `storefront.bootstrap`. Fixtures in each package's
conftest are parametrised over the adapters.
"""
