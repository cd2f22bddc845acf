"""Adapters for STOREFRONT.

Concrete implementations of the contracts in `storefront.interfaces`. All of
them run in-process: table-backed lookups, recorders that keep what they are
given, and log-backed senders. They are used both by the application wiring
in `storefront.bootstrap` and as deterministic stand-ins in tests.
"""
