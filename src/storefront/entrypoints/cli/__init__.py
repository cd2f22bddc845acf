"""Command-line interface for STOREFRONT."""
