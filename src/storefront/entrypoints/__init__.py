"""Entry points for STOREFRONT (currently the command-line interface)."""
