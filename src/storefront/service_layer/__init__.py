"""Service layer for STOREFRONT.

Operations that combine domain rules with external collaborators. Every
collaborator is a parameter typed against `storefront.interfaces`; nothing
here constructs an adapter.
"""
