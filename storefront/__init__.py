"""Storefront: catalog, cart and product administration API."""

__version__ = "1.0.0"
