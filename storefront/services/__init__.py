"""Storefront services: catalog models, repositories, domains, money helpers."""
