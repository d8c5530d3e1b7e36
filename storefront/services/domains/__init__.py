"""Domain services wrapping repositories."""
from .catalog import CatalogService, CategoryTree, Page

__all__ = [
    "CatalogService",
    "CategoryTree",
    "Page",
]
