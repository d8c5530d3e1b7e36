"""Response serializers for catalog entities."""
from typing import Any, Dict

from storefront.services.domains import CategoryTree, Page
from storefront.services.models import Category, Product
from storefront.services.money import round_price, to_minor_units


def serialize_product(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "model": product.model,
        "description": product.description,
        "price": str(round_price(product.price)),
        "price_minor_units": to_minor_units(product.price),
        "category_id": product.category_id,
        "image_url": product.image_url,
        "created_at": product.created_at.isoformat() if product.created_at else None,
    }


def serialize_category(category: Category) -> Dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "parent_id": category.parent_id,
    }


def serialize_tree(tree: CategoryTree) -> Dict[str, Any]:
    return {
        "selected_category": serialize_category(tree.selected),
        "categories": [serialize_category(c) for c in tree.children],
    }


def serialize_page(page: Page) -> Dict[str, Any]:
    return {
        "items": [serialize_product(p) for p in page.items],
        "page": page.page,
        "page_size": page.page_size,
        "total_count": page.total_count,
        "total_pages": page.total_pages,
        "has_next": page.has_next,
        "has_previous": page.has_previous,
    }
