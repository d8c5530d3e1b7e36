"""
Catalog Domain Service

Handles shop browsing: category listing, per-category products, product
details and paginated listings across a category subtree.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from storefront.config import get_catalog_page_size
from storefront.errors import CategoryNotFound, ProductNotFound
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Category, Product
from storefront.services.repositories import CategoryRepository, ProductRepository

logger = get_logger(__name__)


@dataclass
class Page:
    """One page of a product listing."""

    items: List[Product]
    page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_count / self.page_size))

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


@dataclass
class CategoryTree:
    """A selected category and the categories directly below it."""

    selected: Category
    children: List[Category] = field(default_factory=list)

    @property
    def category_ids(self) -> List[str]:
        return [self.selected.id] + [c.id for c in self.children]


class CatalogService:
    """
    Catalog domain service.

    Provides clean interface for:
    - Shop front (all categories)
    - Products by category
    - Category navigation and paginated listings
    """

    def __init__(
        self,
        products: ProductRepository,
        categories: CategoryRepository,
        page_size: Optional[int] = None,
    ):
        self.products = products
        self.categories = categories
        self.page_size = page_size or get_catalog_page_size()

    async def shop(self) -> List[Category]:
        return await self.categories.get_all()

    async def products_in_category(self, category_id: str) -> List[Product]:
        return await self.products.get_by_category(category_id)

    async def get_product(self, product_id: str) -> Product:
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    async def categories_below(self, category_id: str) -> CategoryTree:
        """
        Get a category with its direct children.

        Raises:
            CategoryNotFound: category_id does not exist
        """
        selected = await self.categories.get_by_id(category_id)
        if selected is None:
            raise CategoryNotFound(category_id)
        children = await self.categories.get_children(category_id)
        return CategoryTree(selected=selected, children=children)

    async def categories_below_paged(self, category_id: str, page: int = 1) -> tuple[CategoryTree, Page]:
        """
        Get one page of products in a category and its direct children.

        Args:
            category_id: Selected category
            page: 1-based page number; values below 1 are clamped to 1

        Returns:
            (category tree, page of products)
        """
        tree = await self.categories_below(category_id)
        page = max(1, page)
        offset = (page - 1) * self.page_size

        items, total_count = await self.products.get_page_in_categories(
            tree.category_ids, offset, self.page_size
        )
        logger.debug(
            f"Category {sanitize_id_for_logging(category_id)} page {page}: "
            f"{len(items)}/{total_count} products"
        )
        return tree, Page(items=items, page=page, page_size=self.page_size, total_count=total_count)
