"""Product Repository - Product catalog operations.

All methods use async/await with supabase-py v2.
"""
from typing import Optional, List, Dict, Any
from .base import BaseRepository
from storefront.db import Tables
from storefront.services.models import Product


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_all(self) -> List[Product]:
        """Get all products, newest first."""
        result = await self.client.table(Tables.PRODUCTS).select("*").order(
            "created_at", desc=True
        ).execute()
        return [Product(**p) for p in result.data]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        result = await self.client.table(Tables.PRODUCTS).select("*").eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def get_by_category(self, category_id: str) -> List[Product]:
        """Get products of a single category."""
        result = await self.client.table(Tables.PRODUCTS).select("*").eq(
            "category_id", category_id
        ).order("model").execute()
        return [Product(**p) for p in result.data]

    async def get_page_in_categories(
        self, category_ids: List[str], offset: int, limit: int
    ) -> tuple[List[Product], int]:
        """Get one page of products belonging to any of ``category_ids``.

        Returns:
            (products on the page, total matching count)
        """
        result = await self.client.table(Tables.PRODUCTS).select("*", count="exact").in_(
            "category_id", category_ids
        ).order("model").range(offset, offset + limit - 1).execute()
        return [Product(**p) for p in result.data], result.count or 0

    async def create(self, data: Dict[str, Any]) -> Product:
        """Create new product."""
        result = await self.client.table(Tables.PRODUCTS).insert(data).execute()
        return Product(**result.data[0])

    async def update(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        """Update product."""
        result = await self.client.table(Tables.PRODUCTS).update(data).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def delete(self, product_id: str) -> bool:
        """Delete product. Returns False if nothing was deleted."""
        result = await self.client.table(Tables.PRODUCTS).delete().eq("id", product_id).execute()
        return bool(result.data)
