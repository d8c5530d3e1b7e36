"""Category Repository - Category tree operations."""
from typing import Optional, List
from .base import BaseRepository
from storefront.db import Tables
from storefront.services.models import Category


class CategoryRepository(BaseRepository):
    """Category database operations."""

    async def get_all(self) -> List[Category]:
        result = await self.client.table(Tables.CATEGORIES).select("*").order("name").execute()
        return [Category(**c) for c in result.data]

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        result = await self.client.table(Tables.CATEGORIES).select("*").eq("id", category_id).execute()
        return Category(**result.data[0]) if result.data else None

    async def get_children(self, parent_id: str) -> List[Category]:
        """Get direct children of a category."""
        result = await self.client.table(Tables.CATEGORIES).select("*").eq(
            "parent_id", parent_id
        ).order("name").execute()
        return [Category(**c) for c in result.data]
