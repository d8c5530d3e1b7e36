"""
Supabase-backed data access.

`Database` groups the repositories (and the catalog service built on them)
around one async Supabase client. The instance is a process-wide singleton:

    db = await get_database_async()      # lazy, safe under concurrent first use
    product = await db.products.get_by_id(product_id)
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient

from storefront.db import get_supabase
from storefront.logging import get_logger
from storefront.services.domains import CatalogService
from storefront.services.repositories import (
    CartRepository,
    CategoryRepository,
    OrderRepository,
    ProductRepository,
)

logger = get_logger(__name__)


class Database:
    """Repositories sharing a single AsyncClient."""

    def __init__(self, client: AsyncClient):
        self.client = client
        self.products = ProductRepository(client)
        self.categories = CategoryRepository(client)
        self.orders = OrderRepository(client)
        self.carts = CartRepository(client)
        self.catalog = CatalogService(self.products, self.categories)

    @classmethod
    async def create(cls) -> "Database":
        return cls(await get_supabase())


_db: Optional[Database] = None
_db_lock: Optional[asyncio.Lock] = None


def _init_lock() -> asyncio.Lock:
    # Created on first use so it binds to the running event loop
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def get_database_async() -> Database:
    """Return the Database singleton, creating it on first call."""
    global _db
    if _db is not None:
        return _db

    async with _init_lock():
        if _db is None:
            logger.info("Connecting to Supabase")
            _db = await Database.create()
    return _db


def get_database() -> Database:
    """Return the already-initialized singleton.

    Raises:
        RuntimeError: get_database_async() has not run yet
    """
    if _db is None:
        raise RuntimeError("Database not initialized; await get_database_async() first")
    return _db


def close_database() -> None:
    """Forget the singleton (application shutdown)."""
    global _db
    if _db is not None:
        _db = None
        logger.info("Supabase client released")
