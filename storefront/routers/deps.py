"""
Shared Dependencies for Routers

Lazy-loaded singletons, overridable via app.dependency_overrides in tests.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.cart import CartManager
    from storefront.services.database import Database
    from storefront.services.domains import CatalogService
    from storefront.services.domains.checkout import CheckoutService


async def get_db() -> "Database":
    from storefront.services.database import get_database_async
    return await get_database_async()


async def get_cart_manager_dep() -> "CartManager":
    from storefront.cart import get_cart_manager
    return await get_cart_manager()


async def get_catalog_service() -> "CatalogService":
    db = await get_db()
    return db.catalog


async def get_checkout_service() -> "CheckoutService":
    from storefront.services.domains.checkout import CheckoutService

    db = await get_db()
    return CheckoutService(await get_cart_manager_dep(), db.orders)
