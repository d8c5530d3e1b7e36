"""Cart manager: the single cart model behind every cart endpoint."""
from typing import List, Optional

from storefront.errors import ProductNotFound
from storefront.logging import get_logger, sanitize_id_for_logging
from .lookup import ProductLookup
from .models import Cart, CartLine, require_quantity
from .storage import CartStore

logger = get_logger(__name__)


class CartManager:
    """
    Applies cart operations for a context id.

    Every mutation is one load -> mutate -> save cycle on a cart freshly
    loaded from the store. Validation and product resolution happen before
    anything is saved, so a failed call leaves the persisted cart untouched.
    Concurrent requests on the same context are last-write-wins.
    """

    def __init__(self, lookup: ProductLookup, store: CartStore):
        self.lookup = lookup
        self.store = store

    async def get_cart(self, context_id: str) -> Cart:
        return await self.store.load(context_id)

    async def _save(self, cart: Cart) -> Cart:
        cart.touch()
        await self.store.save(cart.context_id, cart)
        return cart

    async def add(self, context_id: str, product_id: str, quantity: int = 1) -> Cart:
        """
        Add ``quantity`` units of a product.

        Raises:
            InvalidQuantity: quantity is not a positive int
            ProductNotFound: the lookup cannot resolve product_id
            StoreUnavailable: the cart could not be loaded or saved
        """
        require_quantity(quantity)
        snapshot = await self.lookup.resolve(product_id)
        if snapshot is None:
            raise ProductNotFound(product_id)

        cart = await self.store.load(context_id)
        line = cart.add(snapshot, quantity)
        await self._save(cart)

        logger.info(
            f"Cart {sanitize_id_for_logging(context_id)}: +{quantity} "
            f"{sanitize_id_for_logging(product_id)} (now {line.quantity})"
        )
        return cart

    async def remove(self, context_id: str, product_id: str) -> Cart:
        """Remove a product's line. Removing an absent product is a no-op."""
        cart = await self.store.load(context_id)
        if cart.remove(product_id):
            await self._save(cart)
            logger.info(
                f"Cart {sanitize_id_for_logging(context_id)}: removed {sanitize_id_for_logging(product_id)}"
            )
        return cart

    async def update_quantity(self, context_id: str, product_id: str, quantity: int) -> Cart:
        """
        Set a line's quantity (replace, not increment). 0 removes the line.

        Raises:
            InvalidQuantity: quantity is negative or not an int
        """
        require_quantity(quantity, minimum=0)
        cart = await self.store.load(context_id)
        if cart.set_quantity(product_id, quantity):
            await self._save(cart)
            logger.info(
                f"Cart {sanitize_id_for_logging(context_id)}: "
                f"{sanitize_id_for_logging(product_id)} set to {quantity}"
            )
        return cart

    async def empty(self, context_id: str) -> Cart:
        """Clear all lines."""
        cart = await self.store.load(context_id)
        cart.clear()
        await self._save(cart)
        logger.info(f"Cart {sanitize_id_for_logging(context_id)}: emptied")
        return cart

    async def lines(self, context_id: str) -> List[CartLine]:
        cart = await self.store.load(context_id)
        return list(cart.lines)

    async def total(self, context_id: str) -> int:
        """Cart total in minor units."""
        cart = await self.store.load(context_id)
        return cart.total

    async def summary(self, context_id: str) -> dict:
        """Render-ready view: lines, item count and totals."""
        cart = await self.store.load(context_id)
        return cart.to_view()


# Singleton instance
_cart_manager: Optional[CartManager] = None


async def get_cart_manager() -> CartManager:
    """Get CartManager singleton wired to the catalog lookup and configured store."""
    global _cart_manager
    if _cart_manager is None:
        from storefront.services.database import get_database_async
        from .lookup import DatabaseProductLookup
        from .storage import create_cart_store

        db = await get_database_async()
        _cart_manager = CartManager(
            lookup=DatabaseProductLookup(db.products),
            store=await create_cart_store(),
        )
    return _cart_manager


def reset_cart_manager() -> None:
    global _cart_manager
    _cart_manager = None
