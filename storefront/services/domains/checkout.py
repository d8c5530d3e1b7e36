"""
Checkout Domain Service

Turns the current cart into an order and clears the cart. There is no stock
check or payment step: the order is recorded as pending with the line
snapshot and a total recomputed from those lines.
"""

from dataclasses import dataclass

from storefront.cart import CartManager
from storefront.errors import ERROR_CART_EMPTY, CartError, StoreUnavailable
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Order
from storefront.services.repositories import OrderRepository

logger = get_logger(__name__)


class EmptyCart(CartError):
    """Checkout attempted on a cart without lines."""

    def __init__(self):
        super().__init__(ERROR_CART_EMPTY)


@dataclass
class CustomerDetails:
    name: str
    email: str
    shipping_address: str


class CheckoutService:
    def __init__(self, cart_manager: CartManager, orders: OrderRepository):
        self.cart_manager = cart_manager
        self.orders = orders

    async def checkout(self, context_id: str, customer: CustomerDetails) -> Order:
        """
        Record an order for the cart, then empty it.

        The cart is only emptied after the order row exists, so a failed
        insert leaves the cart intact for a retry. If the cart cannot be
        emptied the order row is deleted again before StoreUnavailable
        propagates, so retrying never leaves duplicate orders behind.

        Raises:
            EmptyCart: nothing to order
            StoreUnavailable: cart could not be loaded or cleared
        """
        cart = await self.cart_manager.get_cart(context_id)
        if cart.is_empty:
            raise EmptyCart()

        order = await self.orders.create(
            context_id=context_id,
            customer_name=customer.name,
            customer_email=customer.email,
            shipping_address=customer.shipping_address,
            lines=[line.to_dict() for line in cart.lines],
            total_minor_units=cart.total,
        )

        try:
            await self.cart_manager.empty(context_id)
        except StoreUnavailable:
            logger.error(
                f"Could not empty cart {sanitize_id_for_logging(context_id)}; "
                f"withdrawing order {sanitize_id_for_logging(order.id)}"
            )
            await self.orders.delete(order.id)
            raise

        logger.info(
            f"Order {sanitize_id_for_logging(order.id)} placed for cart "
            f"{sanitize_id_for_logging(context_id)}: {cart.total_items} items, {cart.total} minor units"
        )
        return order
