"""
Cart Router

Shopping cart endpoints. Every response body is the cart view
(lines, item count, totals in minor units and display strings).
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import CartContext, get_cart_context
from storefront.cart import CartManager
from storefront.errors import (
    ERROR_INTERNAL,
    CartError,
    InvalidPrice,
    InvalidQuantity,
    ProductNotFound,
    StoreUnavailable,
)
from storefront.logging import get_logger
from storefront.services.domains.checkout import CheckoutService, CustomerDetails, EmptyCart
from storefront.utils.validators import parse_requested_quantity
from .deps import get_cart_manager_dep, get_checkout_service
from .models import AddToCartRequest, UpdateCartItemRequest, CheckoutRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _http_error(error: CartError) -> HTTPException:
    """Map cart domain errors to HTTP errors."""
    if isinstance(error, ProductNotFound):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, (InvalidQuantity, EmptyCart)):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, InvalidPrice):
        return HTTPException(status_code=409, detail=str(error))
    if isinstance(error, StoreUnavailable):
        return HTTPException(status_code=503, detail=str(error))
    return HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.get("/cart")
async def get_cart(
    context: CartContext = Depends(get_cart_context),
    cart_manager: CartManager = Depends(get_cart_manager_dep),
):
    """Get the current cart."""
    try:
        return await cart_manager.summary(context.context_id)
    except CartError as e:
        raise _http_error(e)


@router.post("/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    context: CartContext = Depends(get_cart_context),
    cart_manager: CartManager = Depends(get_cart_manager_dep),
):
    """Add a product (quantity defaults to 1)."""
    quantity = parse_requested_quantity(request.quantity)
    try:
        cart = await cart_manager.add(context.context_id, request.product_id, quantity)
    except CartError as e:
        raise _http_error(e)
    return cart.to_view()


@router.patch("/cart/item")
async def update_cart_item(
    request: UpdateCartItemRequest,
    context: CartContext = Depends(get_cart_context),
    cart_manager: CartManager = Depends(get_cart_manager_dep),
):
    """Set a line's quantity (0 = remove)."""
    try:
        cart = await cart_manager.update_quantity(context.context_id, request.product_id, request.quantity)
    except CartError as e:
        raise _http_error(e)
    return cart.to_view()


@router.delete("/cart/item")
async def remove_cart_item(
    product_id: str,
    context: CartContext = Depends(get_cart_context),
    cart_manager: CartManager = Depends(get_cart_manager_dep),
):
    """Remove a product's line. Removing an absent product succeeds."""
    try:
        cart = await cart_manager.remove(context.context_id, product_id)
    except CartError as e:
        raise _http_error(e)
    return cart.to_view()


@router.post("/cart/empty")
async def empty_cart(
    context: CartContext = Depends(get_cart_context),
    cart_manager: CartManager = Depends(get_cart_manager_dep),
):
    """Remove every line."""
    try:
        cart = await cart_manager.empty(context.context_id)
    except CartError as e:
        raise _http_error(e)
    return cart.to_view()


@router.post("/cart/checkout")
async def checkout(
    request: CheckoutRequest,
    context: CartContext = Depends(get_cart_context),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """Place an order from the cart and empty it."""
    customer = CustomerDetails(
        name=request.customer_name.strip(),
        email=request.customer_email.strip(),
        shipping_address=request.shipping_address.strip(),
    )
    try:
        order = await checkout_service.checkout(context.context_id, customer)
    except CartError as e:
        raise _http_error(e)
    except Exception as e:
        logger.error(f"Checkout failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to place order")

    return {
        "success": True,
        "order_id": order.id,
        "status": order.status,
        "total_minor_units": order.total_minor_units,
    }
