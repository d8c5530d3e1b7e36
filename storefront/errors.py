"""
Storefront Errors

Domain exceptions raised by the cart and catalog layers, plus centralized
error messages shared by the routers (avoids string duplication, SonarQube S1192).
"""
from typing import Any

# Product / catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATEGORY_NOT_FOUND = "Category not found"

# Cart errors
ERROR_INVALID_QUANTITY = "Quantity must be a positive integer"
ERROR_NEGATIVE_QUANTITY = "Quantity must be a non-negative integer"
ERROR_CART_UNAVAILABLE = "Cart service unavailable"
ERROR_CART_EMPTY = "Cart is empty"
ERROR_CART_CORRUPTED = "Stored cart data is corrupted"
ERROR_INVALID_PRICE = "Product price must be a non-negative amount"

# Auth errors
ERROR_ADMIN_REQUIRED = "Admin access required"

# Generic errors
ERROR_INTERNAL = "Internal server error"


class StorefrontError(Exception):
    """Base class for all storefront domain errors."""


class CartError(StorefrontError):
    """Base class for cart operation failures. The cart is never partially mutated."""


class ProductNotFound(CartError):
    """Product Lookup could not resolve the requested product id."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"{ERROR_PRODUCT_NOT_FOUND}: {product_id}")


class InvalidQuantity(CartError):
    """Quantity was not an integer in the accepted range."""

    def __init__(self, quantity: Any, message: str = ERROR_INVALID_QUANTITY):
        self.quantity = quantity
        super().__init__(f"{message} (got {quantity!r})")


class InvalidPrice(CartError, ValueError):
    """A product snapshot carried a negative unit price."""

    def __init__(self, product_id: str, unit_price_minor_units: int):
        self.product_id = product_id
        self.unit_price_minor_units = unit_price_minor_units
        super().__init__(f"{ERROR_INVALID_PRICE}: {product_id} ({unit_price_minor_units})")


class StoreUnavailable(CartError):
    """The cart persistence backend failed to load or save."""

    def __init__(self, message: str = ERROR_CART_UNAVAILABLE):
        super().__init__(message)


class CorruptedCart(CartError):
    """A stored cart payload could not be turned back into a valid Cart."""

    def __init__(self, detail: str):
        super().__init__(f"{ERROR_CART_CORRUPTED}: {detail}")


class CategoryNotFound(StorefrontError):
    """Category id does not exist."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"{ERROR_CATEGORY_NOT_FOUND}: {category_id}")
