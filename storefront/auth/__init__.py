"""Authentication package."""
from .session import CartContext, get_cart_context, new_context_id
from .admin import verify_admin

__all__ = [
    "CartContext",
    "get_cart_context",
    "new_context_id",
    "verify_admin",
]
