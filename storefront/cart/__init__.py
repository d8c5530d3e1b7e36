"""Cart package: models, product lookup, stores, and manager facade."""
from .models import CartLine, Cart, ProductSnapshot
from .lookup import ProductLookup, DatabaseProductLookup
from .storage import CartStore, RedisCartStore, SupabaseCartStore, InMemoryCartStore, create_cart_store
from .service import CartManager, get_cart_manager

__all__ = [
    "CartLine",
    "Cart",
    "ProductSnapshot",
    "ProductLookup",
    "DatabaseProductLookup",
    "CartStore",
    "RedisCartStore",
    "SupabaseCartStore",
    "InMemoryCartStore",
    "create_cart_store",
    "CartManager",
    "get_cart_manager",
]
