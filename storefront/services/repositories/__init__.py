"""
Repository Pattern for Database Operations

- ProductRepository: Product catalog, category listings, admin CRUD
- CategoryRepository: Category tree
- OrderRepository: Orders placed at checkout
- CartRepository: Durable cart rows
"""
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .order_repo import OrderRepository
from .cart_repo import CartRepository

__all__ = [
    "ProductRepository",
    "CategoryRepository",
    "OrderRepository",
    "CartRepository",
]
