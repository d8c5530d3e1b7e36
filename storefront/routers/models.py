"""
Storefront API Pydantic Models

Shared request models for cart and checkout endpoints.
"""
from typing import Any
from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: Any = None  # absent or non-numeric means 1


class UpdateCartItemRequest(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: int  # 0 removes the line


# ==================== CHECKOUT MODELS ====================

class CheckoutRequest(BaseModel):
    customer_name: str = Field(min_length=1, max_length=200)
    customer_email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    shipping_address: str = Field(min_length=1, max_length=1000)
