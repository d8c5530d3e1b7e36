"""Database Models - Pydantic models for catalog and order entities."""
from decimal import Decimal
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import to_decimal as _to_decimal


class Category(BaseModel):
    """Catalog category. Categories form a tree through parent_id."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    parent_id: Optional[str] = None
    created_at: Optional[datetime] = None


class Product(BaseModel):
    """Product model."""
    model_config = ConfigDict(extra="ignore")

    id: str
    model: str  # display name
    description: Optional[str] = None
    price: Decimal
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)


class Order(BaseModel):
    """Order placed from a cart at checkout."""
    model_config = ConfigDict(extra="ignore")

    id: str
    context_id: str
    customer_name: str
    customer_email: str
    shipping_address: str
    lines: list[dict] = []  # cart line snapshot
    total_minor_units: int
    status: str = "pending"
    created_at: Optional[datetime] = None
