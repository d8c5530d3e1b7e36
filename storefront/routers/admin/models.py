"""
Admin API Pydantic Models
"""
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


# ==================== PRODUCT MODELS ====================

class ProductRequest(BaseModel):
    model: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    category_id: Optional[str] = None
    image_url: Optional[str] = None
