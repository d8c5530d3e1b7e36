"""Product Lookup: resolves product ids to the snapshot a cart line needs."""
from typing import Optional, Protocol

from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.money import to_minor_units
from storefront.services.repositories import ProductRepository
from .models import ProductSnapshot

logger = get_logger(__name__)


class ProductLookup(Protocol):
    """Side-effect free product resolution. Returns None for unknown ids."""

    async def resolve(self, product_id: str) -> Optional[ProductSnapshot]: ...


class DatabaseProductLookup:
    """Resolves products from the Supabase catalog."""

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    async def resolve(self, product_id: str) -> Optional[ProductSnapshot]:
        if not product_id:
            return None
        product = await self.repo.get_by_id(product_id)
        if product is None:
            logger.info(f"Product lookup miss: {sanitize_id_for_logging(product_id)}")
            return None
        return ProductSnapshot(
            product_id=product.id,
            display_name=product.model,
            unit_price_minor_units=to_minor_units(product.price),
        )
