"""Order Repository - Orders placed at checkout."""
from typing import Any, Dict, List, Optional
from .base import BaseRepository
from storefront.db import Tables
from storefront.services.models import Order


class OrderRepository(BaseRepository):
    """Order database operations."""

    async def create(
        self,
        context_id: str,
        customer_name: str,
        customer_email: str,
        shipping_address: str,
        lines: List[Dict[str, Any]],
        total_minor_units: int,
    ) -> Order:
        result = await self.client.table(Tables.ORDERS).insert({
            "context_id": context_id,
            "customer_name": customer_name,
            "customer_email": customer_email,
            "shipping_address": shipping_address,
            "lines": lines,
            "total_minor_units": total_minor_units,
            "status": "pending",
        }).execute()
        return Order(**result.data[0])

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        result = await self.client.table(Tables.ORDERS).select("*").eq("id", order_id).execute()
        return Order(**result.data[0]) if result.data else None

    async def delete(self, order_id: str) -> bool:
        """Delete an order row. Returns False if nothing was deleted."""
        result = await self.client.table(Tables.ORDERS).delete().eq("id", order_id).execute()
        return bool(result.data)
