"""Cart Repository - durable per-customer cart rows."""
from datetime import datetime, timezone
from typing import Optional
from .base import BaseRepository
from storefront.db import Tables


class CartRepository(BaseRepository):
    """Stores serialized carts in the carts table, one row per context id."""

    async def get_payload(self, context_id: str) -> Optional[dict]:
        result = await self.client.table(Tables.CARTS).select("payload").eq(
            "context_id", context_id
        ).limit(1).execute()
        return result.data[0]["payload"] if result.data else None

    async def upsert_payload(self, context_id: str, payload: dict) -> None:
        await self.client.table(Tables.CARTS).upsert({
            "context_id": context_id,
            "payload": payload,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }, on_conflict="context_id").execute()

    async def delete(self, context_id: str) -> None:
        await self.client.table(Tables.CARTS).delete().eq("context_id", context_id).execute()
