"""
Cart Store adapters.

Stores exchange plain dicts with the cart core and never hand out live
references: every ``load`` returns a freshly built Cart. Backends:

- RedisCartStore: ephemeral per-session carts with a sliding TTL
- SupabaseCartStore: durable per-customer carts in the carts table
- InMemoryCartStore: process-local carts for development and tests
"""
import json
from typing import Dict, Optional, Protocol

from storefront.config import (
    CART_STORE_MEMORY,
    CART_STORE_REDIS,
    CART_STORE_SUPABASE,
    get_cart_store_backend,
)
from storefront.db import RedisKeys, TTL, get_redis
from storefront.errors import CorruptedCart, StoreUnavailable
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.repositories import CartRepository
from .models import Cart

logger = get_logger(__name__)


class CartStore(Protocol):
    """Persists carts across requests, keyed by context id."""

    async def load(self, context_id: str) -> Cart: ...

    async def save(self, context_id: str, cart: Cart) -> None: ...


def _rebuild(context_id: str, payload: Optional[dict]) -> Cart:
    if not payload:
        return Cart(context_id=context_id)
    cart = Cart.from_dict(payload)
    # The key is authoritative over whatever id the payload carries
    cart.context_id = context_id
    return cart


class RedisCartStore:
    """Upstash Redis store. Each save refreshes the cart TTL."""

    def __init__(self, redis=None):
        self._redis = redis  # Lazy initialization

    @property
    def redis(self):
        if self._redis is None:
            try:
                self._redis = get_redis()
            except ValueError as e:
                raise StoreUnavailable(f"Redis not available: {e}") from e
        return self._redis

    async def load(self, context_id: str) -> Cart:
        key = RedisKeys.cart_key(context_id)
        try:
            data = await self.redis.get(key)
        except StoreUnavailable:
            raise
        except Exception as e:
            logger.error(f"Failed to load cart from Redis: {e}")
            raise StoreUnavailable() from e

        if not data:
            return Cart(context_id=context_id)

        try:
            return _rebuild(context_id, json.loads(data))
        except (json.JSONDecodeError, CorruptedCart) as e:
            # Unreadable cart: drop it and start over
            logger.warning(f"Corrupted cart data for {sanitize_id_for_logging(context_id)}: {e}")
            try:
                await self.redis.delete(key)
            except Exception as delete_error:
                logger.error(f"Failed to delete corrupted cart: {delete_error}")
                raise StoreUnavailable() from delete_error
            return Cart(context_id=context_id)

    async def save(self, context_id: str, cart: Cart) -> None:
        key = RedisKeys.cart_key(context_id)
        try:
            if cart.is_empty:
                await self.redis.delete(key)
            else:
                await self.redis.set(key, json.dumps(cart.to_dict()), ex=TTL.cart())
        except StoreUnavailable:
            raise
        except Exception as e:
            logger.error(f"Failed to save cart to Redis: {e}")
            raise StoreUnavailable() from e


class SupabaseCartStore:
    """Durable store backed by the carts table."""

    def __init__(self, repo: CartRepository):
        self.repo = repo

    async def load(self, context_id: str) -> Cart:
        try:
            payload = await self.repo.get_payload(context_id)
        except Exception as e:
            logger.error(f"Failed to load cart from Supabase: {e}")
            raise StoreUnavailable() from e

        try:
            return _rebuild(context_id, payload)
        except CorruptedCart as e:
            logger.warning(f"Corrupted cart row for {sanitize_id_for_logging(context_id)}: {e}")
            try:
                await self.repo.delete(context_id)
            except Exception as delete_error:
                logger.error(f"Failed to delete corrupted cart row: {delete_error}")
                raise StoreUnavailable() from delete_error
            return Cart(context_id=context_id)

    async def save(self, context_id: str, cart: Cart) -> None:
        try:
            if cart.is_empty:
                await self.repo.delete(context_id)
            else:
                await self.repo.upsert_payload(context_id, cart.to_dict())
        except Exception as e:
            logger.error(f"Failed to save cart to Supabase: {e}")
            raise StoreUnavailable() from e


class InMemoryCartStore:
    """Process-local store holding serialized carts."""

    def __init__(self):
        self._carts: Dict[str, str] = {}

    async def load(self, context_id: str) -> Cart:
        data = self._carts.get(context_id)
        return _rebuild(context_id, json.loads(data) if data else None)

    async def save(self, context_id: str, cart: Cart) -> None:
        if cart.is_empty:
            self._carts.pop(context_id, None)
        else:
            self._carts[context_id] = json.dumps(cart.to_dict())

    def __len__(self) -> int:
        return len(self._carts)


async def create_cart_store(backend: Optional[str] = None) -> CartStore:
    """Build the store selected by CART_STORE."""
    backend = backend or get_cart_store_backend()
    if backend == CART_STORE_REDIS:
        return RedisCartStore()
    if backend == CART_STORE_SUPABASE:
        from storefront.services.database import get_database_async

        db = await get_database_async()
        return SupabaseCartStore(db.carts)
    if backend == CART_STORE_MEMORY:
        return InMemoryCartStore()
    raise ValueError(f"Unsupported cart store backend: {backend}")
