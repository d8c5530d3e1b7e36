"""
Database Module - Supabase and Redis Clients

Provides singleton instances of:
- Async Supabase client for catalog, orders and durable carts
- Async Upstash Redis client for session carts
"""

import os
from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client
from upstash_redis.asyncio import Redis as AsyncRedis

from storefront.config import get_cart_ttl_seconds


_async_supabase_client: Optional[AsyncClient] = None
_redis_client: Optional[AsyncRedis] = None


def _supabase_credentials() -> tuple[str, str]:
    url = os.environ.get("SUPABASE_URL", "")
    key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
    return url, key


async def get_supabase() -> AsyncClient:
    """
    Shared AsyncClient for the service-role key, created on first await.
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        url, key = _supabase_credentials()
        _async_supabase_client = await acreate_client(url, key)

    return _async_supabase_client


def get_redis() -> AsyncRedis:
    """
    Shared Upstash REST client for session carts.

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _redis_client

    if _redis_client is None:
        url = os.environ.get("UPSTASH_REDIS_REST_URL", "")
        token = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")
        if not url or not token:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _redis_client = AsyncRedis(url=url, token=token)

    return _redis_client


def reset_clients() -> None:
    """Drop cached clients (used on shutdown and between tests)."""
    global _async_supabase_client, _redis_client
    _async_supabase_client = None
    _redis_client = None


class RedisKeys:
    """Redis key prefixes for different data types."""

    CART = "cart:"  # cart:{context_id}

    @staticmethod
    def cart_key(context_id: str) -> str:
        return f"{RedisKeys.CART}{context_id}"


class TTL:
    """Time-to-live constants for Redis keys (seconds)."""

    @staticmethod
    def cart() -> int:
        return get_cart_ttl_seconds()


class Tables:
    """Supabase table names."""

    PRODUCTS = "products"
    CATEGORIES = "categories"
    ORDERS = "orders"
    CARTS = "carts"
