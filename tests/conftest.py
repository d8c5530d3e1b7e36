"""Pytest configuration and fixtures"""
import os
import pytest
from typing import Dict, Optional
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("ADMIN_API_KEY", "test_admin_key")
os.environ.setdefault("CART_STORE", "memory")
os.environ.setdefault("CART_COOKIE_SECURE", "0")

from storefront.cart import Cart, CartManager, InMemoryCartStore, ProductSnapshot
from storefront.errors import StoreUnavailable


class StaticProductLookup:
    """Product lookup over a fixed dict; counts resolve calls."""

    def __init__(self, products: Dict[str, ProductSnapshot]):
        self.products = dict(products)
        self.calls = 0

    async def resolve(self, product_id: str) -> Optional[ProductSnapshot]:
        self.calls += 1
        return self.products.get(product_id)


class FailingCartStore(InMemoryCartStore):
    """In-memory store whose load/save can be switched to fail."""

    def __init__(self):
        super().__init__()
        self.fail_load = False
        self.fail_save = False

    async def load(self, context_id: str) -> Cart:
        if self.fail_load:
            raise StoreUnavailable()
        return await super().load(context_id)

    async def save(self, context_id: str, cart: Cart) -> None:
        if self.fail_save:
            raise StoreUnavailable()
        await super().save(context_id, cart)


@pytest.fixture
def snapshots():
    """Catalog snapshots keyed by product id"""
    return {
        "SKU1": ProductSnapshot(product_id="SKU1", display_name="Trail Runner", unit_price_minor_units=500),
        "SKU2": ProductSnapshot(product_id="SKU2", display_name="Rain Jacket", unit_price_minor_units=1299),
        "SKU3": ProductSnapshot(product_id="SKU3", display_name="Wool Socks", unit_price_minor_units=0),
    }


@pytest.fixture
def product_lookup(snapshots):
    return StaticProductLookup(snapshots)


@pytest.fixture
def cart_store():
    return FailingCartStore()


@pytest.fixture
def cart_manager(product_lookup, cart_store):
    return CartManager(lookup=product_lookup, store=cart_store)


@pytest.fixture
def context_id():
    return "ctx-test-0000000001"


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client: builders are sync, execute() is awaited"""
    client = Mock()

    table_mock = Mock()
    for method in ("select", "insert", "update", "delete", "upsert", "eq", "in_", "limit", "order", "range"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[], count=0))

    client.table.return_value = table_mock
    return client


@pytest.fixture
def sample_product():
    """Sample product row"""
    return {
        "id": "product-123",
        "model": "Trail Runner",
        "description": "Lightweight running shoe",
        "price": "49.99",
        "category_id": "cat-shoes",
        "image_url": None,
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_category():
    """Sample category row"""
    return {
        "id": "cat-shoes",
        "name": "Shoes",
        "parent_id": "cat-root",
    }
