"""Environment-driven storefront settings."""
import os

from storefront.logging import get_logger

logger = get_logger(__name__)

# Supported cart persistence backends
CART_STORE_REDIS = "redis"
CART_STORE_SUPABASE = "supabase"
CART_STORE_MEMORY = "memory"
CART_STORE_BACKENDS = (CART_STORE_REDIS, CART_STORE_SUPABASE, CART_STORE_MEMORY)

DEFAULT_CART_TTL_SECONDS = 86400  # 24 hours
DEFAULT_CATALOG_PAGE_SIZE = 2

CART_COOKIE_NAME = "cart_session"
CART_HEADER_NAME = "X-Cart-Session"


def _get_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using {default}")
        return default
    if value < 1:
        logger.warning(f"{name} must be >= 1, using {default}")
        return default
    return value


def get_cart_store_backend() -> str:
    """Get configured cart store backend name (CART_STORE)."""
    backend = os.environ.get("CART_STORE", CART_STORE_REDIS).strip().lower()
    if backend not in CART_STORE_BACKENDS:
        raise ValueError(
            f"Unsupported CART_STORE '{backend}'. Expected one of: {', '.join(CART_STORE_BACKENDS)}"
        )
    return backend


def get_cart_ttl_seconds() -> int:
    return _get_int("CART_TTL_SECONDS", DEFAULT_CART_TTL_SECONDS)


def get_catalog_page_size() -> int:
    return _get_int("CATALOG_PAGE_SIZE", DEFAULT_CATALOG_PAGE_SIZE)


def get_admin_api_key() -> str:
    return os.environ.get("ADMIN_API_KEY", "")


def is_cart_cookie_secure() -> bool:
    return os.environ.get("CART_COOKIE_SECURE", "1") not in ("0", "false", "False")
