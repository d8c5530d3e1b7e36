"""Admin API key check."""
import hmac

from fastapi import Header, HTTPException

from storefront.config import get_admin_api_key
from storefront.errors import ERROR_ADMIN_REQUIRED
from storefront.logging import get_logger

logger = get_logger(__name__)


async def verify_admin(authorization: str = Header(None, alias="Authorization")) -> bool:
    """
    Verify `Authorization: Bearer <ADMIN_API_KEY>`.

    Raises 403 when the key is missing, wrong, or not configured.
    """
    expected = get_admin_api_key()
    if not expected:
        logger.warning("ADMIN_API_KEY is not configured; admin endpoints are locked")
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    if not authorization:
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    if not hmac.compare_digest(parts[1].encode(), expected.encode()):
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    return True
