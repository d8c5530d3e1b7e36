"""Cart session context: which cart a request operates on."""
import secrets
from dataclasses import dataclass
from typing import Optional

from fastapi import Cookie, Header, Response

from storefront.config import CART_COOKIE_NAME, CART_HEADER_NAME, get_cart_ttl_seconds, is_cart_cookie_secure
from storefront.utils.validators import is_valid_context_id


@dataclass(frozen=True)
class CartContext:
    """Explicit cart owner key threaded into every cart operation."""
    context_id: str
    is_new: bool = False


def new_context_id() -> str:
    return secrets.token_urlsafe(32)


async def get_cart_context(
    response: Response,
    x_cart_session: Optional[str] = Header(None, alias=CART_HEADER_NAME),
    cart_session: Optional[str] = Cookie(None, alias=CART_COOKIE_NAME),
) -> CartContext:
    """
    Resolve the cart context id for a request.

    Header wins over cookie. Missing or malformed ids get a fresh token,
    which is sent back as a cookie and response header.
    """
    for candidate in (x_cart_session, cart_session):
        if is_valid_context_id(candidate):
            context = CartContext(context_id=candidate)
            break
    else:
        context = CartContext(context_id=new_context_id(), is_new=True)

    response.headers[CART_HEADER_NAME] = context.context_id
    if context.is_new:
        response.set_cookie(
            CART_COOKIE_NAME,
            context.context_id,
            max_age=get_cart_ttl_seconds(),
            httponly=True,
            secure=is_cart_cookie_secure(),
            samesite="lax",
        )
    return context
