"""Request input validation for cart endpoints."""
import re
from typing import Any, Union

DEFAULT_QUANTITY = 1

# secrets.token_urlsafe output, or a customer id of the same alphabet
_CONTEXT_ID_RE = re.compile(r"^[A-Za-z0-9_-]{16,128}$")
_NUMERIC_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_requested_quantity(raw: Any) -> Union[int, float]:
    """
    Coerce a client-supplied quantity for "add to cart".

    Absent or non-numeric values fall back to 1, matching the storefront's
    "add one" buttons. Numeric values are passed through (even zero,
    negative or fractional) so the cart itself rejects them as invalid.

    Args:
        raw: Value from the JSON body or form (None, int, str, float)

    Returns:
        int for whole numbers, the float itself for fractional values
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_QUANTITY
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if not _NUMERIC_RE.fullmatch(text):
            return DEFAULT_QUANTITY
        if text.lstrip("+-").isdigit():
            return int(text)
        raw = float(text)
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else raw
    return DEFAULT_QUANTITY


def is_valid_context_id(value: str | None) -> bool:
    """Check that a client-supplied cart context id is well formed."""
    return bool(value) and bool(_CONTEXT_ID_RE.match(value))
