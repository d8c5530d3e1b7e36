"""
Money Utilities - minor-unit integer arithmetic for prices.

Catalog prices are stored as Decimal major units (e.g. 12.50). Carts work
exclusively in integer minor units (e.g. 1250 cents) so totals never drift.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

MINOR_UNITS_PER_MAJOR = 100
MONEY_PRECISION = Decimal("0.01")

Number = Union[str, int, float, Decimal, None]


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Via str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_price(value: Number) -> Decimal:
    """Round a major-unit amount to 2 decimal places."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def to_minor_units(value: Number) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Args:
        value: Amount in major units (e.g., 12.50)

    Returns:
        Amount in minor units (e.g., 1250)
    """
    decimal_value = to_decimal(value)
    return int((decimal_value * MINOR_UNITS_PER_MAJOR).to_integral_value(rounding=ROUND_HALF_UP))


def from_minor_units(minor_units: int) -> Decimal:
    """Convert integer minor units back to a 2-decimal major-unit amount."""
    return (Decimal(minor_units) / Decimal(MINOR_UNITS_PER_MAJOR)).quantize(MONEY_PRECISION)


def format_minor_units(minor_units: int) -> str:
    """Render minor units as a plain major-unit string ("12.50") for display."""
    return f"{from_minor_units(minor_units):.2f}"
