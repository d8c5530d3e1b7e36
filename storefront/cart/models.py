"""Cart models with integer minor-unit pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional

from storefront.errors import CorruptedCart, InvalidPrice, InvalidQuantity, ERROR_NEGATIVE_QUANTITY
from storefront.services.money import format_minor_units


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def require_quantity(value: Any, minimum: int = 1) -> int:
    """
    Validate a cart quantity.

    Only real ints are accepted; bools, floats and numeric strings are
    rejected so callers must coerce form input before it reaches the cart.

    Raises:
        InvalidQuantity: value is not an int or is below ``minimum``
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantity(value)
    if value < minimum:
        if minimum == 0:
            raise InvalidQuantity(value, ERROR_NEGATIVE_QUANTITY)
        raise InvalidQuantity(value)
    return value


@dataclass(frozen=True)
class ProductSnapshot:
    """Product fields copied into a cart line at add time."""
    product_id: str
    display_name: str
    unit_price_minor_units: int


@dataclass
class CartLine:
    """One purchased product within a cart."""
    product_id: str
    display_name: str
    unit_price_minor_units: int
    quantity: int
    added_at: str = ""

    def __post_init__(self):
        if not self.product_id:
            raise ValueError("product_id must be a non-empty string")
        if self.unit_price_minor_units < 0:
            raise InvalidPrice(self.product_id, self.unit_price_minor_units)
        require_quantity(self.quantity)
        if not self.added_at:
            self.added_at = _utcnow()

    @classmethod
    def from_snapshot(cls, snapshot: ProductSnapshot, quantity: int) -> "CartLine":
        return cls(
            product_id=snapshot.product_id,
            display_name=snapshot.display_name,
            unit_price_minor_units=snapshot.unit_price_minor_units,
            quantity=quantity,
        )

    @property
    def line_total(self) -> int:
        """Total for all units in minor units."""
        return self.unit_price_minor_units * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "display_name": self.display_name,
            "unit_price_minor_units": self.unit_price_minor_units,
            "quantity": self.quantity,
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        return cls(
            product_id=str(data["product_id"]),
            display_name=str(data["display_name"]),
            unit_price_minor_units=int(data["unit_price_minor_units"]),
            quantity=data["quantity"],
            added_at=data.get("added_at", ""),
        )


@dataclass
class Cart:
    """
    Shopping cart owned by a single session/customer context.

    Lines keep first-insertion order. There is at most one line per product;
    totals are always computed from the lines, never stored.
    """
    context_id: str
    lines: List[CartLine] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self):
        now = _utcnow()
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    # ==================== READS ====================

    def find_line(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(line.quantity for line in self.lines)

    @property
    def total(self) -> int:
        """Sum of line totals in minor units."""
        return sum(line.line_total for line in self.lines)

    # ==================== MUTATIONS ====================

    def add(self, snapshot: ProductSnapshot, quantity: int) -> CartLine:
        """Increment an existing line or append a new one from ``snapshot``."""
        require_quantity(quantity)
        line = self.find_line(snapshot.product_id)
        if line is not None:
            # Keep the snapshot taken when the line was created
            line.quantity += quantity
            return line
        line = CartLine.from_snapshot(snapshot, quantity)
        self.lines.append(line)
        return line

    def remove(self, product_id: str) -> bool:
        """Drop the line for ``product_id``. Returns False if there was none."""
        remaining = [line for line in self.lines if line.product_id != product_id]
        removed = len(remaining) != len(self.lines)
        self.lines = remaining
        return removed

    def set_quantity(self, product_id: str, quantity: int) -> bool:
        """
        Replace a line's quantity; 0 removes the line.

        Returns True if the cart changed. Products not in the cart are left
        alone (no implicit add).
        """
        require_quantity(quantity, minimum=0)
        if quantity == 0:
            return self.remove(product_id)
        line = self.find_line(product_id)
        if line is None:
            return False
        line.quantity = quantity
        return True

    def clear(self) -> None:
        self.lines = []

    def touch(self) -> None:
        self.updated_at = _utcnow()

    # ==================== SERIALIZATION ====================

    def to_dict(self) -> dict:
        """Convert to a plain dict for storage."""
        return {
            "context_id": self.context_id,
            "lines": [line.to_dict() for line in self.lines],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """
        Rebuild a cart from stored data.

        Raises:
            CorruptedCart: missing fields, invalid quantities or duplicate lines
        """
        try:
            lines = [CartLine.from_dict(item) for item in data.get("lines", [])]
            cart = cls(
                context_id=str(data["context_id"]),
                lines=lines,
                created_at=data.get("created_at", ""),
                updated_at=data.get("updated_at", ""),
            )
        except (KeyError, TypeError, ValueError, AttributeError, InvalidQuantity) as e:
            raise CorruptedCart(str(e)) from e

        product_ids = [line.product_id for line in lines]
        if len(product_ids) != len(set(product_ids)):
            raise CorruptedCart("duplicate product lines")
        return cart

    def to_view(self) -> dict:
        """Read-only structure handed to renderers."""
        return {
            "context_id": self.context_id,
            "lines": [
                {
                    "product_id": line.product_id,
                    "display_name": line.display_name,
                    "quantity": line.quantity,
                    "unit_price_minor_units": line.unit_price_minor_units,
                    "line_total_minor_units": line.line_total,
                    "unit_price": format_minor_units(line.unit_price_minor_units),
                    "line_total": format_minor_units(line.line_total),
                }
                for line in self.lines
            ],
            "total_items": self.total_items,
            "total_minor_units": self.total,
            "total": format_minor_units(self.total),
            "updated_at": self.updated_at,
        }
