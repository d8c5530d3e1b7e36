"""Request input helpers."""
from .validators import parse_requested_quantity, is_valid_context_id

__all__ = ["parse_requested_quantity", "is_valid_context_id"]
