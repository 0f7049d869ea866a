"""
Product data model.

Represents validated catalog records and the rows that failed validation.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Product:
    """
    A validated catalog record.
    Only RecordParser constructs these from raw rows.
    """
    name: str  # Trimmed, non-empty
    price: float  # Finite
    category: str  # Trimmed, non-empty
    in_stock: bool

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock
        }


@dataclass(frozen=True)
class RejectedRow:
    """
    A raw row that failed validation, with the first failing reason.
    """
    row_number: int  # 1-based position among the data rows of the source
    reason: str
    raw: Dict[str, Optional[str]]

    def to_dict(self) -> dict:
        return {
            "rowNumber": self.row_number,
            "reason": self.reason,
            "raw": self.raw
        }


@dataclass(frozen=True)
class ParseResult:
    """
    Tagged outcome of parsing one raw row: exactly one of
    `product` or `rejected` is set.
    """
    product: Optional[Product] = None
    rejected: Optional[RejectedRow] = None

    def __post_init__(self):
        if (self.product is None) == (self.rejected is None):
            raise ValueError("ParseResult needs exactly one of product or rejected")

    @property
    def ok(self) -> bool:
        return self.product is not None


# Design Rationale and Trade-offs:
#
# 1. Why frozen dataclasses?
#    - Products are shared between filtered, counted and ranked views
#    - Trade-off: No in-place fixes; a corrected record is a new object
#
# 2. Why a ParseResult tag instead of raising per row?
#    - A bad row is an expected outcome, and iteration must continue
#    - Trade-off: Callers must check .ok before reading .product
#
# 3. Why camelCase keys in to_dict()?
#    - Product objects sit inside the JSON export next to camelCase top-level keys
#    - Trade-off: Differs from the snake_case attribute names
