"""
Record Parser.

Turns one raw catalog row (strings keyed by column name) into a validated
Product, or a RejectedRow carrying the first failing reason.
"""

import math
from typing import Dict, Mapping, Optional

from catalog_report.errors import RowValidationError
from catalog_report.models.product import ParseResult, Product, RejectedRow
import config.settings as settings

REASON_MISSING_NAME = "missing or empty product name"
REASON_INVALID_PRICE = "invalid price"
REASON_MISSING_CATEGORY = "missing or empty category"
REASON_INVALID_STOCK = "invalid stock flag"

_STOCK_FLAGS = {"true": True, "false": False}


class RecordParser:
    """
    Validates raw rows against the four catalog fields.

    Rules run in a fixed order and the first failure wins:
    name, price, category, stock flag.
    """

    def __init__(
        self,
        name_column: str = settings.COLUMN_NAME,
        price_column: str = settings.COLUMN_PRICE,
        category_column: str = settings.COLUMN_CATEGORY,
        in_stock_column: str = settings.COLUMN_IN_STOCK
    ):
        """
        Initialize record parser.

        Args:
            name_column: Source column holding the product name
            price_column: Source column holding the price
            category_column: Source column holding the category
            in_stock_column: Source column holding the "true"/"false" stock flag
        """
        self.name_column = name_column
        self.price_column = price_column
        self.category_column = category_column
        self.in_stock_column = in_stock_column

    @property
    def required_columns(self) -> tuple:
        return (
            self.name_column,
            self.price_column,
            self.category_column,
            self.in_stock_column
        )

    def parse(self, raw: Mapping[str, Optional[str]], row_number: int = 0) -> ParseResult:
        """
        Parse a single raw row.

        Args:
            raw: Column name -> raw string value
            row_number: 1-based data row number, kept on rejections for reporting

        Returns:
            ParseResult holding either the Product or the RejectedRow
        """
        # Keyword arguments evaluate left to right, which fixes the rule order.
        try:
            product = Product(
                name=self._parse_name(raw),
                price=self._parse_price(raw),
                category=self._parse_category(raw),
                in_stock=self._parse_in_stock(raw)
            )
        except RowValidationError as e:
            rejected = RejectedRow(
                row_number=row_number,
                reason=e.reason,
                raw=_snapshot(raw)
            )
            return ParseResult(rejected=rejected)

        return ParseResult(product=product)

    def _parse_name(self, raw: Mapping[str, Optional[str]]) -> str:
        name = _text(raw, self.name_column)
        if not name:
            raise RowValidationError(REASON_MISSING_NAME)
        return name

    def _parse_price(self, raw: Mapping[str, Optional[str]]) -> float:
        text = _text(raw, self.price_column)
        try:
            price = float(text)
        except ValueError:
            raise RowValidationError(REASON_INVALID_PRICE)
        if not math.isfinite(price):
            raise RowValidationError(REASON_INVALID_PRICE)
        return price

    def _parse_category(self, raw: Mapping[str, Optional[str]]) -> str:
        category = _text(raw, self.category_column)
        if not category:
            raise RowValidationError(REASON_MISSING_CATEGORY)
        return category

    def _parse_in_stock(self, raw: Mapping[str, Optional[str]]) -> bool:
        flag = _text(raw, self.in_stock_column).lower()
        if flag not in _STOCK_FLAGS:
            raise RowValidationError(REASON_INVALID_STOCK)
        return _STOCK_FLAGS[flag]


def _text(raw: Mapping[str, Optional[str]], column: str) -> str:
    """Trimmed field value; absent or non-string values count as empty."""
    value = raw.get(column)
    if not isinstance(value, str):
        return ""
    return value.strip()


def _snapshot(raw: Mapping[str, Optional[str]]) -> Dict[str, Optional[str]]:
    """Copy of the raw row with non-string cells (short rows) mapped to None."""
    return {
        str(key): value if isinstance(value, str) else None
        for key, value in raw.items()
    }
