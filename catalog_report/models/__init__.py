"""
Data models for Catalog Report.

- Product: validated catalog record
- RejectedRow: raw row paired with the reason it failed validation
- ParseResult: outcome of parsing one raw row
"""

from catalog_report.models.product import ParseResult, Product, RejectedRow

__all__ = ["ParseResult", "Product", "RejectedRow"]
