"""
Report Assembler.

Formats aggregate views into console tables, a plain-text summary and a
JSON-ready export. No business logic lives here.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from catalog_report.models.product import Product
from catalog_report.stages.aggregation import AggregateResult

REPORT_TITLE = "Product Summary Report"
PRODUCT_HEADERS = ("Product Name", "Price")
CATEGORY_HEADERS = ("Category", "Count")


def format_price(price: float) -> str:
    """Render a price without a trailing .0 when it is integral."""
    if float(price).is_integer():
        return str(int(price))
    return str(price)


@dataclass
class ReportTable:
    """A titled table: header tuple plus row tuples of display strings."""
    title: str
    headers: Tuple[str, ...]
    rows: List[Tuple[str, ...]] = field(default_factory=list)


@dataclass
class CatalogReport:
    """
    Display-ready output of one run.
    """
    title: str
    tables: List[ReportTable]
    text: str  # Plain-text summary report
    export: dict  # Machine-readable export
    rejected_count: int = 0


class ReportAssembler:
    """
    Builds a CatalogReport from an AggregateResult.
    """

    def assemble(self, result: AggregateResult, rejected_count: int = 0) -> CatalogReport:
        """
        Assemble all report forms.

        Args:
            result: Aggregated views for the run
            rejected_count: Number of malformed rows skipped during parsing

        Returns:
            CatalogReport
        """
        return CatalogReport(
            title=REPORT_TITLE,
            tables=self.build_tables(result),
            text=self.build_text(result, rejected_count),
            export=self.build_export(result, rejected_count),
            rejected_count=rejected_count
        )

    def build_tables(self, result: AggregateResult) -> List[ReportTable]:
        return [
            ReportTable(
                title=filtered_title(result),
                headers=PRODUCT_HEADERS,
                rows=[_product_row(p) for p in result.filtered]
            ),
            ReportTable(
                title=category_title(result),
                headers=CATEGORY_HEADERS,
                rows=[(category, str(count)) for category, count in result.category_counts.items()]
            ),
            ReportTable(
                title=top_title(result),
                headers=PRODUCT_HEADERS,
                rows=[_product_row(p) for p in result.top_n]
            )
        ]

    def build_text(self, result: AggregateResult, rejected_count: int = 0) -> str:
        """
        Build the plain-text report.

        Sections, in order: header, filtered list, category counts,
        top-N list, and a skipped-rows line when rows were rejected.
        """
        lines = [f"=== {REPORT_TITLE} ===", ""]

        lines.append(f"{filtered_title(result)}:")
        lines.extend(_product_bullet(p) for p in result.filtered)
        lines.append("")

        lines.append(f"{category_title(result)}:")
        lines.extend(f"- {category}: {count}" for category, count in result.category_counts.items())
        lines.append("")

        lines.append(f"{top_title(result)}:")
        lines.extend(_product_bullet(p) for p in result.top_n)

        if rejected_count:
            lines.append("")
            lines.append(f"Skipped {rejected_count} malformed row(s).")

        return "\n".join(lines) + "\n"

    def build_export(self, result: AggregateResult, rejected_count: int = 0) -> dict:
        """Build the JSON-serializable export mirroring the three views."""
        return {
            "filteredProducts": [p.to_dict() for p in result.filtered],
            "categoryCounts": dict(result.category_counts),
            "topExpensive": [p.to_dict() for p in result.top_n],
            "minPrice": result.min_price,
            "topN": result.n,
            "scope": result.scope,
            "rejectedCount": rejected_count
        }


def filtered_title(result: AggregateResult) -> str:
    return f"In-stock products > {format_price(result.min_price)}"


def category_title(result: AggregateResult) -> str:
    if result.scope == "filtered":
        return "Products per category (filtered)"
    return "Products per category"


def top_title(result: AggregateResult) -> str:
    return f"Top {result.n} most expensive products"


def _product_row(product: Product) -> Tuple[str, str]:
    return (product.name, format_price(product.price))


def _product_bullet(product: Product) -> str:
    return f"- {product.name} ({format_price(product.price)})"
