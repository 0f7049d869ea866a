"""
Unit tests for console and HTML rendering.
"""

import pytest
from catalog_report.models.product import Product
from catalog_report.stages.aggregation import aggregate
from catalog_report.stages.report import ReportAssembler, ReportTable
from catalog_report.utils.rendering import (
    EMPTY_MARKER,
    render_console,
    render_console_table,
    render_html,
)


@pytest.fixture
def report():
    products = [
        Product(name="Laptop", price=1500.0, category="Tech", in_stock=True),
        Product(name="<Mug & Co>", price=12.5, category="Home", in_stock=True),
    ]
    return ReportAssembler().assemble(aggregate(products, min_price=10, n=1), rejected_count=1)


def test_console_table_contains_headers_and_rows():
    """Test a populated table renders headers and every cell."""
    table = ReportTable(
        title="Products per category",
        headers=("Category", "Count"),
        rows=[("Tech", "2"), ("Home", "1")]
    )

    rendered = render_console_table(table)
    lines = rendered.splitlines()

    assert "Category" in lines[0] and "Count" in lines[0]
    assert "Tech" in lines[1] and "2" in lines[1]
    assert "Home" in lines[2]


def test_console_table_empty():
    """Test an empty table prints its header and the empty marker."""
    table = ReportTable(title="Top 0 most expensive products", headers=("Product Name", "Price"))

    assert render_console_table(table) == "Product Name  Price\n" + EMPTY_MARKER


def test_render_console_titles_in_order(report):
    """Test console output lists the three tables under their titles."""
    rendered = render_console(report)

    first = rendered.index("In-stock products > 10:")
    second = rendered.index("Products per category:")
    third = rendered.index("Top 1 most expensive products:")
    assert first < second < third


def test_render_html_escapes_text(report):
    """Test HTML output escapes product names."""
    html = render_html(report)

    assert html.startswith("<html>")
    assert "<h1>Product Summary Report</h1>" in html
    assert "<h2>In-stock products &gt; 10</h2>" in html
    assert "&lt;Mug &amp; Co&gt;" in html
    assert "<Mug & Co>" not in html
    assert "<p>Skipped 1 malformed row(s).</p>" in html
    assert html.count("<table") == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
