"""
Rendering utility.

Turns ReportTables into console text and HTML using pandas.
"""

from html import escape
from typing import List

import pandas as pd

from catalog_report.stages.report import CatalogReport, ReportTable

EMPTY_MARKER = "(none)"


def table_frame(table: ReportTable) -> pd.DataFrame:
    """Build a DataFrame whose columns are the table headers."""
    return pd.DataFrame(table.rows, columns=list(table.headers))


def render_console_table(table: ReportTable) -> str:
    """
    Render a table for the terminal.

    Empty tables print their header followed by a "(none)" marker.
    """
    if not table.rows:
        return "  ".join(table.headers) + "\n" + EMPTY_MARKER
    return table_frame(table).to_string(index=False)


def render_console(report: CatalogReport) -> str:
    """Render every table of the report, each under its title."""
    blocks: List[str] = []
    for table in report.tables:
        blocks.append(f"{table.title}:\n\n{render_console_table(table)}")
    return "\n\n".join(blocks) + "\n"


def render_html(report: CatalogReport) -> str:
    """
    Render the full report as a standalone HTML page.

    All cell and heading text is escaped.
    """
    parts = [
        "<html>",
        f"<head><title>{escape(report.title)}</title></head>",
        "<body>",
        f"<h1>{escape(report.title)}</h1>"
    ]

    for table in report.tables:
        parts.append(f"<h2>{escape(table.title)}</h2>")
        parts.append(table_frame(table).to_html(index=False, escape=True))

    if report.rejected_count:
        parts.append(f"<p>Skipped {report.rejected_count} malformed row(s).</p>")

    parts.extend(["</body>", "</html>"])
    return "\n".join(parts) + "\n"
