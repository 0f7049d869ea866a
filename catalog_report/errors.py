"""
Exception taxonomy for Catalog Report.

Per-row validation failures never escape the parser; they become
RejectedRow values. Run-level failures are raised to main.py.
"""


class CatalogReportError(Exception):
    """Base class for all Catalog Report errors."""


class RowValidationError(CatalogReportError, ValueError):
    """A single raw row failed one validation rule."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class EmptyResultError(CatalogReportError):
    """No valid products remained after parsing the whole source."""

    def __init__(self, source: str, rejected_count: int = 0):
        super().__init__(
            f"No valid products found in {source} "
            f"({rejected_count} malformed row(s) skipped)"
        )
        self.source = source
        self.rejected_count = rejected_count


class SourceReadError(CatalogReportError):
    """The catalog source could not be opened, decoded or tokenized."""

    def __init__(self, source: str, cause: Exception):
        super().__init__(f"Cannot read catalog source {source}: {cause}")
        self.source = source
        self.cause = cause
