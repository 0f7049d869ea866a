"""
Catalog Report - product catalog summary generator.

Loads a delimited product catalog, validates each row, and emits
filtered, per-category and top-N views as console tables and report files.
"""

__version__ = "1.0.0"
