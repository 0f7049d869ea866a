"""
Utility modules for Catalog Report.

Cross-cutting concerns:
- Rendering: Console and HTML rendering of report tables
- Storage: File output for reports and rejected rows
"""
