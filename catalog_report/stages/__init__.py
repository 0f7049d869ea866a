"""
Pipeline stages for Catalog Report.

Contains the modules a catalog passes through in one run:
- Ingestion (CatalogSource)
- Record Parser
- Aggregation (filter, category counts, top-N)
- Report Assembler
"""
