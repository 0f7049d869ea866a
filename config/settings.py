"""
Configuration settings for Catalog Report.

Centralized configuration for the CLI and pipeline parameters.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_INPUT_PATH = Path(os.getenv("CATALOG_REPORT_INPUT", "products.csv"))
OUTPUT_ROOT = Path(os.getenv("CATALOG_REPORT_OUTPUT_DIR", "output"))

# Aggregation defaults
DEFAULT_MIN_PRICE = 0.0
DEFAULT_TOP_N = 5
AGGREGATION_SCOPE = "all"  # "all" or "filtered"
AGGREGATION_SCOPES = ("all", "filtered")

# Source columns (header of the catalog file)
COLUMN_NAME = "ProductName"
COLUMN_PRICE = "Price"
COLUMN_CATEGORY = "Category"
COLUMN_IN_STOCK = "InStock"

# Ingestion
CSV_DELIMITER = ","
CSV_ENCODING = "utf-8"
READ_CHUNK_SIZE = 500  # Rows per streamed chunk

# Report output
REPORT_BASENAME = "summary_report"
REJECTED_LOG_NAME = "rejected_rows.log"
WRITE_REJECTED_LOG = True

# Logging
LOG_LEVEL = os.getenv("CATALOG_REPORT_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "catalog_report.log"


# Design Rationale and Trade-offs:
#
# 1. Why environment variables for input/output paths?
#    - Scheduled runs can point at other directories without CLI edits
#    - Trade-off: Two places to look (env and flags); flags win
#
# 2. Why column names here instead of CLI flags?
#    - The catalog header rarely changes between runs
#    - Trade-off: A differently named export needs a settings edit
#
# 3. Why default AGGREGATION_SCOPE to "all"?
#    - Matches the original report's counts and ranking
#    - Trade-off: Out-of-stock items can appear in the top-N view
