"""Application settings."""

import os
from pathlib import Path

# Storage
DB_PATH = os.getenv("ANALYTICS_DB_PATH", "analytics.duckdb")
STORAGE_KEY = os.getenv("ANALYTICS_STORAGE_KEY", "viyu_analytics")
STORAGE_VERSION = "1.0.0"
MAX_BLOB_BYTES = int(os.getenv("ANALYTICS_MAX_BLOB_BYTES", str(5 * 1024 * 1024)))

# Bounded growth
MAX_PAGE_VIEWS = 1000
MAX_SEARCH_QUERIES = 500

# Query limits
DEFAULT_TOP_PAGES_LIMIT = 10
DEFAULT_QUERY_LIMIT = 20
DASHBOARD_LIMIT = 10
MAX_QUERY_LIMIT = 1000

# Auto-tracking
SEARCH_DEBOUNCE = 0.5

# Logging
LOG_DIR = Path("logs")
