# SqliteTypes/config/settings.py
import logging
import os
from dotenv import load_dotenv

# Load environment variables from a .env file (optional)
load_dotenv()


def parse_log_level(raw: str) -> str:
    """Accepts any standard level name, case-insensitively."""
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"SQLITE_TYPES_LOG_LEVEL must be a logging level name (e.g. INFO), got {raw!r}.")
    return level


def parse_print_width(raw: str) -> int:
    try:
        width = int(raw)
    except ValueError:
        width = 0
    if width <= 0:
        raise ValueError(f"SQLITE_TYPES_PRINT_WIDTH must be a positive integer, got {raw!r}.")
    return width


# --- Logging ---
LOG_LEVEL = parse_log_level(os.getenv("SQLITE_TYPES_LOG_LEVEL", "INFO"))

# --- Introspection ---
SQLITE_URI_PREFIX = "sqlite:///"
SYSTEM_TABLE_PREFIX = "sqlite_"  # Internal catalog tables are never emitted

# --- Type Synthesis ---
AGGREGATE_TYPE_NAME = "Tables"
INT64_TS_TYPE = "BigInt"
BLOB_TS_TYPE = "Blob"

# --- Formatter (Prettier defaults) ---
PRINT_WIDTH = parse_print_width(os.getenv("SQLITE_TYPES_PRINT_WIDTH", "80"))
TAB_WIDTH = 2
