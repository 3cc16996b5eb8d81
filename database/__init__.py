# database/__init__.py
"""
This file makes the database functions available at the package level,
allowing for cleaner imports in other parts of the application.
"""

# --- Core & Setup ---
from .config import DB_LOCK, get_connection, set_db_path
from .setup import create_tables, seed_demo_data

# --- Sensor Readings ---
from .data_manager import (
    get_latest_reading,
    get_recent_readings,
    insert_reading,
    row_to_reading,
)

# --- Community Reports ---
from .reports_manager import (
    ISSUE_TYPES,
    get_recent_reports,
    insert_report,
)
