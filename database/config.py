# database/config.py
"""
Centralized configuration for the database.
"""
import os
import sqlite3
import threading

# --- Centralized Configuration ---

# The file path for the SQLite database.
DB_PATH = os.getenv("JAL_DRISHTI_DB", "water_data.db")

# A thread lock to prevent race conditions during concurrent database writes.
DB_LOCK = threading.Lock()


def set_db_path(path):
    """Points every database function at a different file (used by tests and the CLI)."""
    global DB_PATH
    DB_PATH = path


def get_connection():
    """Opens a connection to the current database with rows accessible by column name."""
    conn = sqlite3.connect(DB_PATH, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn
