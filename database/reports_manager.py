# database/reports_manager.py
"""
Handles all database operations for community issue reports.
"""
from datetime import datetime, timezone

from .config import DB_LOCK, get_connection

ISSUE_TYPES = ("Taste", "Smell", "Color", "Health")


def _row_to_report(row):
    return {
        "id": row["id"],
        "issue_type": row["issue_type"],
        "description": row["description"],
        "lat": row["location_lat"],
        "lng": row["location_lng"],
        "timestamp": row["timestamp"],
    }


def insert_report(issue_type, description, lat=0, lng=0):
    """
    Adds a community report and returns it with its new 'id' and 'timestamp'.

    Args:
        issue_type (str): One of ISSUE_TYPES.
        description (str): What the reporter observed.
        lat (float), lng (float): Where it was observed.
    """
    if issue_type not in ISSUE_TYPES:
        raise ValueError(f"Unknown issue type '{issue_type}'. Expected one of {ISSUE_TYPES}.")

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    with DB_LOCK:
        conn = get_connection()
        cursor = conn.cursor()
        cursor.execute(
            """INSERT INTO community_reports (issue_type, description, location_lat, location_lng, timestamp)
               VALUES (?, ?, ?, ?, ?)""",
            (issue_type, description, lat, lng, timestamp),
        )
        report_id = cursor.lastrowid
        conn.commit()
        conn.close()
    return {
        "id": report_id, "issue_type": issue_type, "description": description,
        "lat": lat, "lng": lng, "timestamp": timestamp,
    }


def get_recent_reports(limit=50):
    """Retrieves the most recent community reports, newest first."""
    with DB_LOCK:
        conn = get_connection()
        rows = conn.execute(
            "SELECT * FROM community_reports ORDER BY timestamp DESC, id DESC LIMIT ?", (limit,)
        ).fetchall()
        conn.close()
    return [_row_to_report(row) for row in rows]
