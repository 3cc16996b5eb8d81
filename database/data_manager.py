# database/data_manager.py
"""
Manages the insertion and retrieval of TDS sensor readings.
"""
from datetime import datetime, timezone

from .config import DB_LOCK, get_connection


def _now():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def row_to_reading(row):
    """Converts a sensor_data row into the reading format used by the analysis code."""
    return {
        "id": row["id"],
        "location_label": "Sensor",
        "tds": row["tds_value"],
        "turbidity": None,
        "temperature": None,
        "lat": row["location_lat"],
        "lng": row["location_lng"],
        "timestamp": row["timestamp"],
    }


def insert_reading(tds, lat=0, lng=0):
    """
    Inserts a new TDS reading and returns it as stored, including the server-assigned
    'id' and 'timestamp'.
    """
    timestamp = _now()
    with DB_LOCK:
        conn = get_connection()
        cursor = conn.cursor()
        cursor.execute(
            "INSERT INTO sensor_data (tds_value, location_lat, location_lng, timestamp) VALUES (?, ?, ?, ?)",
            (tds, lat, lng, timestamp),
        )
        last_id = cursor.lastrowid
        conn.commit()
        conn.close()
    return {
        "id": last_id, "location_label": "Sensor", "tds": tds, "turbidity": None,
        "temperature": None, "lat": lat, "lng": lng, "timestamp": timestamp,
    }


def get_recent_readings(limit=50):
    """Fetches the most recent readings, newest first."""
    with DB_LOCK:
        conn = get_connection()
        rows = conn.execute(
            "SELECT * FROM sensor_data ORDER BY timestamp DESC, id DESC LIMIT ?", (limit,)
        ).fetchall()
        conn.close()
    return [row_to_reading(row) for row in rows]


def get_latest_reading():
    """
    Fetches the single most recent reading.
    Returns None if the table is empty.
    """
    readings = get_recent_readings(limit=1)
    return readings[0] if readings else None
