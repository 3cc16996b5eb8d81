# database/setup.py
"""
Handles the initial setup of the database schema and default data.
"""
from datetime import datetime, timezone

from .config import DB_LOCK, get_connection


def create_tables():
    """
    Creates the sensor and community report tables if they don't already exist.
    """
    with DB_LOCK:
        conn = get_connection()
        cursor = conn.cursor()

        # Table 1: TDS readings pushed by sensors and gateways
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS sensor_data (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                tds_value REAL NOT NULL,
                location_lat REAL,
                location_lng REAL,
                timestamp TEXT NOT NULL
            )
        ''')

        # Table 2: Issues reported by the community
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS community_reports (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                issue_type TEXT NOT NULL,
                description TEXT NOT NULL,
                location_lat REAL,
                location_lng REAL,
                timestamp TEXT NOT NULL
            )
        ''')

        conn.commit()
        conn.close()


def seed_demo_data():
    """
    Inserts a few New Delhi readings and reports when the tables are empty,
    so a fresh install has something to show.
    """
    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    with DB_LOCK:
        conn = get_connection()
        cursor = conn.cursor()

        sensor_count = cursor.execute("SELECT COUNT(*) FROM sensor_data").fetchone()[0]
        if sensor_count == 0:
            cursor.executemany(
                "INSERT INTO sensor_data (tds_value, location_lat, location_lng, timestamp) VALUES (?, ?, ?, ?)",
                [
                    (450.5, 28.6139, 77.2090, now),
                    (120.2, 28.6139, 77.2090, now),
                    (850.0, 28.6139, 77.2090, now),
                ],
            )
            print("Seeded demo sensor readings.")

        report_count = cursor.execute("SELECT COUNT(*) FROM community_reports").fetchone()[0]
        if report_count == 0:
            cursor.executemany(
                "INSERT INTO community_reports (issue_type, description, location_lat, location_lng, timestamp) VALUES (?, ?, ?, ?, ?)",
                [
                    ("Taste", "Water tastes slightly metallic today in Sector 4.", 28.6139, 77.2090, now),
                    ("Color", "Noticeable yellowish tint in the tap water.", 28.6139, 77.2090, now),
                ],
            )
            print("Seeded demo community reports.")

        conn.commit()
        conn.close()
