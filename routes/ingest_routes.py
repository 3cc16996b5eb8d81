# routes/ingest_routes.py
"""
Handles the ingestion endpoint used by sensors and gateways, and read access
to stored readings.
"""
import math

from flask import Blueprint, jsonify, request, current_app

from alerter import broadcast_tds_update
from config import RECENT_ROWS_LIMIT
from database import insert_reading, get_recent_readings

ingest_bp = Blueprint('ingest_bp', __name__)


def _parse_coordinate(data, key):
    value = data.get(key)
    if value in (None, ""):
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"'{key}' must be a number.")
    return value


@ingest_bp.route('/water-data', methods=['POST'])
@ingest_bp.route('/tds', methods=['POST'])
def ingest_reading():
    """
    Receives {tds, lat?, lng?} from a sensor or gateway, stores it and
    broadcasts the new value to live dashboards.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"status": "error", "error": "Request body must be a JSON object"}), 400
    if data.get('tds') is None:
        return jsonify({"status": "error", "error": "TDS value required"}), 400

    try:
        tds = float(data['tds'])
        lat = _parse_coordinate(data, 'lat')
        lng = _parse_coordinate(data, 'lng')
    except (TypeError, ValueError):
        return jsonify({"status": "error", "error": "tds, lat and lng must be numbers"}), 400

    if not math.isfinite(tds) or tds < 0:
        return jsonify({"status": "error", "error": "TDS must be a non-negative number"}), 400

    try:
        reading = insert_reading(tds, lat, lng)
    except Exception as e:
        print(f"Error in ingestion: {e}")
        return jsonify({"status": "error", "error": "Failed to record reading"}), 500

    current_app.config['LATEST_TDS'] = broadcast_tds_update(reading)
    print(f"INGEST: Received TDS {tds} at ({lat}, {lng}), stored as ID {reading['id']}.")
    return jsonify({"status": "success", "message": "Data recorded", "reading": reading})


@ingest_bp.route('/tds', methods=['GET'])
def latest_tds():
    """Returns the last value received by the ingestion endpoint."""
    return jsonify(current_app.config.get('LATEST_TDS') or {"tds": 0})


@ingest_bp.route('/water-data', methods=['GET'])
def recent_readings():
    """Returns the most recent stored readings, newest first."""
    try:
        return jsonify(get_recent_readings(limit=RECENT_ROWS_LIMIT))
    except Exception as e:
        print(f"Error in /api/water-data: {e}")
        return jsonify({"error": "Failed to retrieve data"}), 500
