# routes/report_routes.py
"""
Handles community issue reports.
"""
from flask import Blueprint, jsonify, request

from config import RECENT_ROWS_LIMIT
from database import ISSUE_TYPES, insert_report, get_recent_reports

report_bp = Blueprint('report_bp', __name__)


@report_bp.route('/reports', methods=['POST'])
def submit_report():
    """Appends a report. The server assigns its id and timestamp."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"status": "error", "error": "Request body must be a JSON object"}), 400
    issue_type = data.get('issue_type')
    description = data.get('description')
    description = description.strip() if isinstance(description, str) else ''

    if issue_type not in ISSUE_TYPES:
        return jsonify({"status": "error", "error": f"issue_type must be one of {list(ISSUE_TYPES)}"}), 400
    if not description:
        return jsonify({"status": "error", "error": "description is required"}), 400

    try:
        lat = float(data.get('lat') or 0)
        lng = float(data.get('lng') or 0)
    except (TypeError, ValueError):
        return jsonify({"status": "error", "error": "lat and lng must be numbers"}), 400

    try:
        report = insert_report(issue_type, description, lat, lng)
    except Exception as e:
        print(f"Error saving community report: {e}")
        return jsonify({"status": "error", "error": "Failed to save report"}), 500

    return jsonify({"status": "success", "report": report})


@report_bp.route('/reports', methods=['GET'])
def list_reports():
    """Returns the most recent reports, newest first."""
    try:
        return jsonify(get_recent_reports(limit=RECENT_ROWS_LIMIT))
    except Exception as e:
        print(f"Error in /api/reports: {e}")
        return jsonify({"error": "Failed to retrieve reports"}), 500
