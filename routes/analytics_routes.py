# routes/analytics_routes.py
"""
Handles API endpoints for water safety classification, the hyperlocal
dashboard view and the heatmap layer.
"""
import math

from flask import Blueprint, jsonify, request, current_app

from analysis import build_heat_points, map_params
from config import LOCAL_WINDOW_SIZE, SMOOTHING_WINDOW
from dashboard import build_local_view, parse_origin
from database import get_recent_reports
from llm_analyzer import resolve_blocking
from water_quality import classify, get_status_badge, get_score_color

analytics_bp = Blueprint('analytics_bp', __name__)


def _tds_arg():
    """Reads a non-negative 'tds' query argument. Raises ValueError when invalid."""
    tds = float(request.args['tds'])
    if not math.isfinite(tds) or tds < 0:
        raise ValueError("tds must be a non-negative number")
    return tds


@analytics_bp.route('/classify')
def classify_tds():
    """Returns the deterministic safety assessment for a TDS value."""
    try:
        tds = _tds_arg()
    except (KeyError, ValueError):
        return jsonify({"error": "A non-negative numeric 'tds' query parameter is required"}), 400

    assessment = classify(tds)
    assessment['color'] = get_score_color(assessment['score'])
    return jsonify(assessment)


@analytics_bp.route('/status')
def status_badge():
    """Returns the status card label and color for a TDS value."""
    try:
        tds = _tds_arg()
    except (KeyError, ValueError):
        return jsonify({"error": "A non-negative numeric 'tds' query parameter is required"}), 400
    return jsonify(get_status_badge(tds))


@analytics_bp.route('/local')
def local_view():
    """
    Builds the user's hyperlocal view from the reading corpus.

    Query parameters:
        lat, lng: the user's location. If omitted, the fallback region is used.
        n: number of nearby readings (default LOCAL_WINDOW_SIZE).
        window: moving average window (default SMOOTHING_WINDOW).
        resolve: '0' skips the AI advisory and returns only the baseline.
    """
    try:
        origin = parse_origin(request.args.get('lat'), request.args.get('lng'))
        n = int(request.args.get('n', LOCAL_WINDOW_SIZE))
        window = int(request.args.get('window', SMOOTHING_WINDOW))
        if window < 1:
            raise ValueError("window must be at least 1")
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        view = build_local_view(current_app.config['READING_CORPUS'], origin, n=n, window=window)

        assessment = view['baseline']
        if assessment is not None and request.args.get('resolve', '1') != '0':
            reports = get_recent_reports()
            assessment = resolve_blocking(view['latest_tds'], reports, timeout=current_app.config['ADVISORY_TIMEOUT_SECONDS'])
        view['assessment'] = assessment
        return jsonify(view)
    except Exception as e:
        print(f"Error in /analytics/local: {e}")
        return jsonify({"error": str(e)}), 500


@analytics_bp.route('/heatmap')
def heatmap_layer():
    """Returns heatmap rendering parameters for a zoom level, plus the points to render."""
    try:
        zoom = int(request.args.get('zoom', 5))
    except ValueError:
        return jsonify({"error": "zoom must be an integer"}), 400

    include_points = request.args.get('points', '1') != '0'
    response = {"params": map_params(zoom)}
    if include_points:
        response["points"] = build_heat_points(current_app.config['HEATMAP_CORPUS'])
    return jsonify(response)
