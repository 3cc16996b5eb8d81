# app.py

from flask import Flask

import config
from extensions import socketio
from database import create_tables, seed_demo_data, set_db_path
from sensor_simulator import generate_corpus, generate_heatmap_corpus

# --- Import Blueprints from the 'routes' package ---
from routes.ingest_routes import ingest_bp
from routes.report_routes import report_bp
from routes.analytics_routes import analytics_bp
# Registers the Socket.IO event handlers.
import routes.live_routes  # noqa: F401


def create_app(test_config=None):
    """
    Creates and configures the Flask application.
    This factory pattern is useful for testing and scalability.
    """
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=config.SECRET_KEY,
        DB_PATH=None,
        SEED_DEMO_DATA=True,
        READING_CORPUS=None,
        HEATMAP_CORPUS=None,
        LATEST_TDS=None,
        ADVISORY_TIMEOUT_SECONDS=config.ADVISORY_TIMEOUT_SECONDS,
        REFRESH_INTERVAL_SECONDS=config.REFRESH_INTERVAL_SECONDS,
        CONTAMINATION_ALERT_DELAY_SECONDS=config.CONTAMINATION_ALERT_DELAY_SECONDS,
        DRIFT_INTERVAL_SECONDS=config.DRIFT_INTERVAL_SECONDS,
    )
    if test_config:
        app.config.update(test_config)

    # --- Database ---
    if app.config['DB_PATH']:
        set_db_path(app.config['DB_PATH'])
    create_tables()
    if app.config['SEED_DEMO_DATA']:
        seed_demo_data()

    # --- Synthetic corpora ---
    if app.config['READING_CORPUS'] is None:
        app.config['READING_CORPUS'] = generate_corpus(config.SYNTHETIC_CORPUS_SIZE, seed=config.SYNTHETIC_SEED)
    if app.config['HEATMAP_CORPUS'] is None:
        app.config['HEATMAP_CORPUS'] = generate_heatmap_corpus(seed=config.SYNTHETIC_SEED)

    # --- Register Blueprints ---
    # Ingestion and community reports live under /api (e.g., /api/water-data, /api/reports).
    app.register_blueprint(ingest_bp, url_prefix='/api')
    app.register_blueprint(report_bp, url_prefix='/api')

    # Classification, hyperlocal view and heatmap (e.g., /analytics/local, /analytics/heatmap).
    app.register_blueprint(analytics_bp, url_prefix='/analytics')

    # Initialize SocketIO with the app
    socketio.init_app(app)

    return app
