# config.py
import os

# --- Server Configuration ---
SECRET_KEY = os.getenv("SECRET_KEY", "a-very-secret-key-that-you-should-change")
PORT = int(os.getenv("PORT", 3000))

# --- AI Advisory Configuration ---
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
# Upper bound callers apply while waiting for the AI advisory.
ADVISORY_TIMEOUT_SECONDS = float(os.getenv("ADVISORY_TIMEOUT_SECONDS", 20))

# --- Location Configuration ---
# Default coordinates for New Delhi, used when the user's location is unavailable.
DEFAULT_LATITUDE = 28.6139
DEFAULT_LONGITUDE = 77.2090

# Number of nearby readings that make up the user's local region.
LOCAL_WINDOW_SIZE = 50
# Trailing window of the trend line's moving average.
SMOOTHING_WINDOW = 5
# Number of rows returned by the "most recent" queries.
RECENT_ROWS_LIMIT = 50

# --- Session Timers (in seconds) ---
REFRESH_INTERVAL_SECONDS = 30
CONTAMINATION_ALERT_DELAY_SECONDS = 60
DRIFT_INTERVAL_SECONDS = 3

# --- Synthetic Data ---
SYNTHETIC_CORPUS_SIZE = 1000
SYNTHETIC_SEED = os.getenv("SYNTHETIC_SEED")
SYNTHETIC_SEED = int(SYNTHETIC_SEED) if SYNTHETIC_SEED else None
