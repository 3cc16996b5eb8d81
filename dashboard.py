# dashboard.py
"""
Builds the hyperlocal dashboard view shared by the HTTP API and live sessions:
the user's local region, its trend line, and the baseline assessment of the
latest local reading.
"""
from analysis import select_nearest, smooth
from config import LOCAL_WINDOW_SIZE, SMOOTHING_WINDOW
from water_quality import classify


def parse_origin(lat, lng):
    """
    Turns optional lat/lng values into an origin coordinate.
    Returns None when either is missing, which selects the fallback region.
    Raises ValueError for values that are present but not valid coordinates.
    """
    if lat in (None, "") or lng in (None, ""):
        return None
    lat_val, lng_val = float(lat), float(lng)
    if not (-90 <= lat_val <= 90 and -180 <= lng_val <= 180):
        raise ValueError(f"Coordinates out of range: {lat_val}, {lng_val}")
    return (lat_val, lng_val)


def build_local_view(corpus, origin=None, n=LOCAL_WINDOW_SIZE, window=SMOOTHING_WINDOW):
    """
    Selects the local region around `origin` and smooths it into a trend line.

    Returns:
        dict: origin, used_fallback_region, readings (oldest first), trend,
              latest_tds (None when there is no data) and baseline.
    """
    readings = select_nearest(origin, corpus, n)
    trend = smooth(readings, window)
    latest_tds = readings[-1]["tds"] if readings else None

    return {
        "origin": list(origin) if origin else None,
        "used_fallback_region": origin is None,
        "readings": readings,
        "trend": trend,
        "latest_tds": latest_tds,
        "baseline": classify(latest_tds) if latest_tds is not None else None,
    }
