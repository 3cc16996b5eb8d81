# analysis/spatial_selector.py
"""
Selects the readings that make up a user's local region.

Selection happens in two phases: readings are first ranked by great-circle
distance to pick the nearest N, and the chosen readings are then put back in
chronological order for display.
"""
import math

import pandas as pd

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points, in kilometers."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a just above 1 for antipodal points.
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def _timestamp_key(reading):
    return pd.to_datetime(reading["timestamp"], utc=True)


def sort_chronologically(readings: list) -> list:
    """Returns the readings ordered by timestamp, oldest first."""
    return sorted(readings, key=_timestamp_key)


def select_nearest(origin, corpus: list, n: int) -> list:
    """
    Picks the n readings nearest to origin and returns them oldest first.

    Args:
        origin: (lat, lng) of the user, or None when the location is unknown.
            Without an origin the first n readings of the corpus are used as a
            fixed fallback region and no distances are computed.
        corpus: readings with 'lat', 'lng' and 'timestamp' keys.
        n: number of readings to keep.

    Returns:
        list: the selected readings sorted by timestamp. Empty when the corpus
        is empty or n <= 0.
    """
    if not corpus or n <= 0:
        return []

    if origin is None:
        selected = list(corpus[:n])
    else:
        origin_lat, origin_lng = origin
        ranked = sorted(
            corpus,
            key=lambda r: haversine_km(origin_lat, origin_lng, r["lat"], r["lng"]),
        )
        selected = ranked[:n]

    return sort_chronologically(selected)
