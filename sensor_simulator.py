# sensor_simulator.py
"""
Synthetic readings for demos: the dashboard corpus, the heatmap clusters,
the live drift tick and a fake sensor that posts to the ingestion endpoint.
"""
import math
import random
from datetime import datetime, timedelta, timezone

import requests

CITIES = [
    ("Delhi", 28.6139, 77.2090),
    ("Mumbai", 19.0760, 72.8777),
    ("Kolkata", 22.5726, 88.3639),
    ("Chennai", 13.0827, 80.2707),
    ("Bengaluru", 12.9716, 77.5946),
    ("Hyderabad", 17.3850, 78.4867),
    ("Jaipur", 26.9124, 75.7873),
    ("Lucknow", 26.8467, 80.9462),
    ("Ahmedabad", 23.0225, 72.5714),
    ("Pune", 18.5204, 73.8567),
    ("Bhopal", 23.2599, 77.4126),
    ("Patna", 25.5941, 85.1376),
    ("Chandigarh", 30.7333, 76.7794),
    ("Guwahati", 26.1445, 91.7362),
    ("Thiruvananthapuram", 8.5241, 76.9366),
    ("Ranchi", 23.3441, 85.3096),
    ("Bhubaneswar", 20.2961, 85.8245),
    ("Shimla", 31.1048, 77.1734),
    ("Srinagar", 34.0837, 74.7973),
    ("Indore", 22.7196, 75.8577),
]

CORPUS_START_TIME = datetime(2026, 1, 1, 8, 0, 0, tzinfo=timezone.utc)
CORPUS_SPACING = timedelta(minutes=10)

# (center lat, center lng, radius in degrees, points, base tds, tds variance, name)
HEATMAP_CLUSTERS = [
    (28.67, 77.27, 0.15, 300, 500, 150, "Seelampur Zone"),
    (28.6, 77.2, 0.8, 400, 300, 150, "NCR Region"),
    (30.4, 75.8, 3.0, 500, 250, 150, "Punjab Agrarian"),
    (26.5, 80.5, 4.0, 600, 350, 200, "Gangetic Plains"),
    (25.6, 85.1, 3.0, 400, 350, 200, "Bihar Belt"),
    (23.5, 88.5, 2.5, 400, 400, 150, "Bengal Delta"),
    (24.5, 72.5, 4.0, 400, 300, 150, "Rajasthan Arid"),
    (22.5, 71.5, 3.0, 300, 250, 150, "Gujarat Salt"),
    (23.0, 78.5, 4.5, 400, 200, 150, "Central India"),
    (19.0, 76.0, 4.5, 500, 250, 150, "Deccan Plateau"),
    (10.5, 76.5, 2.5, 300, 100, 100, "Kerala/Ghats"),
    (13.5, 75.5, 3.0, 300, 120, 100, "Karnataka Coastal"),
    (13.0, 80.0, 2.0, 300, 300, 150, "Chennai Coast"),
    (32.0, 77.0, 2.5, 200, 80, 50, "Himachal/Uttarakhand"),
]
HEATMAP_BACKGROUND_POINTS = 800
HEATMAP_MAX_TDS = 600

DRIFT_STEP = 25


def generate_corpus(count=1000, seed=None):
    """
    Generates readings scattered around major Indian cities, one every
    10 minutes starting 2026-01-01 08:00 UTC.
    """
    rng = random.Random(seed)
    readings = []
    for i in range(count):
        location, city_lat, city_lng = rng.choice(CITIES)
        timestamp = CORPUS_START_TIME + i * CORPUS_SPACING
        readings.append({
            "id": i + 1,
            "location_label": location,
            "tds": rng.randint(150, 900),
            "turbidity": round(rng.uniform(0.5, 10.0), 2),
            "temperature": rng.randint(15, 38),
            "lat": round(city_lat + rng.uniform(-0.25, 0.25), 6),
            "lng": round(city_lng + rng.uniform(-0.25, 0.25), 6),
            "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
        })
    return readings


def generate_cluster(center_lat, center_lng, radius, num_points, base_tds, tds_variance, name,
                     rng=None, start_id=1):
    """
    Generates a regional patch of points, denser towards the center.
    TDS values are clamped to [0, HEATMAP_MAX_TDS].
    """
    rng = rng or random.Random()
    points = []
    for i in range(num_points):
        r = radius * math.sqrt(rng.random())
        theta = rng.random() * 2 * math.pi
        # Stretch longitude slightly so patches look less circular.
        lat = center_lat + r * math.cos(theta)
        lng = center_lng + (r * 1.2) * math.sin(theta)
        tds = base_tds + (rng.random() * tds_variance - tds_variance / 2)
        points.append({
            "id": start_id + i,
            "location_label": f"{name} {i}",
            "lat": lat,
            "lng": lng,
            "tds": max(0, min(HEATMAP_MAX_TDS, tds)),
        })
    return points


def generate_heatmap_corpus(seed=None):
    """Builds the countrywide heatmap layer: regional clusters plus background noise."""
    rng = random.Random(seed)
    points = []
    for cluster in HEATMAP_CLUSTERS:
        points.extend(generate_cluster(*cluster, rng=rng, start_id=len(points) + 1))

    for i in range(HEATMAP_BACKGROUND_POINTS):
        points.append({
            "id": len(points) + 1,
            "location_label": f"India Background {i}",
            "lat": 8.0 + rng.random() * (35.0 - 8.0),
            "lng": 68.0 + rng.random() * (97.0 - 68.0),
            "tds": rng.random() * 250,
        })
    return points


def perturb(readings, rng=None):
    """
    Simulates live sensor drift. Returns new readings whose TDS moved by up
    to +/-DRIFT_STEP ppm, never below zero. The input is left untouched.
    """
    rng = rng or random
    drifted = []
    for reading in readings:
        step = rng.randint(-DRIFT_STEP, DRIFT_STEP - 1)
        drifted.append({**reading, "tds": max(0, reading["tds"] + step)})
    return drifted


def random_tds():
    """A simulated raw sensor value in [0, 1000) ppm."""
    return random.randint(0, 999)


def push_simulated_reading(base_url, tds=None, lat=0, lng=0):
    """
    Posts a simulated reading to the ingestion endpoint, the way a gateway would.
    Returns True on success.
    """
    payload = {"tds": random_tds() if tds is None else tds, "lat": lat, "lng": lng}
    url = f"{base_url}/api/water-data"
    try:
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code != 200:
            print(f"SIMULATOR: Server responded with {response.status_code}")
            return False
        return True
    except requests.exceptions.RequestException as e:
        print(f"SIMULATOR: Could not send reading. Error: {e}")
        return False
