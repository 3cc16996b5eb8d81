# analysis/heatmap.py
"""
Rendering parameters for the TDS density layer on the map.

The map client recomputes these on every zoom change.
"""

MIN_RADIUS = 12
MIN_BLUR = 15
RADIUS_PER_ZOOM = 2
BLUR_PER_ZOOM = 2.5

# Stacks of overlapping points should not saturate to red too early.
MAX_INTENSITY = 800
MIN_OPACITY = 0.15
# Zoom level at which points reach full intensity.
MAX_ZOOM = 10

GRADIENT_STOPS = {
    0.3: "green",
    0.5: "yellow",
    0.7: "orange",
    0.9: "red",
}


def map_params(zoom: int) -> dict:
    """Returns radius, blur, intensity and gradient settings for a zoom level."""
    return {
        "radius": max(MIN_RADIUS, zoom * RADIUS_PER_ZOOM),
        "blur": max(MIN_BLUR, zoom * BLUR_PER_ZOOM),
        "max_intensity": MAX_INTENSITY,
        "min_opacity": MIN_OPACITY,
        "max_zoom": MAX_ZOOM,
        "gradient_stops": dict(GRADIENT_STOPS),
    }


def build_heat_points(readings: list) -> list:
    """Converts readings into [lat, lng, tds] triples, the layer's input format."""
    return [[r["lat"], r["lng"], r["tds"]] for r in readings]
