# analysis/__init__.py
"""
Derived views over the reading corpus: the user's local region,
its smoothed trend line, and the heatmap rendering parameters.
"""

from .spatial_selector import haversine_km, select_nearest
from .trend_smoother import smooth
from .heatmap import build_heat_points, map_params
