# test_analysis.py
import math
import re

import pytest

from analysis import build_heat_points, haversine_km, map_params, select_nearest, smooth

KM_PER_DEGREE = 6371.0 * math.pi / 180


def make_reading(rid, tds=100, lat=0.0, lng=0.0, timestamp=None):
    return {
        "id": rid,
        "location_label": f"Point {rid}",
        "tds": tds,
        "lat": lat,
        "lng": lng,
        "timestamp": timestamp or f"2026-01-01T08:{rid:02d}:00Z",
    }


# --- Spatial Selector ---

def test_haversine_known_distances():
    assert haversine_km(0, 0, 0, 0) == 0
    assert haversine_km(0, 0, 1, 0) == pytest.approx(KM_PER_DEGREE, rel=1e-9)
    # New Delhi to Mumbai is roughly 1150 km.
    assert haversine_km(28.6139, 77.2090, 19.0760, 72.8777) == pytest.approx(1150, rel=0.02)


def test_selects_nearest_then_orders_by_time():
    far_10 = make_reading(1, lat=10 / KM_PER_DEGREE, timestamp="2026-01-01T08:00:00Z")
    near_1 = make_reading(2, lat=1 / KM_PER_DEGREE, timestamp="2026-01-01T09:00:00Z")
    far_100 = make_reading(3, lat=100 / KM_PER_DEGREE, timestamp="2026-01-01T07:00:00Z")

    selected = select_nearest((0.0, 0.0), [far_10, near_1, far_100], 2)

    assert [r["id"] for r in selected] == [1, 2]


def test_chronological_order_overrides_distance_order():
    near_late = make_reading(1, lat=0.001, timestamp="2026-01-01T12:00:00Z")
    mid_early = make_reading(2, lat=0.002, timestamp="2026-01-01T06:00:00Z")

    selected = select_nearest((0.0, 0.0), [near_late, mid_early], 2)
    assert [r["id"] for r in selected] == [2, 1]


def test_without_origin_uses_first_n_in_corpus_order():
    # Newest first, as the store returns them.
    corpus = [make_reading(i, timestamp=f"2026-01-01T{20 - i:02d}:00:00Z") for i in range(1, 11)]

    selected = select_nearest(None, corpus, 5)

    assert [r["id"] for r in selected] == [5, 4, 3, 2, 1]


def test_selector_handles_empty_and_small_inputs():
    assert select_nearest((0, 0), [], 5) == []
    assert select_nearest(None, [], 5) == []
    assert select_nearest((0, 0), [make_reading(1)], 0) == []
    assert len(select_nearest((0, 0), [make_reading(1), make_reading(2)], 10)) == 2


def test_selector_does_not_mutate_corpus():
    corpus = [make_reading(2, lat=5), make_reading(1, lat=1)]
    snapshot = [dict(r) for r in corpus]
    select_nearest((0, 0), corpus, 1)
    assert corpus == snapshot


# --- Temporal Smoother ---

def test_moving_average_values():
    readings = [make_reading(i, tds=tds) for i, tds in enumerate([100, 200, 300, 400, 500])]

    points = smooth(readings, window=5)

    assert [p["smoothed_tds"] for p in points] == [100, 150, 200, 250, 300]
    assert [p["tds"] for p in points] == [100, 200, 300, 400, 500]


def test_moving_average_uses_trailing_window_only():
    readings = [make_reading(i, tds=tds) for i, tds in enumerate([10, 20, 30, 1000])]

    points = smooth(readings, window=2)

    assert [p["smoothed_tds"] for p in points] == [10, 15, 25, 515]


def test_smoothing_rounds_half_up():
    readings = [make_reading(i, tds=tds) for i, tds in enumerate([1, 2])]
    assert smooth(readings, window=2)[1]["smoothed_tds"] == 2


def test_time_labels_and_types():
    points = smooth([make_reading(1, tds=0), make_reading(2, tds=3)])
    for point in points:
        assert re.fullmatch(r"\d{2}:\d{2}", point["time_label"])
        assert isinstance(point["smoothed_tds"], int)
        assert point["smoothed_tds"] >= 0


def test_smoother_edge_cases():
    assert smooth([]) == []
    with pytest.raises(ValueError):
        smooth([make_reading(1)], window=0)


# --- Heatmap Intensity Mapper ---

def test_heatmap_params_floor_at_low_zoom():
    params = map_params(5)
    assert params["radius"] == 12
    assert params["blur"] == 15
    assert params["max_intensity"] == 800
    assert params["min_opacity"] == 0.15


def test_heatmap_params_scale_with_zoom():
    params = map_params(10)
    assert params["radius"] == 20
    assert params["blur"] == 25
    assert map_params(19)["radius"] == 38


def test_heatmap_gradient_stops():
    assert map_params(1)["gradient_stops"] == {0.3: "green", 0.5: "yellow", 0.7: "orange", 0.9: "red"}


def test_build_heat_points():
    readings = [make_reading(1, tds=420, lat=28.6, lng=77.2)]
    assert build_heat_points(readings) == [[28.6, 77.2, 420]]
    assert build_heat_points([]) == []
