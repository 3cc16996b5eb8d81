# water_quality.py
"""
Deterministic water safety classification from a TDS reading.

The result of classify() is the baseline assessment. It is always complete
and is what the dashboard falls back to when the AI advisory is unavailable.
"""
import math

from threshold_config import (
    TDS_TIERS, SCORE_COLORS,
    STATUS_SAFE_MAX, STATUS_MODERATE_MAX, STATUS_HIGH_RISK_MAX,
)
from static_analyzer import get_tier_advisory


def find_tier(tds):
    """Returns the (tier key, upper bound, score, recommendation) row for a TDS value."""
    for tier in TDS_TIERS:
        upper = tier[1]
        if upper is None or tds <= upper:
            return tier
    # Unreachable while the last tier is unbounded.
    return TDS_TIERS[-1]


def classify(tds):
    """
    Maps a TDS value (ppm) to a safety assessment.

    Tiers are half-open with an inclusive upper bound and are evaluated in
    ascending order, so classify(50) is 'Risk' and classify(50.01) is 'Safe'.
    Values below zero fall into the lowest tier.

    Returns:
        dict: score, tds_level, recommendation, explanation,
              side_effects, improvement_tips
    """
    tds_val = float(tds)
    if math.isnan(tds_val):
        raise ValueError("TDS value must be a number, got NaN.")

    tier_key, _, score, recommendation = find_tier(tds_val)
    advisory = get_tier_advisory(tier_key, tds)

    return {
        "score": score,
        "tds_level": tds,
        "recommendation": recommendation,
        "explanation": advisory["explanation"],
        "side_effects": advisory["side_effects"],
        "improvement_tips": advisory["improvement_tips"],
    }


def get_score_color(score):
    """Collapses a score into the badge color used by the dashboard."""
    return SCORE_COLORS.get(score, "gray")


def get_status_badge(tds):
    """
    Returns the label and color for the dashboard status cards.
    These are coarser than the advisory tiers and only drive styling.
    """
    tds_val = float(tds)
    if tds_val <= STATUS_SAFE_MAX:
        return {"label": "Safe", "color": "green"}
    elif tds_val <= STATUS_MODERATE_MAX:
        return {"label": "Moderate", "color": "yellow"}
    elif tds_val <= STATUS_HIGH_RISK_MAX:
        return {"label": "High Risk", "color": "orange"}
    return {"label": "Unsafe", "color": "red"}
