# threshold_config.py

# --- TDS Tiers (in ppm) ---
# Total Dissolved Solids.
# Each tier covers (previous max, max]. Tiers are checked in ascending order
# and the first match wins, so a value sitting exactly on a boundary belongs
# to the lower tier.
#
# <=50         Risk     Remineralize           (too little mineral content)
# >50 to 150   Safe     Drink Directly
# >150 to 250  Safe     Drink Directly
# >250 to 300  Safe     Acceptable
# >300 to 500  Risk     Filter
# >500 to 1200 Unsafe   Avoid / Treat Heavily
# >1200        Unsafe   Do Not Drink
TDS_DEMINERALIZED_MAX = 50
TDS_EXCELLENT_MAX = 150
TDS_GOOD_MAX = 250
TDS_ACCEPTABLE_MAX = 300
TDS_FILTER_MAX = 500
TDS_TREAT_MAX = 1200

# (tier key, upper bound, score, recommendation)
# The last tier has no upper bound.
TDS_TIERS = [
    ("demineralized", TDS_DEMINERALIZED_MAX, "Risk", "Remineralize"),
    ("excellent", TDS_EXCELLENT_MAX, "Safe", "Drink Directly"),
    ("good", TDS_GOOD_MAX, "Safe", "Drink Directly"),
    ("acceptable", TDS_ACCEPTABLE_MAX, "Safe", "Acceptable"),
    ("filter", TDS_FILTER_MAX, "Risk", "Filter"),
    ("treat", TDS_TREAT_MAX, "Unsafe", "Avoid / Treat Heavily"),
    ("critical", None, "Unsafe", "Do Not Drink"),
]

SCORES = ("Safe", "Risk", "Unsafe")

# The badge collapses every tier into one of three colors.
SCORE_COLORS = {
    "Safe": "green",
    "Risk": "orange",
    "Unsafe": "red",
}

# --- Dashboard status badge (in ppm) ---
# Used by the status cards, independent of the advisory tiers.
# Safe: <=150, Moderate: <=300, High Risk: <=500, Unsafe: >500
STATUS_SAFE_MAX = 150
STATUS_MODERATE_MAX = 300
STATUS_HIGH_RISK_MAX = 500
