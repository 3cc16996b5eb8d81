# static_analyzer.py
"""
Provides the canned advisory text for each TDS tier.
This text is the authoritative fallback whenever the AI advisory is unavailable,
so every list here must stay non-empty.
"""

TIER_ADVISORIES = {
    "demineralized": {
        "explanation": "TDS of {tds} ppm is very low. The water is almost free of minerals, which usually means heavy RO treatment or rainwater.",
        "side_effects": [
            "Low intake of calcium and magnesium",
            "Flat taste that may reduce how much water you drink",
            "Can leach minerals from pipes and storage tanks",
        ],
        "improvement_tips": [
            "Use a remineralization cartridge after the RO filter",
            "Adjust the TDS controller on your purifier to 80-150 ppm",
            "Mix with a trusted mineral-rich source",
        ],
    },
    "excellent": {
        "explanation": "TDS of {tds} ppm is in the ideal range for drinking water with a healthy mineral balance.",
        "side_effects": [
            "None expected",
        ],
        "improvement_tips": [
            "Keep storage containers clean and covered",
            "Clean overhead tanks every six months",
        ],
    },
    "good": {
        "explanation": "TDS of {tds} ppm is good for drinking. Mineral content is moderate and within common standards.",
        "side_effects": [
            "None expected for most people",
        ],
        "improvement_tips": [
            "Keep storage containers clean and covered",
            "Re-test after heavy rain or supply changes",
        ],
    },
    "acceptable": {
        "explanation": "TDS of {tds} ppm is acceptable but near the upper end of the recommended range.",
        "side_effects": [
            "Slightly salty or hard taste",
            "Mild scaling in kettles and geysers",
        ],
        "improvement_tips": [
            "Consider a basic carbon or UF filter",
            "Descale kettles and taps regularly",
            "Monitor readings for an upward trend",
        ],
    },
    "filter": {
        "explanation": "TDS of {tds} ppm is above the desirable limit. Dissolved salts are high enough to affect taste and health over time.",
        "side_effects": [
            "Hard, salty or bitter taste",
            "Possible stomach discomfort",
            "Scale buildup in utensils and appliances",
        ],
        "improvement_tips": [
            "Use an RO filter before drinking",
            "Boil water before drinking",
            "Service your purifier and replace membranes on schedule",
        ],
    },
    "treat": {
        "explanation": "TDS of {tds} ppm is well above safe limits. The water likely carries excess salts or contaminants.",
        "side_effects": [
            "Stomach upset and nausea",
            "Mineral buildup in the body",
            "Higher risk of kidney stones with long-term use",
        ],
        "improvement_tips": [
            "Do not drink without RO treatment",
            "Use certified bottled water for drinking and cooking",
            "Report the source to your local water authority",
        ],
    },
    "critical": {
        "explanation": "TDS of {tds} ppm is at a critical level. The water is unfit for drinking even after household treatment.",
        "side_effects": [
            "Severe gastrointestinal distress",
            "Dehydration from high salt content",
            "Serious long-term kidney and heart strain",
        ],
        "improvement_tips": [
            "Do not drink. Switch to certified bottled water",
            "Avoid using it for cooking",
            "Alert your local water authority immediately",
        ],
    },
}


def get_tier_advisory(tier, tds):
    """
    Returns the explanation, side effects and improvement tips for a tier.
    The lists are copies, so callers can modify them freely.
    """
    advisory = TIER_ADVISORIES[tier]
    return {
        "explanation": advisory["explanation"].format(tds=_format_tds(tds)),
        "side_effects": list(advisory["side_effects"]),
        "improvement_tips": list(advisory["improvement_tips"]),
    }


def _format_tds(tds):
    # 120.0 reads better as 120
    if float(tds).is_integer():
        return str(int(tds))
    return f"{tds:g}"
