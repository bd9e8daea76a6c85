"""
Static option lists shown by the quiz and search forms.
"""

POPULAR_TREATMENTS = [
    "Heart Surgery",
    "Hip Replacement",
    "Dental Implants",
    "Cosmetic Surgery",
    "Cancer Treatment",
    "Fertility Treatment",
    "Eye Surgery",
    "Spine Surgery",
]

REGIONS = [
    {"value": "asia", "label": "Asia (Thailand, India, Singapore, South Korea)"},
    {"value": "europe", "label": "Europe (Germany, Turkey, Czech Republic)"},
    {"value": "americas", "label": "Americas (Mexico, Costa Rica, Colombia)"},
    {"value": "middle-east", "label": "Middle East (UAE, Jordan, Israel)"},
]


def popular_treatments() -> list[str]:
    return list(POPULAR_TREATMENTS)


def available_regions() -> list[dict]:
    return [dict(r) for r in REGIONS]
