"""
Comparison presets.

Each preset is a ready-made compare payload in the same shape the
/api/dilation/compare endpoint accepts.

  gps: GPS constellation, circular orbit at 20,200 km altitude. The
       classic result: satellite clocks gain ~38 us/day against the
       ground (~+45.7 us/day gravitational, ~-7.2 us/day kinematic).

IMPORTANT: No unicode characters (Windows charmap constraint).
"""

PRESETS = [
    {
        "id": "gps",
        "name": "GPS satellite (Earth, circular orbit, 20,200 km)",
        "payload": {
            "body_id": "earth",
            "mode": "circular_orbit",
            "altitude_km": 20200,
            "exact_static": False,
        },
    },
]


def get_all_presets():
    """Return all presets in declaration order."""
    return list(PRESETS)


def get_preset_by_id(preset_id):
    """Return a single preset by id, or None."""
    for p in PRESETS:
        if p["id"] == preset_id:
            return p
    return None
