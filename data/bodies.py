"""
Body catalog: planets, stars and compact objects.

Each entry contains:
  id:       unique identifier (stable, used by the API)
  name:     display name
  mass_kg:  mass in kilograms
  radius_m: mean radius in meters. For black holes this is a DISPLAY
            radius only; physics uses r = R_s * multiplier instead.
  kind:     "normal" (default) or "black-hole"

MASS / RADIUS PROVENANCE:
  Solar system: NASA planetary fact sheets (mean radius)
  Sun:          IAU 2015 nominal mass, photospheric radius 6.9634e8 m
  Neutron star: canonical 1.4 M_sun, R = 12 km (NICER-era radius estimates)
  R136a1:       Crowther+2016, ~200 M_sun, ~30 R_sun
  Sgr A*:       GRAVITY Collaboration 2019, ~4.3e6 M_sun

Declaration order is the order the catalog is listed in.

IMPORTANT: No unicode characters (Windows charmap constraint).
"""

from relativity.constants import M_SUN, R_SUN

BODIES = [
    # === SOLAR SYSTEM ===
    {"id": "earth", "name": "Earth", "mass_kg": 5.972e24, "radius_m": 6.371e6},
    {"id": "moon", "name": "Moon", "mass_kg": 7.347673e22, "radius_m": 1.7374e6},
    {"id": "mars", "name": "Mars", "mass_kg": 6.4171e23, "radius_m": 3.3895e6},
    {"id": "venus", "name": "Venus", "mass_kg": 4.8675e24, "radius_m": 6.0518e6},
    {"id": "mercury", "name": "Mercury", "mass_kg": 3.3011e23, "radius_m": 2.4397e6},
    {"id": "jupiter", "name": "Jupiter", "mass_kg": 1.89813e27, "radius_m": 6.9911e7},
    {"id": "sun", "name": "Sun", "mass_kg": 1.98847e30, "radius_m": 6.9634e8},

    # === STARS AND STELLAR REMNANTS ===
    {
        "id": "neutron_star",
        "name": "Neutron star (1.4 M_sun, R = 12 km)",
        "mass_kg": 1.4 * M_SUN,
        "radius_m": 12000.0,
    },
    {
        "id": "r136a1",
        "name": "R136a1 (~200 M_sun, ~30 R_sun)",
        "mass_kg": 200 * M_SUN,
        "radius_m": 30 * R_SUN,
    },

    # === BLACK HOLES (radius_m is for rendering only) ===
    {
        "id": "bh10",
        "name": "Stellar black hole (10 M_sun)",
        "mass_kg": 10 * M_SUN,
        "radius_m": 3000.0,
        "kind": "black-hole",
    },
    {
        "id": "sgr_a",
        "name": "Sgr A* (galactic center, ~4.3x10^6 M_sun)",
        "mass_kg": 4.3e6 * M_SUN,
        "radius_m": 1.0e6,
        "kind": "black-hole",
    },
]


def get_body_entries():
    """Return the raw catalog entries in declaration order."""
    return list(BODIES)
