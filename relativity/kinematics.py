"""
Newtonian circular orbit speed.

v_c(r) = sqrt(G * M / r)
"""

import math
from relativity.constants import G


def circular_orbit_speed(mass_kg, r_m, g=G):
    """
    Circular orbit speed at radius r_m around mass_kg.

    Parameters
    ----------
    mass_kg : float
        Central mass in kilograms.
    r_m : float
        Orbital radius from the body center in meters (> 0).

    Returns
    -------
    float
        Orbital speed in m/s.
    """
    return math.sqrt(g * mass_kg / r_m)
