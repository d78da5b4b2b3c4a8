"""
Schwarzschild horizon geometry.

R_s = 2 * G * M / c^2
"""

from relativity.constants import G, C_LIGHT


def schwarzschild_radius(mass_kg, g=G, c=C_LIGHT):
    """
    Schwarzschild radius of a non-rotating mass.

    Parameters
    ----------
    mass_kg : float
        Mass in kilograms (>= 0).
    g, c : float, optional
        Gravitational constant and speed of light (SI).

    Returns
    -------
    float
        Horizon radius in meters. Zero for zero mass.
    """
    return 2.0 * g * mass_kg / (c * c)
