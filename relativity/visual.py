"""
Visualization inputs derived from the physics outputs.

Neither value carries physical meaning beyond sign and rough magnitude;
they drive the background shader (color tint and lensing distortion).
"""

import math

from relativity.constants import (
    DEFAULT_CONSTANTS,
    HUE_SHIFT_GAIN,
    LENSING_LOG_MIN,
    LENSING_LOG_MAX,
)
from relativity.horizon import schwarzschild_radius


def hue_shift(ratio):
    """
    Signed, bounded color shift from the rate ratio R.

    sign(R - 1) * min(1, sqrt(|R - 1|) * 2e4), in [-1, 1]. Positive (blue)
    means the observer's clock runs faster than Earth's.
    """
    d = ratio - 1.0
    s = min(1.0, math.sqrt(abs(d)) * HUE_SHIFT_GAIN)
    return s if d >= 0 else -s


def lensing_strength(mass_kg, radius_m, constants=DEFAULT_CONSTANTS):
    """
    Dimensionless lensing strength in [0, 1].

    Maps log10(R_s / r) linearly from [LENSING_LOG_MIN, LENSING_LOG_MAX]
    onto [0, 1] and clamps.
    """
    rs = schwarzschild_radius(mass_kg, g=constants.g, c=constants.c)
    ratio = rs / max(radius_m, 1e-3)
    level = math.log10(max(ratio, 1e-20))
    s = (level - LENSING_LOG_MIN) / (LENSING_LOG_MAX - LENSING_LOG_MIN)
    return min(1.0, max(0.0, s))
