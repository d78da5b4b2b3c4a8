"""
Physical constants for gravitational time dilation calculations.

G and c are CODATA values; the solar mass and radius are IAU 2015 nominal
values and are only used to parameterize catalog entries.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

from collections import namedtuple

# Gravitational constant (CODATA 2018)
G = 6.6743e-11  # m^3 kg^-1 s^-2

# Speed of light (exact)
C_LIGHT = 299792458.0  # m/s

# Solar mass (IAU 2015 nominal)
M_SUN = 1.98847e30  # kg

# Solar radius (IAU 2015 nominal)
R_SUN = 6.957e8  # m

SECONDS_PER_DAY = 86400.0
SECONDS_PER_HOUR = 3600.0

# Closest allowed approach to a horizon, as a multiple of Rs.
# r = Rs * 1.0 would sit exactly on the horizon (rate 0).
HORIZON_MULTIPLIER_MIN = 1.0001

# Multiplier used when a black hole is selected without an explicit distance
DEFAULT_HORIZON_MULTIPLIER = 2.0

# Gain of the sqrt compression in the visual hue shift.
# |R - 1| >= 2.5e-9 (2.5 ns per second) saturates to 1.
HUE_SHIFT_GAIN = 2.0e4

# log10(Rs / r) range mapped onto lensing strength [0, 1].
# Earth surface sits near -8.9, a neutron star near -0.5.
LENSING_LOG_MIN = -9.5
LENSING_LOG_MAX = -5.0


PhysicalConstants = namedtuple("PhysicalConstants", ["g", "c", "m_sun", "r_sun"])
PhysicalConstants.__doc__ = """\
Immutable bundle of the constants the core depends on.

Lets tests and synthetic catalogs swap G or c without touching module state.
"""

DEFAULT_CONSTANTS = PhysicalConstants(g=G, c=C_LIGHT, m_sun=M_SUN, r_sun=R_SUN)
