"""
Proper-time rate functions.

Two closed forms for d(tau)/dt relative to a distant static observer:

  Weak field, any slow observer:   f = 1 + Phi/c^2 - v^2 / (2 c^2)
  Schwarzschild, static observer:  f = sqrt(1 - R_s / r)

The functions below are plain arithmetic and do not check validity.
Which one applies is decided by select_formula(), the single policy point:

  - black holes always use the exact static form
  - other bodies use it only when requested AND the observer is at rest
  - every moving observer falls back to the weak field form

The last rule is a known approximation gap: there is no exact rate for an
orbiting observer in a strong field.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
from enum import Enum

from relativity.constants import G, C_LIGHT
from relativity.catalog import BodyKind


class FormulaChoice(Enum):
    """Which rate formula to evaluate for an observer state."""
    WEAK_FIELD = "weak_field"
    EXACT_STATIC = "exact_static"


def gravitational_potential(mass_kg, r_m, g=G):
    """Newtonian potential Phi = -G M / r in J/kg. r_m must be > 0."""
    return -g * mass_kg / r_m


def weak_field_rate(phi, v_m_s, c=C_LIGHT):
    """
    First-order post-Newtonian proper-time rate.

    Parameters
    ----------
    phi : float
        Gravitational potential at the observer (J/kg, <= 0).
    v_m_s : float
        Observer speed in m/s.

    Returns
    -------
    float
        1 + phi/c^2 - v^2/(2 c^2)
    """
    c2 = c * c
    return 1.0 + phi / c2 - (v_m_s * v_m_s) / (2.0 * c2)


def schwarzschild_static_rate(mass_kg, r_m, g=G, c=C_LIGHT):
    """
    Exact proper-time rate of a static observer in Schwarzschild geometry.

    Parameters
    ----------
    mass_kg : float
        Central mass in kilograms.
    r_m : float
        Radial coordinate in meters.

    Returns
    -------
    float
        sqrt(1 - R_s/r) outside the horizon, exactly 0.0 at or inside it.
    """
    x = 2.0 * g * mass_kg / (r_m * c * c)
    if x >= 1.0:
        return 0.0
    return math.sqrt(1.0 - x)


def select_formula(body_kind, requested_exact, speed_m_s):
    """
    Pick the rate formula for a resolved observer state.

    Parameters
    ----------
    body_kind : BodyKind
        Classification of the central body.
    requested_exact : bool
        Caller asked for the exact static form.
    speed_m_s : float
        Resolved tangential speed of the observer.

    Returns
    -------
    FormulaChoice
    """
    if body_kind is BodyKind.BLACK_HOLE:
        return FormulaChoice.EXACT_STATIC
    if requested_exact and speed_m_s == 0:
        return FormulaChoice.EXACT_STATIC
    return FormulaChoice.WEAK_FIELD


def local_rate(choice, mass_kg, r_m, v_m_s, g=G, c=C_LIGHT):
    """Evaluate the chosen formula at (r, v). v is ignored by the static form."""
    if choice is FormulaChoice.EXACT_STATIC:
        return schwarzschild_static_rate(mass_kg, r_m, g=g, c=c)
    phi = gravitational_potential(mass_kg, r_m, g=g)
    return weak_field_rate(phi, v_m_s, c=c)
