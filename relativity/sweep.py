"""
Dilation curves: the comparison pipeline sampled along a distance axis.

Normal bodies are sampled on a linear altitude grid starting at the
surface; black holes on a geometric multiplier grid starting just outside
the horizon, where the rate changes fastest.
"""

import numpy as np

from relativity.constants import HORIZON_MULTIPLIER_MIN
from relativity.observer import CircularOrbit, NearHorizon, StaticAtAltitude
from relativity.pipeline import compare

MIN_POINTS = 10
MAX_POINTS = 500


def clamp_points(num_points, max_points=MAX_POINTS):
    """Bound num_points to [MIN_POINTS, max_points]; max_points wins when lower."""
    return min(max(MIN_POINTS, int(num_points)), max_points)


def sample_axis(body, max_value, num_points):
    """
    Distance grid for a body.

    Parameters
    ----------
    body : Body
    max_value : float
        Largest altitude in meters, or largest horizon multiplier for
        black holes.
    num_points : int

    Returns
    -------
    (str, numpy.ndarray)
        Axis name ("altitude_m" or "multiplier") and the sample values.
    """
    if body.is_black_hole:
        top = max(float(max_value), HORIZON_MULTIPLIER_MIN * 2.0)
        return "multiplier", np.geomspace(HORIZON_MULTIPLIER_MIN, top, num_points)
    return "altitude_m", np.linspace(0.0, float(max_value), num_points)


def dilation_curve(body, max_value, num_points=100, orbiting=False,
                   config=None, exact_static=False, max_points=MAX_POINTS):
    """
    Run compare() at every sample of the distance axis.

    Parameters
    ----------
    body : Body
    max_value : float
        See sample_axis().
    num_points : int, optional
        Clamped to [MIN_POINTS, max_points].
    orbiting : bool, optional
        Sample circular orbits instead of static observers (normal bodies).
    config : DilationConfig, optional
    exact_static : bool, optional
    max_points : int, optional
        Upper bound on samples (the service passes its configured cap).

    Returns
    -------
    dict
        axis, values, f_body, ratio, per_day_seconds (lists of equal length).
    """
    axis, values = sample_axis(body, max_value, clamp_points(num_points, max_points))

    f_body = []
    ratio = []
    per_day = []
    for value in values:
        value = float(value)
        if axis == "multiplier":
            mode = NearHorizon(value)
        elif orbiting:
            mode = CircularOrbit(value)
        else:
            mode = StaticAtAltitude(value)
        result = compare(body, mode, config=config, exact_static=exact_static)
        f_body.append(result.f_body)
        ratio.append(result.ratio)
        per_day.append(result.per_day_seconds)

    return {
        "axis": axis,
        "values": [float(v) for v in values],
        "f_body": f_body,
        "ratio": ratio,
        "per_day_seconds": per_day,
    }
