"""
Comparison pipeline: body clock vs. Earth surface clock.

    f_earth = weak-field rate at Earth's surface, at rest
    f_body  = rate at the resolved observer state (formula per policy)
    R       = f_body / f_earth

Every derived quantity (seconds per day, one-second and one-hour
equivalences, hue shift) is computed from R and nothing else.

Degenerate inputs never raise:
    at/inside the horizon  ->  f_body = 0, R = 0
    1/R with R = 0         ->  +inf

This module provides:
    reference_rate    - f_earth for a config
    compare           - run the pipeline for one body + mode
    ComparisonResult  - pipeline output with serialization

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from relativity.constants import SECONDS_PER_DAY, SECONDS_PER_HOUR
from relativity.config import default_config
from relativity.observer import AtSurface, effective_mode, resolve_state
from relativity.rates import gravitational_potential, local_rate, weak_field_rate
from relativity.visual import hue_shift, lensing_strength


def reference_rate(config=None):
    """Weak-field rate of the reference body's surface clock (v = 0)."""
    if config is None:
        config = default_config()
    ref = config.reference_body
    k = config.constants
    phi = gravitational_potential(ref.mass_kg, ref.radius_m, g=k.g)
    return weak_field_rate(phi, 0.0, c=k.c)


def _inverse(ratio, scale=1.0):
    return math.inf if ratio == 0 else scale / ratio


def _json_float(x):
    """JSON has no infinity literal; non-finite values go out as null."""
    return x if math.isfinite(x) else None


class ComparisonResult:
    """
    Output of one comparison.

    Parameters
    ----------
    body : Body
        Compared body.
    mode : ObserverMode
        Effective observer mode (NearHorizon for black holes).
    state : ObserverState
        Resolved radius, speed and formula.
    f_body : float
        Local proper-time rate of the observer.
    f_earth : float
        Rate of the reference surface clock.
    constants : PhysicalConstants
        Constants the result was computed with.
    """

    def __init__(self, body, mode, state, f_body, f_earth, constants):
        self.body = body
        self.mode = mode
        self.state = state
        self.f_body = f_body
        self.f_earth = f_earth
        self.constants = constants

        r = f_body / f_earth
        self.ratio = r
        self.per_day_seconds = (r - 1.0) * SECONDS_PER_DAY
        self.earth_second_in_body = r
        self.body_second_in_earth = _inverse(r)
        self.earth_hour_in_body = r * SECONDS_PER_HOUR
        self.body_hour_in_earth = _inverse(r, SECONDS_PER_HOUR)
        self.hue_shift = hue_shift(r)

    @property
    def direction(self):
        """'faster', 'slower' or 'same' relative to the reference clock."""
        if self.ratio > 1.0:
            return "faster"
        if self.ratio < 1.0:
            return "slower"
        return "same"

    @property
    def lensing_strength(self):
        return lensing_strength(self.body.mass_kg, self.state.radius_m,
                                constants=self.constants)

    def visual(self):
        """The only inputs the background renderer takes from the core."""
        return {
            "mass_kg": self.body.mass_kg,
            "radius_m": self.state.radius_m,
            "hue_shift": self.hue_shift,
            "lensing_strength": self.lensing_strength,
        }

    def to_api_response(self):
        """
        Flat JSON-safe dict.

        +inf conversions (observer at the horizon) are emitted as null.
        """
        response = {
            "body_id": self.body.id,
            "f_body": self.f_body,
            "f_earth": self.f_earth,
            "ratio": self.ratio,
            "per_day_seconds": self.per_day_seconds,
            "earth_second_in_body": self.earth_second_in_body,
            "body_second_in_earth": _json_float(self.body_second_in_earth),
            "earth_hour_in_body": self.earth_hour_in_body,
            "body_hour_in_earth": _json_float(self.body_hour_in_earth),
            "hue_shift": self.hue_shift,
            "direction": self.direction,
            "state": {
                "radius_m": self.state.radius_m,
                "speed_m_s": self.state.speed_m_s,
                "formula": self.state.formula.value,
            },
            "visual": self.visual(),
        }
        response["state"].update(self.mode.to_dict())
        return response


def compare(body, mode=None, config=None, exact_static=False):
    """
    Compare the clock of an observer near body against Earth's surface clock.

    Parameters
    ----------
    body : Body
        Body to compare.
    mode : ObserverMode, optional
        Observer placement (default AtSurface). Black holes always use
        NearHorizon; any other mode is replaced by the default multiplier.
    config : DilationConfig, optional
        Constants and catalog (default: process-wide default config).
    exact_static : bool, optional
        Request the exact Schwarzschild formula for a static observer
        around a normal body. Ignored when the observer moves.

    Returns
    -------
    ComparisonResult
    """
    if config is None:
        config = default_config()
    k = config.constants

    f_earth = reference_rate(config)

    mode = effective_mode(body, mode if mode is not None else AtSurface())
    state = resolve_state(body, mode, requested_exact=exact_static, constants=k)
    f_body = local_rate(state.formula, body.mass_kg, state.radius_m,
                        state.speed_m_s, g=k.g, c=k.c)

    return ComparisonResult(body, mode, state, f_body, f_earth, k)
