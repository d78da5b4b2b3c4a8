"""
Observer modes and resolved observer states.

An ObserverMode says WHERE the observer is relative to a body:

  AtSurface()                 r = R_body,            v = 0
  StaticAtAltitude(alt_m)     r = R_body + alt,      v = 0
  CircularOrbit(alt_m)        r = R_body + alt,      v = sqrt(G M / r)
  NearHorizon(multiplier)     r = R_s * multiplier,  v = 0

Black holes are always resolved as NearHorizon: their catalog radius is
display-only. build_mode() is the input boundary that turns a raw request
payload into a mode; it is the only place that rejects bad input.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
from collections import namedtuple

from relativity.constants import (
    DEFAULT_CONSTANTS,
    DEFAULT_HORIZON_MULTIPLIER,
    HORIZON_MULTIPLIER_MIN,
)
from relativity.horizon import schwarzschild_radius
from relativity.kinematics import circular_orbit_speed
from relativity.rates import select_formula


class AtSurface(namedtuple("AtSurface", [])):
    __slots__ = ()
    tag = "surface"

    def to_dict(self):
        return {"mode": self.tag}


class StaticAtAltitude(namedtuple("StaticAtAltitude", ["altitude_m"])):
    __slots__ = ()
    tag = "static_altitude"

    def to_dict(self):
        return {"mode": self.tag, "altitude_m": self.altitude_m}


class CircularOrbit(namedtuple("CircularOrbit", ["altitude_m"])):
    __slots__ = ()
    tag = "circular_orbit"

    def to_dict(self):
        return {"mode": self.tag, "altitude_m": self.altitude_m}


class NearHorizon(namedtuple("NearHorizon", ["multiplier"])):
    __slots__ = ()
    tag = "near_horizon"

    def to_dict(self):
        return {"mode": self.tag, "multiplier": self.multiplier}


ObserverState = namedtuple("ObserverState", ["radius_m", "speed_m_s", "formula"])


# Raw mode names accepted from clients. camelCase spellings are the values
# the front-end select box sends.
MODE_ALIASES = {
    "surface": AtSurface.tag,
    "static_altitude": StaticAtAltitude.tag,
    "staticaltitude": StaticAtAltitude.tag,
    "circular_orbit": CircularOrbit.tag,
    "circularorbit": CircularOrbit.tag,
    "near_horizon": NearHorizon.tag,
    "nearhorizon": NearHorizon.tag,
}


def horizon_radius(body, multiplier, constants=DEFAULT_CONSTANTS):
    """r = R_s * max(multiplier, HORIZON_MULTIPLIER_MIN)."""
    rs = schwarzschild_radius(body.mass_kg, g=constants.g, c=constants.c)
    return rs * max(multiplier, HORIZON_MULTIPLIER_MIN)


def effective_mode(body, mode):
    """Black holes only support NearHorizon; other modes fall back to the default multiplier."""
    if body.is_black_hole and not isinstance(mode, NearHorizon):
        return NearHorizon(DEFAULT_HORIZON_MULTIPLIER)
    return mode


def resolve_state(body, mode, requested_exact=False, constants=DEFAULT_CONSTANTS):
    """
    Resolve radial distance, speed and rate formula for an observer.

    Parameters
    ----------
    body : Body
        Central body.
    mode : ObserverMode
        One of AtSurface, StaticAtAltitude, CircularOrbit, NearHorizon.
    requested_exact : bool, optional
        Ask for the exact static formula (honoured only at zero speed).
    constants : PhysicalConstants, optional

    Returns
    -------
    ObserverState
    """
    mode = effective_mode(body, mode)

    if isinstance(mode, NearHorizon):
        r = horizon_radius(body, mode.multiplier, constants)
        v = 0.0
    elif isinstance(mode, AtSurface):
        r = body.radius_m
        v = 0.0
    elif isinstance(mode, StaticAtAltitude):
        r = body.radius_m + mode.altitude_m
        v = 0.0
    elif isinstance(mode, CircularOrbit):
        r = body.radius_m + mode.altitude_m
        v = circular_orbit_speed(body.mass_kg, r, g=constants.g)
    else:
        raise TypeError("Unknown observer mode: {!r}".format(mode))

    return ObserverState(
        radius_m=r,
        speed_m_s=v,
        formula=select_formula(body.kind, requested_exact, v),
    )


def finite_float(raw, keys, default=None):
    """First present key in raw, as a finite float. None/absent -> default."""
    for key in keys:
        value = raw.get(key)
        if value is None:
            continue
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError("{} must be a number".format(key))
        if not math.isfinite(value):
            raise ValueError("{} must be finite".format(key))
        return value
    return default


def _altitude_m(raw):
    altitude_m = finite_float(raw, ("altitude_m",))
    if altitude_m is None:
        altitude_km = finite_float(raw, ("altitude_km",), default=0.0)
        altitude_m = altitude_km * 1000.0
    if altitude_m < 0:
        raise ValueError("altitude must be non-negative")
    return altitude_m


def build_mode(body, raw):
    """
    Build an ObserverMode from a raw request payload.

    Parameters
    ----------
    body : Body
        The selected body. Black holes always yield NearHorizon.
    raw : dict
        Keys: "mode" (default "surface"), "altitude_m" or "altitude_km",
        "multiplier" or "rs_multiplier".

    Returns
    -------
    ObserverMode

    Raises
    ------
    ValueError
        Unknown mode name, non-numeric or negative altitude, non-numeric
        multiplier, or NearHorizon requested for a body that is not a
        black hole.
    """
    if body.is_black_hole:
        multiplier = finite_float(raw, ("multiplier", "rs_multiplier"),
                                   default=DEFAULT_HORIZON_MULTIPLIER)
        return NearHorizon(multiplier)

    name = str(raw.get("mode") or AtSurface.tag).strip().lower()
    tag = MODE_ALIASES.get(name)
    if tag is None:
        raise ValueError("Unknown mode '{}'".format(name))
    if tag == NearHorizon.tag:
        raise ValueError(
            "near_horizon mode is only available for black holes, "
            "'{}' is not one".format(body.id)
        )
    if tag == AtSurface.tag:
        return AtSurface()
    if tag == StaticAtAltitude.tag:
        return StaticAtAltitude(_altitude_m(raw))
    return CircularOrbit(_altitude_m(raw))
