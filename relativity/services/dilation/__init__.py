"""
Time Dilation Service for CHRONOS.

Implements the ChronosService interface for the body-vs-Earth clock
comparison. Raw payloads are turned into (Body, ObserverMode) here; the
physics core below never sees unvalidated input.

Endpoints:
    POST /api/dilation/compare        - one comparison (ratio, conversions, visual inputs)
    POST /api/dilation/curve          - comparison sampled along altitude / horizon multiplier
    GET  /api/dilation/presets        - list presets
    GET  /api/dilation/presets/<id>   - run a preset comparison

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging

from flask import jsonify, request

from relativity.services import ChronosService
from relativity.config import default_config
from relativity.observer import CircularOrbit, build_mode, finite_float
from relativity.pipeline import compare
from relativity.sweep import MAX_POINTS, clamp_points, dilation_curve
from data.presets import get_all_presets, get_preset_by_id

log = logging.getLogger(__name__)

# Default sweep extents: GEO altitude is ~35,786 km; the horizon slider
# of the front-end stops at 50 R_s.
DEFAULT_MAX_ALTITUDE_KM = 40000.0
DEFAULT_MAX_MULTIPLIER = 50.0


def _flag(raw, key):
    value = raw.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError("{} must be true or false".format(key))
    return value


class DilationService(ChronosService):
    """
    Gravitational time dilation relative to a clock at rest on Earth.

    Parameters
    ----------
    config : DilationConfig, optional
        Constants and body catalog (default: process-wide default).
    max_curve_points : int, optional
        Upper bound on samples per curve request.
    """

    id = "dilation"
    name = "Time Dilation"
    description = "Clock rate near a body or black hole, relative to Earth's surface"
    endpoints = (
        "POST /api/dilation/compare",
        "POST /api/dilation/curve",
        "GET /api/dilation/presets",
        "GET /api/dilation/presets/<id>",
    )

    def __init__(self, config=None, max_curve_points=MAX_POINTS):
        self._config = config if config is not None else default_config()
        self._max_curve_points = int(max_curve_points)
        if self._max_curve_points < 2:
            raise ValueError("max_curve_points must be at least 2")

    @property
    def config(self):
        return self._config

    def metadata(self):
        meta = super().metadata()
        meta["reference_body"] = self._config.reference_body.id
        meta["max_curve_points"] = self._max_curve_points
        return meta

    def _body(self, raw):
        body_id = raw.get("body_id")
        if not body_id:
            raise ValueError("body_id is required")
        if not isinstance(body_id, str):
            raise ValueError("body_id must be a string")
        body = self._config.catalog.get(body_id)
        if body is None:
            raise ValueError("Unknown body '{}'".format(body_id))
        return body

    def validate(self, config):
        """Validate a compare payload -> {body, mode, exact_static}."""
        if not config or not isinstance(config, dict):
            raise ValueError("Request body must be JSON")
        body = self._body(config)
        return {
            "body": body,
            "mode": build_mode(body, config),
            "exact_static": _flag(config, "exact_static"),
        }

    def compute(self, config):
        """Run one comparison and return the API response dict."""
        result = compare(config["body"], config["mode"], config=self._config,
                         exact_static=config["exact_static"])
        if result.f_body == 0.0:
            log.debug("observer at or inside the horizon of %s (r=%g m)",
                      result.body.id, result.state.radius_m)
        response = result.to_api_response()
        response["body_name"] = result.body.name
        return response

    def validate_curve(self, config):
        """Validate a curve payload -> dilation_curve() keyword arguments."""
        if not config or not isinstance(config, dict):
            raise ValueError("Request body must be JSON")
        body = self._body(config)

        if body.is_black_hole:
            max_value = finite_float(config, ("max_multiplier",),
                                     default=DEFAULT_MAX_MULTIPLIER)
            orbiting = False
        else:
            max_value = finite_float(config, ("max_altitude_km",),
                                     default=DEFAULT_MAX_ALTITUDE_KM) * 1000.0
            # Only the mode name matters for a curve; altitude is the axis.
            mode = build_mode(body, {"mode": config.get("mode")})
            orbiting = isinstance(mode, CircularOrbit)
        if max_value <= 0:
            raise ValueError("curve extent must be positive")

        return {
            "body": body,
            "max_value": max_value,
            "num_points": clamp_points(finite_float(config, ("num_points",), default=100),
                                       self._max_curve_points),
            "orbiting": orbiting,
            "exact_static": _flag(config, "exact_static"),
        }

    def compute_curve(self, config):
        curve = dilation_curve(config=self._config,
                               max_points=self._max_curve_points, **config)
        curve["body_id"] = config["body"].id
        return curve

    def register_routes(self, bp):
        """Mount all dilation-specific API endpoints."""
        service = self

        @bp.route("/dilation/compare", methods=["POST"])
        def dilation_compare():
            data = request.get_json(silent=True)
            try:
                cfg = service.validate(data)
            except ValueError as e:
                log.warning("rejected compare request: %s", e)
                return jsonify({"error": str(e)}), 400
            return jsonify(service.compute(cfg))

        @bp.route("/dilation/curve", methods=["POST"])
        def dilation_curve_endpoint():
            data = request.get_json(silent=True)
            try:
                cfg = service.validate_curve(data)
            except ValueError as e:
                log.warning("rejected curve request: %s", e)
                return jsonify({"error": str(e)}), 400
            return jsonify(service.compute_curve(cfg))

        @bp.route("/dilation/presets", methods=["GET"])
        def dilation_presets():
            return jsonify(get_all_presets())

        @bp.route("/dilation/presets/<preset_id>", methods=["GET"])
        def dilation_preset(preset_id):
            preset = get_preset_by_id(preset_id)
            if preset is None:
                return jsonify({"error": "Preset not found"}), 404
            response = service.compute(service.validate(preset["payload"]))
            response["preset"] = preset["id"]
            return jsonify(response)
