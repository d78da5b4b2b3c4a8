"""
Flask API routes shared by all CHRONOS services.

Endpoints:
  GET  /api/services          - registered service metadata
  GET  /api/constants         - physical constants used by the core
  GET  /api/bodies            - body catalog in declaration order
  GET  /api/bodies/<id>       - single body

Service-owned endpoints (e.g. /api/dilation/*) are mounted by each live
service's register_routes().
"""

import logging

from flask import Blueprint, jsonify

from relativity import constants
from relativity.horizon import schwarzschild_radius

log = logging.getLogger(__name__)


def _body_payload(body, k):
    payload = body.to_dict()
    payload["schwarzschild_radius_m"] = schwarzschild_radius(body.mass_kg, g=k.g, c=k.c)
    return payload


def create_api_blueprint(registry, config):
    """
    Build the /api blueprint.

    Parameters
    ----------
    registry : ChronosRegistry
        Services whose routes get mounted.
    config : DilationConfig
        Catalog and constants served by the shared endpoints.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for every registered service."""
        return jsonify(registry.list_all())

    @api.route("/constants", methods=["GET"])
    def get_constants():
        """Return the physical constants used by the core."""
        payload = config.to_dict()
        payload["SECONDS_PER_DAY"] = constants.SECONDS_PER_DAY
        payload["HORIZON_MULTIPLIER_MIN"] = constants.HORIZON_MULTIPLIER_MIN
        return jsonify(payload)

    @api.route("/bodies", methods=["GET"])
    def list_bodies():
        """Return all bodies in catalog order."""
        k = config.constants
        return jsonify([_body_payload(b, k) for b in config.catalog.list_bodies()])

    @api.route("/bodies/<body_id>", methods=["GET"])
    def get_body(body_id):
        """Return a single body by id."""
        body = config.catalog.get(body_id)
        if body is None:
            return jsonify({"error": "Body not found"}), 404
        return jsonify(_body_payload(body, config.constants))

    for service in registry:
        log.debug("mounting routes for service %s", service.id)
        service.register_routes(api)

    return api
