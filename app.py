"""
CHRONOS - Gravitational Time Dilation Explorer
Flask application factory.

Serves the JSON API for the clock comparison core via registered
ChronosService instances. The front-end (inputs, WebGL background and
number formatting) consumes these endpoints.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI

Configuration (app.config, overridable with CHRONOS_* environment
variables, e.g. CHRONOS_MAX_CURVE_POINTS=200):
    MAX_CURVE_POINTS  - upper bound on samples per curve request (500)
    LOG_LEVEL         - logging level for `python app.py` (INFO)
"""

__version__ = "0.1.0"

import logging

from flask import Flask, jsonify

from relativity.config import default_config
from relativity.services import ChronosRegistry
from relativity.services.dilation import DilationService

log = logging.getLogger(__name__)


def create_registry(config, max_curve_points):
    """Build and populate the service registry."""
    registry = ChronosRegistry()
    registry.register(DilationService(config, max_curve_points=max_curve_points))
    return registry


def create_app(test_config=None, dilation_config=None):
    """
    Application factory for the CHRONOS Flask app.

    Parameters
    ----------
    test_config : dict, optional
        Overrides applied after environment variables.
    dilation_config : DilationConfig, optional
        Physics constants and catalog (default: process-wide default).
    """
    app = Flask(__name__)
    app.config.from_mapping(
        MAX_CURVE_POINTS=500,
        LOG_LEVEL="INFO",
    )
    app.config.from_prefixed_env("CHRONOS")
    if test_config:
        app.config.from_mapping(test_config)

    config = dilation_config if dilation_config is not None else default_config()
    registry = create_registry(config, app.config["MAX_CURVE_POINTS"])

    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry, config)
    app.register_blueprint(api)

    @app.route("/")
    def index():
        return jsonify({
            "name": "CHRONOS",
            "version": __version__,
            "reference_body": config.reference_body.id,
            "services": registry.list_all(),
        })

    log.debug("CHRONOS app created with %d services", len(registry))
    return app


if __name__ == "__main__":
    app = create_app()
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=True, host="127.0.0.1", port=5000)
