"""
Flask API blueprint for the lifecycle CO2 comparator.

Shared endpoints live here; each registered service mounts its own
namespaced endpoints via register_routes().

Endpoints:
  GET  /api/services             - list registered services
  (service-owned)                - see emissions/services/*

Errors:
  ValidationError -> 400 {"error": message}
  DomainError     -> 422 {"error": message}
"""

import logging

from flask import Blueprint, jsonify

from emissions.errors import DomainError, ValidationError

log = logging.getLogger(__name__)


def create_api_blueprint(registry):
    """
    Build the /api blueprint with shared and service-owned routes.

    Parameters
    ----------
    registry : ServiceRegistry
        Populated service registry.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for every registered service."""
        return jsonify(registry.list_all())

    @api.errorhandler(ValidationError)
    def handle_validation_error(exc):
        log.info("Rejected request: %s", exc)
        return jsonify({"error": str(exc)}), 400

    @api.errorhandler(DomainError)
    def handle_domain_error(exc):
        log.warning("Domain error: %s", exc)
        return jsonify({"error": str(exc)}), 422

    for service in registry:
        service.register_routes(api)

    return api
