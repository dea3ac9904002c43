"""Health check endpoints."""
import logging
from flask import Blueprint, jsonify

from tweets.api.helpers import get_container
from tweets.domain.errors import StorageUnavailable

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.
    
    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": "tweets"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (pings the stores the service container holds).
    
    Returns:
        JSON response with readiness status
    """
    checks = {
        "mongodb": False,
        "redis": False,
        "overall": False
    }
    
    try:
        get_container().get_message_repository().ping()
        checks["mongodb"] = True
    except StorageUnavailable as e:
        _logger.error(f"MongoDB health check failed: {e}")
    
    try:
        get_container().get_user_repository().ping()
        checks["redis"] = True
    except StorageUnavailable as e:
        _logger.error(f"Redis health check failed: {e}")
    
    checks["overall"] = checks["mongodb"] and checks["redis"]
    
    status_code = 200 if checks["overall"] else 503
    
    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).
    
    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": "tweets"
    }), 200
