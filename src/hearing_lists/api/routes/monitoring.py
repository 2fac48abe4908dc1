import os
import platform
from flask import Blueprint, jsonify, Response

from hearing_lists.api import config, dependencies, state
from hearing_lists.ingest.list_types import DEFAULT_REGISTRY

monitoring_bp = Blueprint('monitoring', __name__)


@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


@monitoring_bp.route("/version", methods=["GET"])
def version():
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "commit": os.getenv("GIT_COMMIT"),
        "python": platform.python_version(),
        "listTypes": list(DEFAULT_REGISTRY.list_types()),
    })


@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()


@monitoring_bp.route("/api/health", methods=["GET"])
def health():
    store = dependencies.get_store()
    return jsonify({"status": "ok", "store": store.base_dir, "store_exists": os.path.isdir(store.base_dir)}), 200


@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200


@monitoring_bp.route("/api/stats/ingest", methods=["GET"])
def ingest_stats():
    return jsonify(dict(state.ingest_stats))
