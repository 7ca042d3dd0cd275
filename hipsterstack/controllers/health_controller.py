"""Health controller for uptime checks."""
from __future__ import annotations
from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health", __name__)

@health_bp.route("/health", methods=["GET"])
def health():
    """Return a 200 OK with the app name; touches no upstream API."""
    settings = current_app.config["APP_SETTINGS"]
    return jsonify({"status": "ok", "app": settings.app_name}), 200
