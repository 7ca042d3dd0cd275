"""Hipster text endpoint."""
from __future__ import annotations
import requests
from flask import Blueprint, current_app, jsonify
from hipsterstack.clients.hipster_sources import text_source_from_settings
from hipsterstack.exceptions.custom_exceptions import HipsterStackError, MissingFieldError
from hipsterstack.models.hipster_text import HipsterText
from hipsterstack.utils.constants import ERROR_GENERIC, ERROR_UPSTREAM
from hipsterstack.utils.logger import get_logger

log = get_logger(__name__)

hipster_bp = Blueprint("hipster", __name__)

@hipster_bp.route("/hipster", methods=["GET"])
def hipster():
    """Return one freshly fetched paragraph and its style variant."""
    settings = current_app.config["APP_SETTINGS"]
    try:
        hipster_text = HipsterText(text_source_from_settings(settings))
        return jsonify({"text": hipster_text.text, "type": hipster_text.type}), 200
    except requests.RequestException:
        log.exception("Hipster text fetch failed.")
        return jsonify({"error": ERROR_UPSTREAM}), 502
    except MissingFieldError as e:
        log.warning("Hipster response malformed: %s", e)
        return jsonify({"error": str(e)}), 502
    except HipsterStackError as e:
        log.exception("Known app error serving hipster text.")
        return jsonify({"error": str(e)}), 500
    except Exception:
        log.exception("Unexpected error serving hipster text.")
        return jsonify({"error": ERROR_GENERIC}), 500
