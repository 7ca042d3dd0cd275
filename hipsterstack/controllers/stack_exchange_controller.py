"""Stack Exchange pass-through endpoints."""
from __future__ import annotations
import requests
from flask import Blueprint, current_app, jsonify, request
from hipsterstack.clients.stack_exchange_client import QuestionAndUserClient
from hipsterstack.utils.constants import (
    DEFAULT_PAGE,
    ERROR_BAD_PAGE,
    ERROR_GENERIC,
    ERROR_UPSTREAM,
    QUESTIONS_RESOURCE,
    USERS_RESOURCE,
)
from hipsterstack.utils.logger import get_logger

log = get_logger(__name__)

stack_exchange_bp = Blueprint("stack_exchange", __name__, url_prefix="/stackexchange")

def _get_page() -> int | None:
    """Parse ?page=, or None if it is not a positive integer."""
    raw = request.args.get("page")
    if raw is None:
        return DEFAULT_PAGE
    try:
        page = int(raw)
    except ValueError:
        return None
    return page if page >= 1 else None

def _pass_through(resource: str):
    """Fetch one page of a resource and relay the upstream body and status."""
    settings = current_app.config["APP_SETTINGS"]
    page = _get_page()
    if page is None:
        return jsonify({"error": ERROR_BAD_PAGE}), 400
    site = request.args.get("site") or settings.default_site

    try:
        client = QuestionAndUserClient.from_settings(settings, site=site, page=page)
        fetch = client.questions if resource == QUESTIONS_RESOURCE else client.users
        resp = fetch()
    except requests.RequestException:
        log.exception("Stack Exchange %s fetch failed (site=%s page=%s).", resource, site, page)
        return jsonify({"error": ERROR_UPSTREAM}), 502
    except Exception:
        log.exception("Unexpected error fetching Stack Exchange %s.", resource)
        return jsonify({"error": ERROR_GENERIC}), 500

    if not resp.ok:
        log.warning("Stack Exchange %s returned HTTP %s (site=%s page=%s).", resource, resp.status_code, site, page)
    return jsonify(resp.body), resp.status_code

@stack_exchange_bp.route("/questions", methods=["GET"])
def questions():
    """Questions page for ?site= (default from settings) and ?page= (default 1)."""
    return _pass_through(QUESTIONS_RESOURCE)

@stack_exchange_bp.route("/users", methods=["GET"])
def users():
    """Users page for ?site= and ?page=."""
    return _pass_through(USERS_RESOURCE)
