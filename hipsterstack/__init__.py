"""Flask application factory."""
from __future__ import annotations

from flask import Flask

from hipsterstack.config.settings import Settings
from hipsterstack.utils.logger import configure_logging, get_logger
from hipsterstack.controllers.health_controller import health_bp
from hipsterstack.controllers.hipster_controller import hipster_bp
from hipsterstack.controllers.stack_exchange_controller import stack_exchange_bp

log = get_logger(__name__)

def create_app(settings: Settings | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)

    settings = settings or Settings.from_env()
    app.config["APP_SETTINGS"] = settings

    configure_logging(settings)

    app.register_blueprint(health_bp)
    app.register_blueprint(hipster_bp)
    app.register_blueprint(stack_exchange_bp)

    log.info("Started %s (hipster source=%s).", settings.app_name, settings.hipster_source)
    return app
