"""Application factory and app-wide configuration."""

import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from payoff.app.api.routes import api_bp
from payoff.config import config


def create_app(config_name: Optional[str] = None) -> Flask:
    """Build the Flask app instance."""
    config_name = config_name or os.environ.get("PAYOFF_ENV") or "default"

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("payoff").setLevel(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
