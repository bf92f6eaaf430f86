"""Application factory and app-wide configuration."""

#setup: pip install -e ".[test]"
#setup: flask --app finance_backend.app:create_app run --port 5000 --debug

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from finance_backend.app.api.routes import api_bp
from finance_backend.core.config import Settings, settings


def create_app(config: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or settings
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = config
    app.config["DEBUG"] = config.DEBUG

    CORS(
        app,
        resources={rf"{config.API_PREFIX}/*": {"origins": config.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix=config.API_PREFIX)
    logging.getLogger(__name__).info(
        "%s ready, API mounted at %s", config.PROJECT_NAME, config.API_PREFIX
    )
    return app
