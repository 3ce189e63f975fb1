"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from accrual.app.api.routes import api_bp
from accrual.app.settings import ApiSettings


def create_app(settings: Optional[ApiSettings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or ApiSettings()
    app = Flask(__name__)

    origins = settings.cors_origin_list
    if origins:
        CORS(app, resources={r"/api/*": {"origins": origins}})

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
