"""Application factory and app-wide configuration."""

#setup: pip install -e ".[test]"
#setup: flask --app inflation_planner.app run --port 5000 --debug

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from inflation_planner.app.api.routes import api_bp

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_mapping(CORS_ORIGINS=DEFAULT_CORS_ORIGINS)
    if test_config is not None:
        app.config.from_mapping(test_config)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
