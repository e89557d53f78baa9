"""
Task API: a Flask application serving an in-memory task list.
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .routes import main_bp, tasks_bp
from .services.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_app(config_class=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.config.update(overrides)

    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        methods=app.config["CORS_METHODS"],
        supports_credentials=True,
    )

    store = TaskStore()
    if app.config.get("SEED_SAMPLE_TASKS"):
        store.seed()
    app.extensions["task_store"] = store

    app.register_blueprint(main_bp)
    app.register_blueprint(tasks_bp)
    register_error_handlers(app)

    logger.info(f"Task API ready, {len(store)} tasks loaded")
    return app


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.error(f"Unhandled error during request: {error}", exc_info=True)
        return jsonify({"message": "Internal server error"}), 500
