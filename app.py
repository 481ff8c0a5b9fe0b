# app.py

import logging
from flask import Flask, jsonify
from werkzeug.exceptions import MethodNotAllowed, NotFound as RouteNotFound

from config import Config
from errors import KinobiError
from models import db
from routes.chores import chores_bp
from routes.history import history_bp
from routes.leaderboard import leaderboard_bp
from routes.misc import misc_bp
from routes.settings import settings_bp
from routes.tenders import tenders_bp

logger = logging.getLogger(__name__)

API_PREFIX = "/api/<sync_id>"
API_NOT_FOUND = "API endpoint not found or method not allowed."


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize extensions
    db.init_app(app)
    with app.app_context():
        db.create_all()
    logger.info("[STORE] Database initialized at: %s", app.config["SQLALCHEMY_DATABASE_URI"])

    # Register Blueprints
    for blueprint in (tenders_bp, chores_bp, history_bp, settings_bp, leaderboard_bp, misc_bp):
        app.register_blueprint(blueprint, url_prefix=API_PREFIX)

    register_error_handlers(app)
    return app


def register_error_handlers(app):
    @app.errorhandler(KinobiError)
    def handle_kinobi_error(error):
        if error.status_code >= 500:
            logger.error("[API] %s", error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(RouteNotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unknown_endpoint(error):
        return jsonify({"error": API_NOT_FOUND}), 404


if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
