# routes/misc.py

from flask import Blueprint, current_app, jsonify

misc_bp = Blueprint("misc", __name__)


@misc_bp.route("/app-version", methods=["GET"])
def app_version(sync_id):
    return jsonify({"version": current_app.config["APP_VERSION"]})
