# routes/settings.py

from flask import Blueprint, jsonify, request

from services.store import InstanceStore
from utils.settings import update_config

settings_bp = Blueprint("settings", __name__)


@settings_bp.route("/config", methods=["GET"])
def get_config(sync_id):
    instance = InstanceStore().load(sync_id)
    return jsonify(instance.config.to_dict())


@settings_bp.route("/config", methods=["PUT"])
def put_config(sync_id):
    store = InstanceStore()
    instance = store.load(sync_id)
    config = update_config(instance, request.get_json(silent=True))
    store.save(sync_id, instance)
    return jsonify(config.to_dict())
