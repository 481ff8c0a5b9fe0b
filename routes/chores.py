# routes/chores.py

import logging
from flask import Blueprint, jsonify, request

from services.due_state import describe_chores
from services.store import InstanceStore
from utils.chores import add_chore, update_chore, delete_chore, reorder_chores
from utils.clock import now_ms
from utils.validation import require_object

logger = logging.getLogger(__name__)

chores_bp = Blueprint("chores", __name__)


@chores_bp.route("/chores", methods=["GET"])
def list_chores(sync_id):
    instance = InstanceStore().load(sync_id)
    return jsonify([c.to_dict() for c in instance.chores])


@chores_bp.route("/chores/status", methods=["GET"])
def chore_status(sync_id):
    instance = InstanceStore().load(sync_id)
    return jsonify(describe_chores(instance, now_ms()))


@chores_bp.route("/chores", methods=["POST"])
def create_chore(sync_id):
    payload = request.get_json(silent=True)
    logger.debug("[API] Add chore payload: %s", payload)
    store = InstanceStore()
    instance = store.load(sync_id)
    chore = add_chore(instance, payload)
    store.save(sync_id, instance)
    return jsonify(chore.to_dict()), 201


@chores_bp.route("/chores/reorder", methods=["PUT"])
def reorder(sync_id):
    payload = require_object(request.get_json(silent=True))
    store = InstanceStore()
    instance = store.load(sync_id)
    chores = reorder_chores(instance, payload.get("chores"))
    store.save(sync_id, instance)
    return jsonify([c.to_dict() for c in chores])


@chores_bp.route("/chores/<chore_id>", methods=["PUT"])
def edit_chore(sync_id, chore_id):
    payload = request.get_json(silent=True)
    logger.debug("[API] Update chore %s payload: %s", chore_id, payload)
    store = InstanceStore()
    instance = store.load(sync_id)
    chore = update_chore(instance, chore_id, payload)
    store.save(sync_id, instance)
    return jsonify(chore.to_dict())


@chores_bp.route("/chores/<chore_id>", methods=["DELETE"])
def remove_chore(sync_id, chore_id):
    store = InstanceStore()
    instance = store.load(sync_id)
    delete_chore(instance, chore_id)
    store.save(sync_id, instance)
    return "", 204
