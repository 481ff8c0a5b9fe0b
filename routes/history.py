# routes/history.py

from flask import Blueprint, jsonify, request

from services.store import InstanceStore
from utils.clock import now_ms
from utils.history import tend, delete_entry, sorted_history
from utils.validation import require_object

history_bp = Blueprint("history", __name__)


@history_bp.route("/history", methods=["GET"])
def list_history(sync_id):
    instance = InstanceStore().load(sync_id)
    return jsonify([e.to_dict() for e in sorted_history(instance)])


@history_bp.route("/history/<entry_id>", methods=["DELETE"])
def remove_entry(sync_id, entry_id):
    store = InstanceStore()
    instance = store.load(sync_id)
    delete_entry(instance, entry_id)
    store.save(sync_id, instance)
    return "", 204


@history_bp.route("/tend", methods=["POST"])
def tend_chore(sync_id):
    payload = require_object(request.get_json(silent=True))
    store = InstanceStore()
    instance = store.load(sync_id)
    _, entry = tend(
        instance,
        payload.get("tender"),
        payload.get("choreId"),
        notes=payload.get("notes"),
        now=now_ms(),
    )
    store.save(sync_id, instance)
    return jsonify(entry.to_dict()), 201


@history_bp.route("/last-tended", methods=["GET"])
def last_tended(sync_id):
    instance = InstanceStore().load(sync_id)
    return jsonify({
        "lastTended": instance.last_tended_timestamp,
        "lastTender": instance.last_tender,
    })
