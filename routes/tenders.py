# routes/tenders.py

from flask import Blueprint, jsonify, request

from services.store import InstanceStore
from utils.tenders import add_tender, rename_tender, delete_tender

tenders_bp = Blueprint("tenders", __name__)


@tenders_bp.route("/tenders", methods=["GET"])
def list_tenders(sync_id):
    instance = InstanceStore().load(sync_id)
    return jsonify([t.to_dict() for t in instance.tenders])


@tenders_bp.route("/tenders", methods=["POST"])
def create_tender(sync_id):
    store = InstanceStore()
    instance = store.load(sync_id)
    tender = add_tender(instance, request.get_json(silent=True))
    store.save(sync_id, instance)
    return jsonify(tender.to_dict()), 201


@tenders_bp.route("/tenders/<tender_id>", methods=["PUT"])
def update_tender(sync_id, tender_id):
    store = InstanceStore()
    instance = store.load(sync_id)
    tender = rename_tender(instance, tender_id, request.get_json(silent=True))
    store.save(sync_id, instance)
    return jsonify(tender.to_dict())


@tenders_bp.route("/tenders/<tender_id>", methods=["DELETE"])
def remove_tender(sync_id, tender_id):
    store = InstanceStore()
    instance = store.load(sync_id)
    delete_tender(instance, tender_id)
    store.save(sync_id, instance)
    return "", 204
