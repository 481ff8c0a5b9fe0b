# routes/leaderboard.py

from flask import Blueprint, jsonify, request

from services.scoring import compute_leaderboard, period_cutoff, rank_leaderboard
from services.store import InstanceStore
from utils.clock import now_ms

leaderboard_bp = Blueprint("leaderboard", __name__)


@leaderboard_bp.route("/leaderboard", methods=["GET"])
def leaderboard(sync_id):
    period = request.args.get("period", "all")
    sort_by = request.args.get("sort", "points")
    since = period_cutoff(period, now_ms())

    # Read-only: scores come from the log, the stored cache is not consulted
    instance = InstanceStore().load(sync_id)
    board = rank_leaderboard(compute_leaderboard(instance, since=since), sort_by)
    return jsonify([entry.to_dict() for entry in board])
