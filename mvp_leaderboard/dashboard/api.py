# mvp_leaderboard/dashboard/api.py
from __future__ import annotations
from flask import Blueprint, current_app, jsonify, request
import logging
import math
from typing import Optional

from mvp_leaderboard.services.leaderboard_service import LeaderboardService, LeaderboardSnapshot
from mvp_leaderboard.ui.display import is_truthy

bp_leaderboard = Blueprint("bp_leaderboard", __name__, url_prefix="/api/leaderboard")

logger = logging.getLogger(__name__)

def get_service() -> LeaderboardService:
    """Per-app service, created on first use"""
    service = current_app.extensions.get("leaderboard_service")
    if service is None:
        service = LeaderboardService()
        current_app.extensions["leaderboard_service"] = service
    return service


def _parse_threshold(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw == "":
        return None
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(raw)
    return value


def _snapshot_payload(snap: LeaderboardSnapshot, top_only: bool) -> dict:
    return {
        "entries": [e.model_dump() for e in snap.entries],
        "count": len(snap.entries),
        "threshold": snap.threshold,
        "top_only": top_only,
        "stale": snap.stale,
        "error": snap.error,
    }


@bp_leaderboard.get("")
def api_leaderboard():
    """Ranked leaderboard; ?top=1 for top performers, ?threshold=N for a custom cut"""
    top_only = is_truthy(request.args.get("top"))
    try:
        threshold = _parse_threshold(request.args.get("threshold"))
    except ValueError:
        return jsonify({"error": "threshold must be a number"}), 400

    snap = get_service().snapshot(top_only=top_only, threshold=threshold)
    return jsonify(_snapshot_payload(snap, top_only))


@bp_leaderboard.get("/points")
def api_points():
    """Active point table"""
    service = get_service()
    service.snapshot()
    return jsonify({
        "points": service.point_table,
        "top_performers_threshold": service.top_threshold,
    })


@bp_leaderboard.post("/refresh")
def api_refresh():
    """Recompute from the data files; the previous board stays if this fails"""
    service = get_service()
    logger.info("Leaderboard refresh requested")
    if not service.refresh():
        return jsonify({"success": False, "error": service.last_error}), 422
    snap = service.snapshot()
    return jsonify({"success": True, "players": len(snap.entries)})
