"""
Runner with cache and CSV export
"""
import os
import json
import csv
import logging
from datetime import datetime, timezone
from typing import Dict, List, Tuple

from mvp_leaderboard.parse.runner import load_players, load_events
from mvp_leaderboard.parse.schemas import LeaderboardEntry
from mvp_leaderboard.score.aggregate import compute_leaderboard, resolve_points
from mvp_leaderboard.score.filters import top_performers, top_threshold
from mvp_leaderboard.score.loader import load_config, config_hash, point_table

logger = logging.getLogger("score.runner")

def _cache_key(players_path: str, events_path: str, cfg_hash: str) -> Dict:
    """Generate cache key from input file stats and config hash"""
    return {
        "players_path": os.path.abspath(players_path),
        "players_mtime": os.stat(players_path).st_mtime,
        "events_path": os.path.abspath(events_path),
        "events_mtime": os.stat(events_path).st_mtime,
        "cfg_hash": cfg_hash,
    }

def _cache_ok(cache_path: str, key: Dict) -> Tuple[bool, Dict]:
    """Check if cache is valid"""
    if not (cache_path and os.path.exists(cache_path)): return (False, {})
    try:
        with open(cache_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return (data.get("key") == key, data)
    except (OSError, ValueError) as e:
        logger.warning(f"[cache] unreadable, ignoring: {e}")
        return (False, {})

def _write_cache(cache_path: str, key: Dict, result: Dict):
    """Write cache file"""
    try:
        os.makedirs(os.path.dirname(cache_path) or ".", exist_ok=True)
        with open(cache_path, "w", encoding="utf-8") as f:
            json.dump({"key": key, "result": result}, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.warning(f"[cache] write failed: {e}")

def _export_csv(out_dir: str, entries: List[LeaderboardEntry]) -> str:
    """Export ranked rows to exports/leaderboard.csv"""
    ex_dir = os.path.join(out_dir, "exports")
    os.makedirs(ex_dir, exist_ok=True)
    path = os.path.join(ex_dir, "leaderboard.csv")
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["rank", "id", "name", "score"])
        for rank, e in enumerate(entries, start=1):
            w.writerow([rank, e.id, e.name, e.score])
    return path

def build_leaderboard(players_path: str, events_path: str, cfg_path: str,
                      out_dir: str = "leaderboard", force: bool = False) -> Dict:
    """
    Build leaderboard.json and a CSV export from roster, event log and config

    Args:
        players_path: Path to players.json
        events_path: Path to events.json
        cfg_path: Path to config.yml
        out_dir: Output directory
        force: Force rebuild (ignore cache)

    Returns:
        Dict with leaderboard_path, players, total_points and top performers
    """
    os.makedirs(out_dir, exist_ok=True)
    cfg = load_config(cfg_path)

    # cache
    cache_cfg = cfg.get("cache") or {}
    cache_enabled = bool(cache_cfg.get("enabled", True))
    cache_path = cache_cfg.get("path", os.path.join(out_dir, ".cache.json"))
    key = _cache_key(players_path, events_path, config_hash(cfg))
    if cache_enabled and not force:
        ok, cached = _cache_ok(cache_path, key)
        result = cached.get("result") or {}
        if ok and os.path.exists(result.get("leaderboard_path", "")):
            logger.info("[cache] hit")
            return result

    points = point_table(cfg)
    players = load_players(players_path)
    events = load_events(events_path)
    entries = compute_leaderboard(players, events, points)

    total_points = sum(resolve_points(ev, points) for ev in events)
    unscored = sorted({ev.action for ev in events if ev.action not in points})
    if unscored:
        logger.info(f"Actions without points: {', '.join(unscored)}")

    top = top_performers(entries, cfg)
    out = {
        "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "inputs": {"players": players_path, "events": events_path, "config": cfg_path},
        "points": points,
        "top_performers_threshold": top_threshold(cfg),
        "totals": {"players": len(entries), "events": len(events), "points": total_points},
        "entries": [e.model_dump() for e in entries],
    }
    out_path = os.path.join(out_dir, "leaderboard.json")
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(out, f, ensure_ascii=False, indent=2)

    _export_csv(out_dir, entries)

    result = {
        "leaderboard_path": out_path,
        "players": len(entries),
        "total_points": total_points,
        "top": [e.model_dump() for e in top],
    }
    if cache_enabled:
        _write_cache(cache_path, key, result)

    return result
