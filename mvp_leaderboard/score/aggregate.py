"""
MVP score aggregation: roster + event log + point table -> ranked leaderboard
"""
import logging
from typing import Dict, Iterable, List, Mapping

from mvp_leaderboard.errors import MalformedInput, UnknownPlayerReference
from mvp_leaderboard.parse.runner import validate_records
from mvp_leaderboard.parse.schemas import Player, Event, LeaderboardEntry

logger = logging.getLogger("score.aggregate")


def resolve_points(event: Event, point_table: Mapping[str, int]) -> int:
    """
    Point value of a single event

    Args:
        event: Scoring event
        point_table: Action code -> points (may be partial)

    Returns:
        Points for the event's action, 0 when the action is not in the table

    Raises:
        ValueError: the table holds a non-integer value for the action
    """
    points = point_table.get(event.action, 0)
    if isinstance(points, bool) or not isinstance(points, int):
        raise ValueError(f"[points] {event.action}={points!r} must be an integer")
    return points


def compute_leaderboard(players: Iterable, events: Iterable,
                        point_table: Mapping[str, int]) -> List[LeaderboardEntry]:
    """
    Rank every player by the points their events earn

    Args:
        players: Roster (Player objects or mappings), ids must be unique
        events: Event log (Event objects or mappings), order does not matter
        point_table: Action code -> points; unknown actions score 0

    Returns:
        New list of LeaderboardEntry, highest score first. Equal scores
        keep roster order.

    Raises:
        MalformedInput: invalid record or duplicate player id
        UnknownPlayerReference: event for a player not on the roster
        ValueError: non-integer value in the point table
    """
    roster = validate_records(players, Player, "player")
    log = validate_records(events, Event, "event")

    # str(player id) -> running score, in roster order; 1 and "1" are one player
    scores: Dict[str, int] = {}
    for index, player in enumerate(roster):
        key = str(player.id)
        if key in scores:
            raise MalformedInput("player", index, f"duplicate id {player.id!r}")
        scores[key] = 0

    for index, event in enumerate(log):
        key = str(event.player_id)
        if key not in scores:
            event_id = event.id if event.id is not None else f"#{index}"
            raise UnknownPlayerReference(event_id, event.player_id)
        scores[key] += resolve_points(event, point_table)

    entries = []
    for player in roster:
        row = player.model_dump()
        row["score"] = scores[str(player.id)]
        entries.append(LeaderboardEntry(**row))

    # sorted() is stable, so ties stay in roster order
    ranked = sorted(entries, key=lambda e: e.score, reverse=True)
    logger.debug(f"Ranked {len(ranked)} players from {len(log)} events")
    return ranked
