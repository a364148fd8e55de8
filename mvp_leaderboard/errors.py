"""
Custom exceptions for leaderboard aggregation with user-friendly messages.
"""
from typing import Optional


class LeaderboardError(Exception):
    """Base exception for leaderboard computation errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message


class UnknownPlayerReference(LeaderboardError):
    """Raised when an event points to a player missing from the roster."""
    def __init__(self, event_id, player_id):
        self.event_id = event_id
        self.player_id = player_id
        super().__init__(
            f"Event {event_id!r} references unknown player {player_id!r}",
            f"Event {event_id} could not be attributed: player {player_id} is not on the roster."
        )


class MalformedInput(LeaderboardError):
    """Raised when a player or event record is structurally invalid."""
    def __init__(self, kind: str, index, detail: str):
        self.kind = kind
        self.index = index
        self.detail = detail
        super().__init__(
            f"Malformed {kind} record at position {index}: {detail}",
            f"The {kind} data is invalid (record {index})."
        )
