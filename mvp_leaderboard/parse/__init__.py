"""
Roster and event log loading.
Validates raw JSON records into schema objects.
"""

from .schemas import Player, Event, LeaderboardEntry, PlayerId, EventId
from .runner import load_players, load_events, validate_records

__all__ = [
    'Player',
    'Event',
    'LeaderboardEntry',
    'PlayerId',
    'EventId',
    'load_players',
    'load_events',
    'validate_records'
]
