"""
Pydantic schemas for roster and scoring event records.
Defines data structures for players, events, and leaderboard rows.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# Type definitions
PlayerId = Union[int, str]
EventId = Union[int, str]


class Player(BaseModel):
    """Represents a roster member. Extra profile fields are carried through untouched."""
    model_config = ConfigDict(extra="allow", frozen=True)

    id: PlayerId
    name: str


class Event(BaseModel):
    """Represents a single scoring event in the match log."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[EventId] = None
    player_id: PlayerId = Field(alias="playerId")
    action: str                          # Action code, looked up in the point table


class LeaderboardEntry(Player):
    """Player fields plus the derived MVP score."""
    score: int = 0
