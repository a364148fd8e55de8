"""
Loaders for the static roster and event log.
Reads JSON arrays from disk and validates each record against its schema.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, List, Type, Union

from pydantic import BaseModel, ValidationError

from .schemas import Player, Event
from mvp_leaderboard.errors import MalformedInput

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    """First validation problem as 'field: message'."""
    first = error.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "record"
    return f"{loc}: {first.get('msg', 'invalid value')}"


def validate_records(records: Iterable, model: Type[BaseModel], kind: str) -> List[BaseModel]:
    """
    Validate raw records into schema objects

    Args:
        records: Model instances or mappings
        model: Schema class to validate against
        kind: Record kind used in error messages ("player", "event")

    Returns:
        List of model instances, in input order

    Raises:
        MalformedInput: on the first record that does not fit the schema
    """
    out = []
    for index, record in enumerate(records):
        if isinstance(record, model):
            out.append(record)
            continue
        if not isinstance(record, Mapping):
            raise MalformedInput(kind, index, f"expected an object, got {type(record).__name__}")
        try:
            out.append(model.model_validate(dict(record)))
        except ValidationError as e:
            raise MalformedInput(kind, index, _describe(e)) from e
    return out


def _read_array(path: Union[str, Path], kind: str) -> list:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedInput(kind, "-", f"{path} is not valid JSON ({e.msg})") from e
    if not isinstance(data, list):
        raise MalformedInput(kind, "-", f"{path} must contain a JSON array")
    return data


def load_players(path: Union[str, Path]) -> List[Player]:
    """Load and validate the roster from a JSON array file."""
    players = validate_records(_read_array(path, "player"), Player, "player")
    logger.info(f"Loaded {len(players)} players from {path}")
    return players


def load_events(path: Union[str, Path]) -> List[Event]:
    """Load and validate the event log from a JSON array file."""
    events = validate_records(_read_array(path, "event"), Event, "event")
    logger.info(f"Loaded {len(events)} events from {path}")
    return events
