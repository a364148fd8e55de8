"""
Pytest configuration and fixtures for tests
"""
import json
import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import app
from mvp_leaderboard.services.leaderboard_service import LeaderboardService

POINTS = {"TAKE_WICKET": 20, "50_RUNS_MILESTONE": 15, "HIT_SIX": 2, "HIT_FOUR": 1}

PLAYERS = [
    {"id": 1, "name": "A", "team": "Reds"},
    {"id": 2, "name": "B", "team": "Blues"},
    {"id": 3, "name": "C", "team": "Reds"},
]

EVENTS = [
    {"id": "e1", "playerId": 1, "action": "TAKE_WICKET"},
    {"id": "e2", "playerId": 1, "action": "HIT_FOUR"},
    {"id": "e3", "playerId": 2, "action": "HIT_SIX"},
    {"id": "e4", "playerId": 3, "action": "50_RUNS_MILESTONE"},
    {"id": "e5", "playerId": 3, "action": "HIT_SIX"},
    {"id": "e6", "playerId": 2, "action": "RUN_OUT"},
]

CONFIG_YML = """\
points:
  validate: auto
  table:
    TAKE_WICKET: 20
    "50_RUNS_MILESTONE": 15
    HIT_SIX: 2
    HIT_FOUR: 1
filter:
  top_performers_threshold: 17
cache:
  enabled: true
"""


@pytest.fixture
def data_files(tmp_path):
    """Roster, event log and config written to a temp dir"""
    players = tmp_path / "players.json"
    events = tmp_path / "events.json"
    cfg = tmp_path / "config.yml"
    players.write_text(json.dumps(PLAYERS), encoding="utf-8")
    events.write_text(json.dumps(EVENTS), encoding="utf-8")
    cfg.write_text(CONFIG_YML, encoding="utf-8")
    return {"players": players, "events": events, "config": cfg}


@pytest.fixture
def service(data_files):
    """Leaderboard service reading the temp data files"""
    return LeaderboardService(
        str(data_files["players"]),
        str(data_files["events"]),
        str(data_files["config"]),
    )


@pytest.fixture
def client(service, monkeypatch):
    """Create Flask test client backed by the temp data files"""
    app.config['TESTING'] = True
    monkeypatch.setitem(app.extensions, "leaderboard_service", service)
    with app.test_client() as client:
        yield client
