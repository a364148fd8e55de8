"""
Centralized configuration for the leaderboard app
"""
import os

from mvp_leaderboard.score.loader import DEFAULT_CFG

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Input data
PLAYERS_PATH = os.environ.get("MVP_PLAYERS_PATH", os.path.join(BASE_DIR, "data", "players.json"))
EVENTS_PATH = os.environ.get("MVP_EVENTS_PATH", os.path.join(BASE_DIR, "data", "events.json"))
SCORE_CONFIG_PATH = os.environ.get("MVP_SCORE_CONFIG", DEFAULT_CFG)

# Display
DEFAULT_THEME = os.environ.get("MVP_DEFAULT_THEME", "light").lower()

# Flask
SECRET_KEY = os.environ.get("SESSION_SECRET", "dev-secret-key-change-in-production")
