# Dashboard module initialization
from .api import bp_leaderboard
from .routes import leaderboard_bp

__all__ = [
    'bp_leaderboard',
    'leaderboard_bp',
]
