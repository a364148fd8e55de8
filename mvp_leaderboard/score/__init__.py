"""
Scoring module
MVP point aggregation and leaderboard ranking
"""

from .loader import load_config, config_hash, point_table
from .aggregate import compute_leaderboard, resolve_points
from .filters import filter_leaderboard, top_performers, top_threshold
from .runner import build_leaderboard

__all__ = [
    'load_config',
    'config_hash',
    'point_table',
    'compute_leaderboard',
    'resolve_points',
    'filter_leaderboard',
    'top_performers',
    'top_threshold',
    'build_leaderboard'
]
