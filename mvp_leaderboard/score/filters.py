"""
Threshold filters over a ranked leaderboard
"""
from typing import Iterable, List

from mvp_leaderboard.parse.schemas import LeaderboardEntry

DEFAULT_TOP_THRESHOLD = 20


def filter_leaderboard(entries: Iterable[LeaderboardEntry], threshold: float) -> List[LeaderboardEntry]:
    """
    Keep entries scoring at least `threshold`, in their current order

    Args:
        entries: Ranked leaderboard
        threshold: Minimum score (inclusive)

    Returns:
        New list, possibly empty
    """
    return [e for e in entries if e.score >= threshold]


def top_threshold(cfg: dict) -> float:
    """Configured top-performers threshold"""
    return (cfg.get("filter") or {}).get("top_performers_threshold", DEFAULT_TOP_THRESHOLD)


def top_performers(entries: Iterable[LeaderboardEntry], cfg: dict) -> List[LeaderboardEntry]:
    return filter_leaderboard(entries, top_threshold(cfg))
