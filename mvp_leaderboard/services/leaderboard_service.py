import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import yaml

from mvp_leaderboard import config
from mvp_leaderboard.errors import LeaderboardError
from mvp_leaderboard.parse.runner import load_players, load_events
from mvp_leaderboard.parse.schemas import LeaderboardEntry
from mvp_leaderboard.score.aggregate import compute_leaderboard
from mvp_leaderboard.score.filters import filter_leaderboard, top_threshold
from mvp_leaderboard.score.loader import load_config, point_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardSnapshot:
    """What the display layer renders: entries plus the state they came from."""
    entries: List[LeaderboardEntry]
    threshold: Optional[float] = None
    error: Optional[str] = None
    stale: bool = False
    points: Dict[str, int] = field(default_factory=dict)

    @property
    def empty(self) -> bool:
        return not self.entries


class LeaderboardService:
    """
    Loads roster, event log and point table from disk and keeps the last
    leaderboard that computed cleanly.

    A failed refresh never replaces a good leaderboard; it only records the
    error so the page can show it next to the previous board. snapshot()
    recomputes whenever any input file changes on disk, so every worker
    process picks up edits without a shared refresh.
    """

    def __init__(
        self,
        players_path: str | None = None,
        events_path: str | None = None,
        cfg_path: str | None = None,
    ) -> None:
        self.players_path = players_path or config.PLAYERS_PATH
        self.events_path = events_path or config.EVENTS_PATH
        self.cfg_path = cfg_path or config.SCORE_CONFIG_PATH
        self._last_good: Optional[List[LeaderboardEntry]] = None
        self._cfg: dict = {}
        self.last_error: Optional[str] = None
        self._input_key: Optional[Tuple] = None

    def _current_key(self) -> Optional[Tuple]:
        """(path, mtime_ns, size) for each input file; None when one cannot be read"""
        try:
            return tuple(
                (os.path.abspath(p), os.stat(p).st_mtime_ns, os.stat(p).st_size)
                for p in (self.players_path, self.events_path, self.cfg_path)
            )
        except OSError:
            return None

    def refresh(self) -> bool:
        """Recompute the leaderboard. Returns True when the new board was accepted."""
        self._input_key = self._current_key()
        try:
            cfg = load_config(self.cfg_path)
            players = load_players(self.players_path)
            events = load_events(self.events_path)
            entries = compute_leaderboard(players, events, point_table(cfg))
        except LeaderboardError as exc:
            logger.warning("[LEADERBOARD] Refresh rejected: %s", exc.message)
            self.last_error = exc.user_message
            return False
        except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
            logger.error("[LEADERBOARD] Could not read inputs: %s", exc)
            self.last_error = f"Could not load leaderboard data: {exc}"
            return False

        self._last_good = entries
        self._cfg = cfg
        self.last_error = None
        logger.info("[LEADERBOARD] Refreshed: %d players, %d events", len(players), len(events))
        return True

    @property
    def point_table(self) -> Dict[str, int]:
        return point_table(self._cfg)

    @property
    def top_threshold(self) -> float:
        return top_threshold(self._cfg)

    def snapshot(self, top_only: bool = False, threshold: Optional[float] = None) -> LeaderboardSnapshot:
        """
        Current leaderboard, optionally filtered.

        `threshold` wins over `top_only`; `top_only` uses the configured
        top-performers threshold.
        """
        key = self._current_key()
        if key is None or key != self._input_key:
            self.refresh()

        if threshold is None and top_only:
            threshold = self.top_threshold

        entries = self._last_good or []
        if threshold is not None:
            entries = filter_leaderboard(entries, threshold)

        return LeaderboardSnapshot(
            entries=entries,
            threshold=threshold,
            error=self.last_error,
            stale=self.last_error is not None and self._last_good is not None,
            points=self.point_table,
        )
