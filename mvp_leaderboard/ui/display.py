"""
Display helpers for the leaderboard page: labels, themes and view state
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping

# Display names for action codes
ACTION_DISPLAY_NAMES = {
    "TAKE_WICKET": "Wicket",
    "50_RUNS_MILESTONE": "50 Runs",
    "HIT_SIX": "Six",
    "HIT_FOUR": "Four",
}

# Palettes for the two page themes
THEMES = {
    "light": {
        "background": "#F5F5F5",
        "text": "#000",
        "card": "white",
        "theme_button": "#FFD43B",
        "filter_button": "#007AFF",
        "button_text": "#FFF",
        "badge": "#007AFF",
        "badge_text": "#FFF",
    },
    "dark": {
        "background": "#1E1E1E",
        "text": "#FFF",
        "card": "#2A2A2A",
        "theme_button": "#333",
        "filter_button": "#333",
        "button_text": "#FFF",
        "badge": "#444",
        "badge_text": "#FFF",
    },
}

_TRUTHY = {"1", "true", "yes", "on"}


def is_truthy(value) -> bool:
    """Query-string flag: 1, true, yes or on (any case)"""
    return str(value or "").lower() in _TRUTHY


def get_action_display_name(action: str) -> str:
    """Human label for an action code, falling back to a title-cased code"""
    return ACTION_DISPLAY_NAMES.get(action, action.replace("_", " ").title())


@dataclass(frozen=True)
class ViewState:
    """Page state owned by the request, never by the scoring code"""
    theme: str = "light"
    show_top_players: bool = False

    @property
    def is_dark(self) -> bool:
        return self.theme == "dark"

    @property
    def palette(self) -> Dict[str, str]:
        return THEMES[self.theme]

    def toggle_theme(self) -> "ViewState":
        return replace(self, theme="light" if self.is_dark else "dark")

    def toggle_filter(self) -> "ViewState":
        return replace(self, show_top_players=not self.show_top_players)

    @property
    def theme_label(self) -> str:
        return "🌞 Light Mode" if self.is_dark else "🌙 Dark Mode"

    @property
    def filter_label(self) -> str:
        return "Show All Players" if self.show_top_players else "Show Top Performers"

    def query(self) -> Dict[str, str]:
        """Query args that reproduce this state"""
        args = {"theme": self.theme}
        if self.show_top_players:
            args["top"] = "1"
        return args

    @classmethod
    def from_args(cls, args: Mapping, default_theme: str = "light") -> "ViewState":
        theme = (args.get("theme") or default_theme or "light").lower()
        if theme not in THEMES:
            theme = "light"
        top = is_truthy(args.get("top"))
        return cls(theme=theme, show_top_players=top)


def build_rows(entries: Iterable) -> List[dict]:
    """
    Rows for the ranked list

    Rank is the 1-based position in the list being shown, so a filtered
    list is numbered from #1 again.
    """
    rows = []
    for rank, entry in enumerate(entries, start=1):
        rows.append({
            "rank": rank,
            "id": entry.id,
            "name": entry.name,
            "score": entry.score,
            "badge": f"⭐ {entry.score}",
        })
    return rows
