"""
Tests for page view state and row building
"""

from mvp_leaderboard.score.aggregate import compute_leaderboard
from mvp_leaderboard.ui.display import (
    THEMES,
    ViewState,
    build_rows,
    get_action_display_name,
    is_truthy,
)


def test_default_state():
    state = ViewState()

    assert state.theme == "light"
    assert not state.is_dark
    assert not state.show_top_players
    assert state.theme_label == "🌙 Dark Mode"
    assert state.filter_label == "Show Top Performers"
    assert state.palette is THEMES["light"]


def test_toggles_return_new_states():
    state = ViewState()

    dark = state.toggle_theme()
    top = state.toggle_filter()

    assert dark.is_dark and dark.theme_label == "🌞 Light Mode"
    assert top.show_top_players and top.filter_label == "Show All Players"
    assert state == ViewState()
    assert dark.toggle_theme() == state
    assert top.toggle_filter() == state


def test_from_args():
    assert ViewState.from_args({"theme": "DARK", "top": "1"}) == ViewState("dark", True)
    assert ViewState.from_args({"top": "false"}) == ViewState("light", False)
    assert ViewState.from_args({}, default_theme="dark").is_dark
    # Unknown themes fall back to light
    assert ViewState.from_args({"theme": "sepia"}).theme == "light"


def test_is_truthy():
    assert all(is_truthy(v) for v in ("1", "true", "YES", "On"))
    assert not any(is_truthy(v) for v in (None, "", "0", "no", "off"))


def test_query_round_trip():
    state = ViewState("dark", True)

    assert state.query() == {"theme": "dark", "top": "1"}
    assert ViewState.from_args(state.query()) == state
    assert ViewState().query() == {"theme": "light"}


def test_build_rows_ranks_from_one():
    board = compute_leaderboard(
        [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}],
        [{"playerId": 2, "action": "HIT_SIX"}],
        {"HIT_SIX": 2},
    )

    rows = build_rows(board)

    assert rows == [
        {"rank": 1, "id": 2, "name": "B", "score": 2, "badge": "⭐ 2"},
        {"rank": 2, "id": 1, "name": "A", "score": 0, "badge": "⭐ 0"},
    ]
    assert build_rows([]) == []


def test_action_display_names():
    assert get_action_display_name("TAKE_WICKET") == "Wicket"
    assert get_action_display_name("50_RUNS_MILESTONE") == "50 Runs"
    assert get_action_display_name("MAIDEN_OVER") == "Maiden Over"
