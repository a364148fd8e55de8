"""Leaderboard page"""

from flask import Blueprint, render_template, request, url_for

from mvp_leaderboard import config
from mvp_leaderboard.dashboard.api import get_service
from mvp_leaderboard.ui.display import ViewState, build_rows, get_action_display_name

leaderboard_bp = Blueprint('leaderboard', __name__)

@leaderboard_bp.route('/')
@leaderboard_bp.route('/leaderboard')
def show_leaderboard():
    """Display the ranked leaderboard with theme and top-performer toggles."""

    state = ViewState.from_args(request.args, default_theme=config.DEFAULT_THEME)
    snap = get_service().snapshot(top_only=state.show_top_players)

    legend = [
        {"label": get_action_display_name(action), "points": points}
        for action, points in sorted(snap.points.items(), key=lambda kv: -kv[1])
    ]

    return render_template(
        'leaderboard.html',
        state=state,
        palette=state.palette,
        rows=build_rows(snap.entries),
        legend=legend,
        error=snap.error,
        stale=snap.stale,
        threshold=snap.threshold,
        theme_url=url_for('leaderboard.show_leaderboard', **state.toggle_theme().query()),
        filter_url=url_for('leaderboard.show_leaderboard', **state.toggle_filter().query()),
    )
