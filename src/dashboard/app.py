"""Streamlit dashboard for a tracked team's shot, goal and faceoff stats.

Reads from Postgres or the tracker API (STATS_SOURCE env var, overridable in
the sidebar) and renders the team, game and player reports.
"""

import logging
import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path

# Streamlit adds the script's directory to sys.path, but other modules
# import from the project root (e.g. "from src.models.team import ...").
# Ensure the project root is on sys.path so those imports resolve.
_PROJECT_ROOT = str(Path(__file__).resolve().parents[2])
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

import streamlit as st  # noqa: E402
from dotenv import load_dotenv  # noqa: E402

from src.analysis.report import (  # noqa: E402
    build_game_report,
    build_player_report,
    build_team_report,
)
from src.dashboard.format import (  # noqa: E402
    format_goal_difference,
    format_pct,
    games_frame,
    overview_rows,
    periods_frame,
    player_label,
    player_lines_frame,
    player_summaries_frame,
    shots_frame,
)
from src.load.base import SOURCES, get_source, load_team_data  # noqa: E402
from src.models.player import Player  # noqa: E402
from src.models.stats import ShotPoint  # noqa: E402
from src.models.team import TeamData  # noqa: E402
from src.transform.metrics import add_rolling_shooting_pct, game_log_frame  # noqa: E402
from src.transform.pipeline import prepare_team_data  # noqa: E402

load_dotenv()

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Hockey Shot Tracker Stats", layout="wide")


@st.cache_data(ttl=300, show_spinner="Loading team data...")
def cached_team_data(team_id: str, source: str) -> TeamData:
    """Load a team once per five minutes per source."""
    return load_team_data(team_id, source=source)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def render_shot_map(points: list[ShotPoint], players: list[Player]) -> None:
    """Scatter of shot locations on the 1000x1000 rink grid, colored by outcome."""
    df = shots_frame(points, players)
    if df.empty:
        st.info("No shot locations recorded.")
        return
    st.scatter_chart(df, x="x_coord", y="y_coord", color="outcome")


def page_team(data: TeamData) -> None:
    """Season overview with game and period splits."""
    report = build_team_report(data)
    st.header(report.team_name)
    st.caption(f"{report.total_games} games")

    rows = overview_rows(report.overview)
    cols = st.columns(len(rows))
    for col, (label, value) in zip(cols, rows):
        col.metric(label, value)

    st.metric(
        "Faceoffs",
        f"{report.faceoffs.won}/{report.faceoffs.taken}",
        format_pct(report.faceoffs.percentage),
        delta_color="off",
    )

    st.subheader("By Period")
    st.dataframe(periods_frame(report.periods), use_container_width=True, hide_index=True)

    st.subheader("By Game")
    if report.games:
        st.dataframe(games_frame(report.games), use_container_width=True, hide_index=True)
    else:
        st.info("No games recorded yet.")


def page_players(data: TeamData) -> None:
    """Stat sheet plus shot-tracker totals for every rostered player."""
    report = build_team_report(data)
    st.header("Players")

    if not data.players:
        st.info("No players on this roster yet.")
        return

    st.subheader("Stat Sheet")
    st.dataframe(
        player_lines_frame(report.player_lines, data.players),
        use_container_width=True,
        hide_index=True,
    )

    st.subheader("Shot Tracker")
    st.dataframe(
        player_summaries_frame(report.players, data.players),
        use_container_width=True,
        hide_index=True,
    )


def page_game(data: TeamData) -> None:
    """Single-game breakdown."""
    st.header("Game")

    if not data.games:
        st.info("No games recorded yet.")
        return

    labels = {
        g.game_id: f"{g.label} ({g.start_time:%Y-%m-%d})" if g.start_time else g.label
        for g in data.games
    }
    game_id = st.selectbox("Game", list(labels), format_func=labels.get)
    report = build_game_report(data, game_id)

    overview = report.overview
    cols = st.columns(4)
    cols[0].metric("Score", f"{overview.team_goals} - {overview.opponent_goals}")
    cols[1].metric("Shots", f"{overview.team_shots} - {overview.opponent_shots}")
    cols[2].metric("Shooting %", format_pct(overview.shooting_percentage))
    cols[3].metric("Goal Difference", format_goal_difference(overview.goal_difference))

    st.subheader("By Period")
    st.dataframe(periods_frame(report.periods), use_container_width=True, hide_index=True)

    st.subheader("Shot Map")
    render_shot_map(report.shot_timeline, data.players)

    st.subheader("Players")
    st.dataframe(
        player_lines_frame(report.player_lines, data.players),
        use_container_width=True,
        hide_index=True,
    )


def page_player(data: TeamData) -> None:
    """One player's totals, splits and recent form."""
    st.header("Player")

    if not data.players:
        st.info("No players on this roster yet.")
        return

    by_id = {p.player_id: p for p in data.players}
    player_id = st.selectbox(
        "Player", list(by_id), format_func=lambda pid: player_label(by_id.get(pid))
    )
    report = build_player_report(data, player_id)
    summary = report.summary

    cols = st.columns(4)
    cols[0].metric("Shots", summary.total_shots)
    cols[1].metric("Goals", summary.goals)
    cols[2].metric("Shooting %", format_pct(summary.shooting_percentage))
    cols[3].metric("Faceoff %", format_pct(report.faceoffs.percentage))

    if summary.goals_by_period:
        st.subheader("Goals by Period")
        st.bar_chart({f"P{k}": v for k, v in sorted(summary.goals_by_period.items())})

    if report.recent_games:
        st.subheader("Recent Games")
        st.dataframe(
            [
                {
                    "opponent": g.opponent or "Game",
                    "shots": g.shots,
                    "goals": g.goals,
                    "shooting_pct": g.shooting_percentage,
                }
                for g in report.recent_games
            ],
            use_container_width=True,
            hide_index=True,
        )

    st.subheader("Shot Map")
    render_shot_map(report.shot_timeline, data.players)

    log = game_log_frame([s for s in data.shots if s.player_id == player_id])
    if len(log) > 1:
        st.subheader("Rolling Shooting %")
        trend = add_rolling_shooting_pct(log, window=5)
        st.line_chart(trend, x="game_date", y="shooting_pct_rolling_5")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

PAGES: dict[str, Callable[[TeamData], None]] = {
    "Team": page_team,
    "Players": page_players,
    "Game": page_game,
    "Player": page_player,
}


def main() -> None:
    """Dashboard entry point."""
    st.title("Hockey Shot Tracker Stats")

    default_source = get_source()
    source = st.sidebar.selectbox("Source", SOURCES, index=SOURCES.index(default_source))
    team_id = st.sidebar.text_input("Team ID")
    start: date | None = st.sidebar.date_input("From", value=None)
    end: date | None = st.sidebar.date_input("To", value=None)
    page = st.sidebar.radio("Navigation", list(PAGES))

    if not team_id:
        st.info("Enter a team ID in the sidebar to load its stats.")
        return

    try:
        data = cached_team_data(team_id, source)
    except Exception as exc:
        logger.warning("Failed to load team %s from %s: %s", team_id, source, exc)
        st.error(f"Cannot load team {team_id} from {source}: {exc}")
        st.stop()

    PAGES[page](prepare_team_data(data, start=start, end=end))


main()
