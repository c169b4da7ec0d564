"""Display formatting for reports: percentages, labels, and tables."""

from dataclasses import asdict

import pandas as pd

from src.models.player import Player
from src.models.stats import (
    GameBreakdown,
    PeriodBreakdown,
    PlayerLine,
    PlayerSummary,
    ShotPoint,
    TeamOverview,
)

PLAYER_LINE_COLUMNS = [
    "player",
    "shots",
    "goals",
    "assists",
    "points",
    "shooting_pct",
    "faceoffs_taken",
    "faceoffs_won",
    "faceoff_pct",
]

SHOT_COLUMNS = ["x_coord", "y_coord", "outcome", "shooter", "period", "attacking_direction", "taken_at"]


def format_pct(value: float) -> str:
    """One-decimal percentage for display.

    Examples:
        >>> format_pct(66.67)
        '66.7%'
        >>> format_pct(0)
        '0.0%'
    """
    return f"{value:.1f}%"


def format_goal_difference(diff: int) -> str:
    """Goal differential with an explicit sign when positive."""
    return f"+{diff}" if diff > 0 else str(diff)


def player_label(player: Player | None, fallback: str = "Unknown") -> str:
    """'#9 Jane Doe', or just the name when there's no number."""
    if player is None:
        return fallback
    return player.label


def overview_rows(overview: TeamOverview) -> list[tuple[str, str]]:
    """Label/value pairs for the overview block."""
    return [
        ("Team Shots", str(overview.team_shots)),
        ("Team Goals", str(overview.team_goals)),
        ("Opponent Shots", str(overview.opponent_shots)),
        ("Opponent Goals", str(overview.opponent_goals)),
        ("Team Shooting %", format_pct(overview.shooting_percentage)),
        ("Goal Difference", format_goal_difference(overview.goal_difference)),
    ]


def player_lines_frame(lines: list[PlayerLine], players: list[Player]) -> pd.DataFrame:
    """Stat-sheet table, one row per player, in the order of ``lines``."""
    by_id = {p.player_id: p for p in players}
    rows = [
        {
            "player": player_label(by_id.get(line.player_id), fallback=line.player_id),
            "shots": line.shots,
            "goals": line.goals,
            "assists": line.assists,
            "points": line.points,
            "shooting_pct": line.shooting_percentage,
            "faceoffs_taken": line.faceoffs_taken,
            "faceoffs_won": line.faceoffs_won,
            "faceoff_pct": line.faceoff_percentage,
        }
        for line in lines
    ]
    return pd.DataFrame(rows, columns=PLAYER_LINE_COLUMNS)


def player_summaries_frame(summaries: list[PlayerSummary], players: list[Player]) -> pd.DataFrame:
    """Shot-tracker totals table with goals per period spread into columns."""
    by_id = {p.player_id: p for p in players}
    rows = []
    for s in summaries:
        row = {
            "player": player_label(by_id.get(s.player_id or ""), fallback=s.player_id or "Unknown"),
            "shots": s.total_shots,
            "goals": s.goals,
            "shooting_pct": s.shooting_percentage,
        }
        for period_number in (1, 2, 3):
            row[f"p{period_number}_goals"] = s.goals_by_period.get(period_number, 0)
        rows.append(row)
    return pd.DataFrame(rows)


def games_frame(games: list[GameBreakdown]) -> pd.DataFrame:
    """Per-game team overview table."""
    return pd.DataFrame(
        [{"game_id": g.game_id, "opponent": g.opponent or "Game", **asdict(g.overview)} for g in games]
    )


def periods_frame(periods: list[PeriodBreakdown]) -> pd.DataFrame:
    """Per-period team overview table."""
    return pd.DataFrame(
        [
            {
                "period": p.period_number,
                "attacking_direction": p.attacking_direction,
                **asdict(p.overview),
            }
            for p in periods
        ]
    )


def shot_outcome(point: ShotPoint) -> str:
    """'Goal' / 'Shot', suffixed with ' Against' for opponent shots."""
    outcome = "Goal" if point.scored else "Shot"
    return f"{outcome} Against" if point.scored_against else outcome


def shots_frame(points: list[ShotPoint], players: list[Player]) -> pd.DataFrame:
    """Rink coordinates for a shot map. Shots without coordinates are left out."""
    by_id = {p.player_id: p for p in players}
    rows = [
        {
            "x_coord": p.x_coord,
            "y_coord": p.y_coord,
            "outcome": shot_outcome(p),
            "shooter": player_label(
                by_id.get(p.player_id or ""),
                fallback=p.player_id or ("Opponent" if p.scored_against else "Team"),
            ),
            "period": p.period_number,
            "attacking_direction": p.attacking_direction,
            "taken_at": p.taken_at,
        }
        for p in points
        if p.x_coord is not None and p.y_coord is not None
    ]
    return pd.DataFrame(rows, columns=SHOT_COLUMNS)
