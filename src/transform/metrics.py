"""Per-game player logs and rolling shooting trends, as DataFrames."""

import pandas as pd

from src.models.events import ShotRecord

GAME_LOG_COLUMNS = ["player_id", "game_id", "opponent", "game_date", "shots", "goals"]


def game_log_frame(shots: list[ShotRecord]) -> pd.DataFrame:
    """One row per (player, game) with shot and goal counts.

    Unattributed shots and opponent shots are left out.
    """
    rows = [
        {
            "player_id": s.player_id,
            "game_id": s.game_id,
            "opponent": s.opponent,
            "game_date": s.game_started_at,
            "goals": int(s.scored),
        }
        for s in shots
        if s.player_id is not None and s.is_team_shot
    ]
    if not rows:
        return pd.DataFrame(columns=GAME_LOG_COLUMNS)

    df = pd.DataFrame(rows)
    log = (
        df.groupby(["player_id", "game_id"], sort=False, dropna=False)
        .agg(
            opponent=("opponent", "first"),
            game_date=("game_date", "first"),
            shots=("goals", "size"),
            goals=("goals", "sum"),
        )
        .reset_index()
    )
    return log[GAME_LOG_COLUMNS]


def add_rolling_shooting_pct(
    df: pd.DataFrame,
    window: int = 5,
    group_by: str = "player_id",
) -> pd.DataFrame:
    """Add a rolling shooting percentage over the last ``window`` games.

    The rolling value is total goals / total shots inside the window rather
    than an average of per-game percentages, so low-volume games don't swing
    it.

    Args:
        df: Game log with shots, goals and game_date columns.
        window: Number of games in the rolling window.
        group_by: Column to group by (usually player_id).

    Returns:
        DataFrame with a new column named 'shooting_pct_rolling_{window}'.
    """
    df = df.sort_values([group_by, "game_date"], na_position="first")

    grouped = df.groupby(group_by)
    goals = grouped["goals"].transform(lambda x: x.rolling(window, min_periods=1).sum())
    shots = grouped["shots"].transform(lambda x: x.rolling(window, min_periods=1).sum())

    pct = (goals / shots.where(shots > 0) * 100).fillna(0.0)
    df[f"shooting_pct_rolling_{window}"] = pct.round(2)
    return df
