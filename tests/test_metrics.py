"""Tests for the game log and rolling shooting metrics."""

from datetime import datetime

import pandas as pd

from src.models.events import ShotRecord
from src.transform.metrics import add_rolling_shooting_pct, game_log_frame


def _shot(shot_id: str, game_id: str, day: int, scored: bool = False,
          player_id: str | None = "p1", against: bool = False) -> ShotRecord:
    return ShotRecord(
        id=shot_id,
        game_id=game_id,
        period_number=1,
        player_id=player_id,
        scored=scored,
        scored_against=against,
        game_started_at=datetime(2026, 1, day),
    )


class TestGameLogFrame:
    def test_counts_per_player_game(self) -> None:
        shots = [
            _shot("a", "g1", 1, scored=True),
            _shot("b", "g1", 1),
            _shot("c", "g2", 8),
            _shot("d", "g1", 1, player_id="p2", scored=True),
        ]
        log = game_log_frame(shots)
        p1 = log[log["player_id"] == "p1"]
        assert p1["shots"].tolist() == [2, 1]
        assert p1["goals"].tolist() == [1, 0]
        assert len(log) == 3

    def test_skips_opponent_and_unattributed(self) -> None:
        shots = [_shot("a", "g1", 1, against=True), _shot("b", "g1", 1, player_id=None)]
        log = game_log_frame(shots)
        assert log.empty
        assert list(log.columns) == ["player_id", "game_id", "opponent", "game_date", "shots", "goals"]


class TestRollingShootingPct:
    def test_rolling_window_uses_totals(self) -> None:
        df = pd.DataFrame({
            "player_id": ["p1"] * 3,
            "game_date": pd.date_range("2026-01-01", periods=3),
            "shots": [4, 1, 5],
            "goals": [1, 1, 0],
        })
        result = add_rolling_shooting_pct(df, window=2)
        # Game 1: 1/4 = 25.0
        # Game 2: (1+1)/(4+1) = 40.0
        # Game 3: (1+0)/(1+5) = 16.67
        assert result["shooting_pct_rolling_2"].tolist() == [25.0, 40.0, 16.67]

    def test_zero_shots_is_zero(self) -> None:
        df = pd.DataFrame({
            "player_id": ["p1"],
            "game_date": pd.date_range("2026-01-01", periods=1),
            "shots": [0],
            "goals": [0],
        })
        result = add_rolling_shooting_pct(df, window=3)
        assert result["shooting_pct_rolling_3"].tolist() == [0.0]

    def test_players_independent(self) -> None:
        df = pd.DataFrame({
            "player_id": ["p1", "p2", "p1", "p2"],
            "game_date": pd.to_datetime(["2026-01-01", "2026-01-01", "2026-01-02", "2026-01-02"]),
            "shots": [2, 1, 2, 1],
            "goals": [2, 0, 0, 1],
        })
        result = add_rolling_shooting_pct(df, window=5)
        p1 = result[result["player_id"] == "p1"]["shooting_pct_rolling_5"].tolist()
        p2 = result[result["player_id"] == "p2"]["shooting_pct_rolling_5"].tolist()
        assert p1 == [100.0, 50.0]
        assert p2 == [0.0, 50.0]

    def test_unsorted_input_gets_sorted(self) -> None:
        df = pd.DataFrame({
            "player_id": ["p1"] * 2,
            "game_date": pd.to_datetime(["2026-01-05", "2026-01-01"]),
            "shots": [1, 1],
            "goals": [0, 1],
        })
        result = add_rolling_shooting_pct(df, window=2)
        rolling = result.sort_values("game_date")["shooting_pct_rolling_2"].tolist()
        assert rolling == [100.0, 50.0]
