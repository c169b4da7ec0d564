"""Tests for report display formatting."""

from src.analysis.report import build_team_report
from src.dashboard.format import (
    PLAYER_LINE_COLUMNS,
    format_goal_difference,
    format_pct,
    games_frame,
    overview_rows,
    periods_frame,
    player_label,
    player_lines_frame,
    player_summaries_frame,
    shot_outcome,
    shots_frame,
)
from src.models.player import Player
from src.models.stats import ShotPoint, TeamOverview
from src.models.team import TeamData


class TestFormatting:
    def test_format_pct(self) -> None:
        assert format_pct(66.67) == "66.7%"
        assert format_pct(0) == "0.0%"

    def test_goal_difference_sign(self) -> None:
        assert format_goal_difference(2) == "+2"
        assert format_goal_difference(0) == "0"
        assert format_goal_difference(-3) == "-3"

    def test_player_label(self) -> None:
        assert player_label(Player("p1", "t1", "Jane Doe", 9)) == "#9 Jane Doe"
        assert player_label(Player("p2", "t1", "Sam")) == "Sam"
        assert player_label(None, fallback="p3") == "p3"

    def test_overview_rows(self) -> None:
        rows = dict(overview_rows(TeamOverview(team_shots=5, team_goals=3, goal_difference=2,
                                               shooting_percentage=60.0)))
        assert rows["Team Shots"] == "5"
        assert rows["Team Shooting %"] == "60.0%"
        assert rows["Goal Difference"] == "+2"


class TestFrames:
    def test_player_lines_frame(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        df = player_lines_frame(report.player_lines, team_data.players)
        assert list(df.columns) == PLAYER_LINE_COLUMNS
        assert df["player"].tolist() == ["#9 Jane Doe", "#12 Sam Lee"]
        assert df["points"].tolist() == [3, 2]

    def test_player_lines_frame_empty(self) -> None:
        df = player_lines_frame([], [])
        assert df.empty
        assert list(df.columns) == PLAYER_LINE_COLUMNS

    def test_player_summaries_frame(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        df = player_summaries_frame(report.players, team_data.players)
        first = df.iloc[0]
        assert first["player"] == "#9 Jane Doe"
        assert (first["p1_goals"], first["p2_goals"], first["p3_goals"]) == (1, 0, 1)

    def test_games_and_periods_frames(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        games = games_frame(report.games)
        periods = periods_frame(report.periods)
        assert games["opponent"].tolist() == ["Lakeside", "Riverside"]
        assert periods["period"].tolist() == [1, 2, 3]
        assert "goal_difference" in periods.columns


class TestShotsFrame:
    def test_outcome_labels(self) -> None:
        assert shot_outcome(ShotPoint("s1", 1, scored=True)) == "Goal"
        assert shot_outcome(ShotPoint("s2", 1)) == "Shot"
        assert shot_outcome(ShotPoint("s3", 1, scored=True, scored_against=True)) == "Goal Against"
        assert shot_outcome(ShotPoint("s4", 1, scored_against=True)) == "Shot Against"

    def test_rows_with_coordinates_only(self) -> None:
        players = [Player("p1", "t1", "Jane Doe", 9)]
        points = [
            ShotPoint("s1", 1, x_coord=120.0, y_coord=400.0, scored=True, player_id="p1"),
            ShotPoint("s2", 2, x_coord=None, y_coord=400.0),
            ShotPoint("s3", 3, x_coord=900.0, y_coord=500.0, scored_against=True),
            ShotPoint("s4", 3, x_coord=600.0, y_coord=100.0),
        ]
        df = shots_frame(points, players)
        assert df["shooter"].tolist() == ["#9 Jane Doe", "Opponent", "Team"]
        assert df["outcome"].tolist() == ["Goal", "Shot Against", "Shot"]
        assert df["x_coord"].tolist() == [120.0, 900.0, 600.0]

    def test_empty(self) -> None:
        df = shots_frame([], [])
        assert df.empty
        assert "outcome" in df.columns
