"""Tests for the team, game and player report builders."""

import pytest

from src.analysis.report import build_game_report, build_player_report, build_team_report
from src.models.team import TeamData


class TestTeamReport:
    def test_overview(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        o = report.overview
        assert (o.team_shots, o.team_goals) == (5, 3)
        assert (o.opponent_shots, o.opponent_goals) == (2, 1)
        assert o.goal_difference == 2
        assert o.shooting_percentage == 60.0
        assert report.total_games == 2
        assert report.team_name == "Hawks"

    def test_faceoffs(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        assert (report.faceoffs.taken, report.faceoffs.won) == (15, 8)
        assert report.faceoffs.percentage == 53.33

    def test_games_newest_first(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        assert [g.game_id for g in report.games] == ["g2", "g1"]
        assert report.games[0].overview.team_goals == 1
        assert report.games[1].overview.opponent_goals == 1

    def test_player_lines(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        p1, p2 = report.player_lines
        assert p1.player_id == "p1"
        assert (p1.shots, p1.goals, p1.assists) == (4, 2, 1)
        assert p1.shooting_percentage == 50.0
        assert (p1.faceoffs_taken, p1.faceoffs_won, p1.faceoff_percentage) == (11, 7, 63.64)
        assert (p2.shots, p2.goals, p2.assists) == (1, 1, 1)
        assert p2.faceoff_percentage == 25.0

    def test_players_ranked(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        assert [s.player_id for s in report.players] == ["p1", "p2"]
        assert report.players[0].goals_by_period == {1: 1, 3: 1}

    def test_periods(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        assert [p.overview.team_shots for p in report.periods] == [3, 1, 1]
        assert report.periods[1].overview.opponent_goals == 1

    def test_empty_team(self, team_data: TeamData) -> None:
        empty = TeamData(team=team_data.team)
        report = build_team_report(empty)
        assert report.total_games == 0
        assert report.overview.shooting_percentage == 0
        assert report.player_lines == []
        assert len(report.periods) == 3


class TestGameReport:
    def test_scoped_to_game(self, team_data: TeamData) -> None:
        report = build_game_report(team_data, "g1")
        assert report.opponent == "Riverside"
        o = report.overview
        assert (o.team_shots, o.team_goals, o.opponent_goals) == (3, 2, 1)
        assert o.shooting_percentage == 66.67

    def test_period_directions_from_game(self, team_data: TeamData) -> None:
        report = build_game_report(team_data, "g2")
        assert [p.attacking_direction for p in report.periods] == ["left", "right", "left"]

    def test_player_lines(self, team_data: TeamData) -> None:
        report = build_game_report(team_data, "g1")
        by_id = {line.player_id: line for line in report.player_lines}
        assert (by_id["p1"].goals, by_id["p1"].assists, by_id["p1"].faceoff_percentage) == (1, 1, 60.0)
        assert (by_id["p2"].goals, by_id["p2"].assists) == (1, 1)

    def test_unknown_game(self, team_data: TeamData) -> None:
        with pytest.raises(LookupError, match="g404"):
            build_game_report(team_data, "g404")


class TestPlayerReport:
    def test_summary(self, team_data: TeamData) -> None:
        report = build_player_report(team_data, "p1")
        s = report.summary
        assert s.player_id == "p1"
        assert (s.total_shots, s.goals, s.shooting_percentage) == (4, 2, 50.0)
        assert [g.game_id for g in s.goals_by_game] == ["g1", "g2"]

    def test_recent_games_newest_first(self, team_data: TeamData) -> None:
        report = build_player_report(team_data, "p1")
        assert [g.game_id for g in report.recent_games] == ["g2", "g1"]
        assert report.recent_games[0].opponent == "Lakeside"
        assert report.recent_games[0].shooting_percentage == 50.0

    def test_faceoffs(self, team_data: TeamData) -> None:
        report = build_player_report(team_data, "p1")
        assert report.faceoffs.percentage == 63.64

    def test_player_without_shots(self, team_data: TeamData) -> None:
        report = build_player_report(team_data, "p99")
        assert report.summary.total_shots == 0
        assert report.summary.player_id == "p99"
        assert report.recent_games == []


class TestShotTimelines:
    def test_team_timeline_has_every_shot(self, team_data: TeamData) -> None:
        report = build_team_report(team_data)
        assert [p.shot_id for p in report.shot_timeline] == ["s1", "s2", "s3", "s4", "s5", "s6", "s7"]

    def test_game_timeline_scoped(self, team_data: TeamData) -> None:
        report = build_game_report(team_data, "g2")
        assert [p.shot_id for p in report.shot_timeline] == ["s5", "s6", "s7"]

    def test_player_timeline_scoped(self, team_data: TeamData) -> None:
        report = build_player_report(team_data, "p1")
        assert [p.shot_id for p in report.shot_timeline] == ["s1", "s2", "s5", "s6"]
        assert all(p.player_id == "p1" for p in report.shot_timeline)
