"""Shared fixtures: a small two-game season for one team."""

from datetime import datetime

import pytest

from src.models.events import FaceoffRecord, GoalRecord, ShotRecord
from src.models.game import Game, Period
from src.models.player import Player
from src.models.team import Team, TeamData

JAN_10 = datetime(2026, 1, 10, 18, 0)
FEB_10 = datetime(2026, 2, 10, 18, 0)


def _shot(
    shot_id: str,
    game_id: str,
    period: int,
    player_id: str | None,
    taken_at: datetime,
    scored: bool = False,
    scored_against: bool = False,
) -> ShotRecord:
    opponent, started = ("Riverside", JAN_10) if game_id == "g1" else ("Lakeside", FEB_10)
    return ShotRecord(
        id=shot_id,
        game_id=game_id,
        period_number=period,
        player_id=player_id,
        scored=scored,
        scored_against=scored_against,
        taken_at=taken_at,
        opponent=opponent,
        game_started_at=started,
    )


@pytest.fixture
def team_data() -> TeamData:
    """Hawks: beat Riverside 2-1 in January, beat Lakeside 1-0 in February."""
    return TeamData(
        team=Team(team_id="t1", name="Hawks", description="U12 A"),
        games=[
            Game("g1", "t1", "Riverside", "Home Rink", JAN_10, datetime(2026, 1, 9)),
            Game("g2", "t1", "Lakeside", None, FEB_10, datetime(2026, 2, 9)),
        ],
        periods=[
            Period("pd1", "g1", 1, "right"),
            Period("pd2", "g1", 2, "left"),
            Period("pd3", "g1", 3, "right"),
            Period("pd4", "g2", 1, "left"),
            Period("pd5", "g2", 2, "right"),
            Period("pd6", "g2", 3, "left"),
        ],
        players=[
            Player("p1", "t1", "Jane Doe", 9),
            Player("p2", "t1", "Sam Lee", 12),
        ],
        shots=[
            _shot("s1", "g1", 1, "p1", datetime(2026, 1, 10, 18, 10), scored=True),
            _shot("s2", "g1", 1, "p1", datetime(2026, 1, 10, 18, 12)),
            _shot("s3", "g1", 2, "p2", datetime(2026, 1, 10, 18, 40), scored=True),
            _shot("s4", "g1", 2, None, datetime(2026, 1, 10, 18, 45), scored=True, scored_against=True),
            _shot("s5", "g2", 1, "p1", datetime(2026, 2, 10, 18, 5)),
            _shot("s6", "g2", 3, "p1", datetime(2026, 2, 10, 18, 50), scored=True),
            _shot("s7", "g2", 3, None, datetime(2026, 2, 10, 18, 55), scored_against=True),
        ],
        goals=[
            GoalRecord("x1", "g1", "p1", 1, assister1_player_id="p2"),
            GoalRecord("x2", "g1", "p2", 2, assister1_player_id="p1"),
            GoalRecord("x3", "g2", "p1", 3),
        ],
        faceoffs=[
            FaceoffRecord("p1", 5, 3, "g1"),
            FaceoffRecord("p2", 4, 1, "g1"),
            FaceoffRecord("p1", 6, 4, "g2"),
        ],
    )
