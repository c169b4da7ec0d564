"""Raw tracker facts: shots, goals, and faceoffs.

These are the inputs to the stats aggregator. Each one is a single row from
the tracker with its game and period context already joined in.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ShotRecord:
    """A single shot recorded by the shot tracker."""

    id: str
    game_id: str
    period_number: int  # 1-3
    player_id: str | None = None  # None for unattributed / opponent shots
    scored: bool = False
    scored_against: bool = False  # True = taken by the opponent
    taken_at: datetime | None = None
    opponent: str | None = None
    attacking_direction: str | None = None  # "left" or "right"
    x_coord: float | None = None
    y_coord: float | None = None
    game_started_at: datetime | None = None

    @property
    def is_team_shot(self) -> bool:
        return not self.scored_against

    @property
    def is_team_goal(self) -> bool:
        return self.scored and not self.scored_against

    @property
    def is_opponent_goal(self) -> bool:
        return self.scored and self.scored_against


@dataclass(frozen=True)
class GoalRecord:
    """A goal entered through the goals & assists tracker."""

    id: str
    game_id: str
    scorer_player_id: str
    period_number: int
    assister1_player_id: str | None = None
    assister2_player_id: str | None = None

    @property
    def assister_ids(self) -> list[str]:
        return [
            pid for pid in (self.assister1_player_id, self.assister2_player_id)
            if pid is not None
        ]


@dataclass(frozen=True)
class FaceoffRecord:
    """Faceoff counts for one player (usually within one game)."""

    player_id: str
    taken: int = 0
    won: int = 0
    game_id: str | None = None
