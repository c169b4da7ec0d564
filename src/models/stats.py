"""Derived statistics produced by the aggregator.

Everything here is recomputed on every call and never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class GameGoals:
    """Goals a player scored in one game."""

    game_id: str
    opponent: str | None = None
    goals: int = 0


@dataclass
class PlayerSummary:
    """Shot-tracker totals for a single player."""

    player_id: str | None
    total_shots: int = 0
    goals: int = 0
    shooting_percentage: float = 0.0
    goals_by_period: dict[int, int] = field(default_factory=dict)
    goals_by_game: list[GameGoals] = field(default_factory=list)


@dataclass
class TeamOverview:
    """Us-versus-them shot and goal totals."""

    team_shots: int = 0
    team_goals: int = 0
    opponent_shots: int = 0
    opponent_goals: int = 0
    goal_difference: int = 0
    shooting_percentage: float = 0.0


@dataclass
class FaceoffSummary:
    taken: int = 0
    won: int = 0
    percentage: float = 0.0


@dataclass
class PeriodBreakdown:
    """Team overview restricted to a single period."""

    period_number: int
    attacking_direction: str = "right"
    overview: TeamOverview = field(default_factory=TeamOverview)


@dataclass
class GameBreakdown:
    """Team overview restricted to a single game."""

    game_id: str
    opponent: str | None = None
    overview: TeamOverview = field(default_factory=TeamOverview)


@dataclass
class RecentGame:
    """A player's line for one of their most recent games."""

    game_id: str
    opponent: str | None = None
    shots: int = 0
    goals: int = 0
    shooting_percentage: float = 0.0


@dataclass
class ShotPoint:
    """One shot placed on the rink, for shot maps and timelines."""

    shot_id: str
    period_number: int
    x_coord: float | None = None
    y_coord: float | None = None
    scored: bool = False
    scored_against: bool = False
    player_id: str | None = None
    attacking_direction: str = "right"
    taken_at: datetime | None = None


@dataclass
class PlayerLine:
    """Stat-sheet line combining the shot, goal and faceoff trackers."""

    player_id: str
    shots: int = 0
    goals: int = 0
    assists: int = 0
    faceoffs_taken: int = 0
    faceoffs_won: int = 0
    shooting_percentage: float = 0.0
    faceoff_percentage: float = 0.0

    @property
    def points(self) -> int:
        return self.goals + self.assists


@dataclass
class TeamReport:
    """Full analytics view for a team."""

    team_id: str
    team_name: str
    total_games: int = 0
    overview: TeamOverview = field(default_factory=TeamOverview)
    faceoffs: FaceoffSummary = field(default_factory=FaceoffSummary)
    players: list[PlayerSummary] = field(default_factory=list)
    player_lines: list[PlayerLine] = field(default_factory=list)
    games: list[GameBreakdown] = field(default_factory=list)
    periods: list[PeriodBreakdown] = field(default_factory=list)
    shot_timeline: list[ShotPoint] = field(default_factory=list)


@dataclass
class GameReport:
    """Analytics view for a single game."""

    game_id: str
    opponent: str | None = None
    overview: TeamOverview = field(default_factory=TeamOverview)
    periods: list[PeriodBreakdown] = field(default_factory=list)
    player_lines: list[PlayerLine] = field(default_factory=list)
    shot_timeline: list[ShotPoint] = field(default_factory=list)


@dataclass
class PlayerReport:
    """Analytics view for a single player."""

    summary: PlayerSummary
    faceoffs: FaceoffSummary = field(default_factory=FaceoffSummary)
    recent_games: list[RecentGame] = field(default_factory=list)
    shot_timeline: list[ShotPoint] = field(default_factory=list)
