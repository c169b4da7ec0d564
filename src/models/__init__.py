from src.models.events import FaceoffRecord, GoalRecord, ShotRecord
from src.models.game import Game, Period
from src.models.player import Player
from src.models.stats import (
    FaceoffSummary,
    GameBreakdown,
    GameGoals,
    GameReport,
    PeriodBreakdown,
    PlayerLine,
    PlayerReport,
    PlayerSummary,
    RecentGame,
    ShotPoint,
    TeamOverview,
    TeamReport,
)
from src.models.team import Team, TeamData

__all__ = [
    "FaceoffRecord",
    "FaceoffSummary",
    "Game",
    "GameBreakdown",
    "GameGoals",
    "GameReport",
    "GoalRecord",
    "PeriodBreakdown",
    "Period",
    "Player",
    "PlayerLine",
    "PlayerReport",
    "PlayerSummary",
    "RecentGame",
    "ShotPoint",
    "ShotRecord",
    "Team",
    "TeamData",
    "TeamOverview",
    "TeamReport",
]
