from dataclasses import dataclass, field

from src.models.events import FaceoffRecord, GoalRecord, ShotRecord
from src.models.game import Game, Period
from src.models.player import Player


@dataclass
class Team:
    """A team as stored by the tracker."""

    team_id: str
    name: str
    description: str | None = None


@dataclass
class TeamData:
    """Everything loaded for one team, ready to be aggregated."""

    team: Team
    games: list[Game] = field(default_factory=list)
    periods: list[Period] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    shots: list[ShotRecord] = field(default_factory=list)
    goals: list[GoalRecord] = field(default_factory=list)
    faceoffs: list[FaceoffRecord] = field(default_factory=list)

    def player_by_id(self, player_id: str) -> Player | None:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def game_by_id(self, game_id: str) -> Game | None:
        for game in self.games:
            if game.game_id == game_id:
                return game
        return None

    def directions_for(self, game_id: str) -> dict[int, str]:
        """Attacking direction per period number for one game."""
        return {
            p.period_number: p.attacking_direction
            for p in self.periods
            if p.game_id == game_id
        }
