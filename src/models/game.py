from dataclasses import dataclass
from datetime import datetime


@dataclass
class Game:
    """A game tracked for one of our teams."""

    game_id: str
    team_id: str
    opponent: str | None = None
    location: str | None = None
    start_time: datetime | None = None
    created_at: datetime | None = None

    @property
    def label(self) -> str:
        return self.opponent or "Game"


@dataclass
class Period:
    """One of the three periods of a game."""

    period_id: str
    game_id: str
    period_number: int  # 1-3
    attacking_direction: str = "right"  # "left" or "right"
