from dataclasses import dataclass


@dataclass
class Player:
    """A rostered player on a tracked team."""

    player_id: str
    team_id: str
    name: str
    number: int | None = None

    @property
    def label(self) -> str:
        if self.number is not None:
            return f"#{self.number} {self.name}"
        return self.name
