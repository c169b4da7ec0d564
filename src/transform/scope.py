"""Narrow a flat fact list down to one player, one game, or a date range."""

from collections.abc import Iterable
from datetime import date
from typing import Protocol, TypeVar

from src.models.events import ShotRecord


class _HasGame(Protocol):
    @property
    def game_id(self) -> str | None: ...


G = TypeVar("G", bound=_HasGame)


def for_player(shots: Iterable[ShotRecord], player_id: str) -> list[ShotRecord]:
    """Shots taken by one player."""
    return [s for s in shots if s.player_id == player_id]


def for_game(records: Iterable[G], game_id: str) -> list[G]:
    """Shots, goals or faceoffs belonging to one game."""
    return [r for r in records if r.game_id == game_id]


def within_dates(
    shots: Iterable[ShotRecord],
    start: date | None = None,
    end: date | None = None,
) -> list[ShotRecord]:
    """Shots whose game started between ``start`` and ``end`` (inclusive).

    Shots without a game start time can't be placed in a range, so they are
    only kept when no bound is given.
    """
    if start is None and end is None:
        return list(shots)

    kept: list[ShotRecord] = []
    for shot in shots:
        if shot.game_started_at is None:
            continue
        day = shot.game_started_at.date()
        if start is not None and day < start:
            continue
        if end is not None and day > end:
            continue
        kept.append(shot)
    return kept


def group_by_player(shots: Iterable[ShotRecord]) -> dict[str, list[ShotRecord]]:
    """Bucket shots by shooter, in first-seen order. Unattributed shots are skipped."""
    grouped: dict[str, list[ShotRecord]] = {}
    for shot in shots:
        if shot.player_id is None:
            continue
        grouped.setdefault(shot.player_id, []).append(shot)
    return grouped
