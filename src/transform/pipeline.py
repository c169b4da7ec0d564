"""Transform pipeline: validate and scope loaded team data before aggregation."""

import logging
from datetime import date

from src.models.team import TeamData
from src.transform.scope import for_game, for_player, within_dates
from src.transform.validate import (
    filter_valid,
    validate_faceoff,
    validate_goal,
    validate_shot,
)

logger = logging.getLogger(__name__)


def prepare_team_data(
    data: TeamData,
    game_id: str | None = None,
    player_id: str | None = None,
    start: date | None = None,
    end: date | None = None,
) -> TeamData:
    """Drop invalid rows and narrow the data to the requested scope.

    Args:
        data: Everything loaded for a team.
        game_id: Keep only this game.
        player_id: Keep only this player's shots and faceoffs. Goals are kept
            so assists can still be credited.
        start: Earliest game start date to keep (inclusive).
        end: Latest game start date to keep (inclusive).

    Returns:
        A new TeamData; ``data`` is left untouched.
    """
    shots = filter_valid(data.shots, validate_shot)
    goals = filter_valid(data.goals, validate_goal)
    faceoffs = filter_valid(data.faceoffs, validate_faceoff)
    games = list(data.games)
    periods = list(data.periods)
    players = list(data.players)

    if start is not None or end is not None:
        shots = within_dates(shots, start, end)
        games = [
            g for g in games
            if g.start_time is not None
            and (start is None or g.start_time.date() >= start)
            and (end is None or g.start_time.date() <= end)
        ]
        kept_games = {g.game_id for g in games}
        periods = [p for p in periods if p.game_id in kept_games]
        goals = [g for g in goals if g.game_id in kept_games]
        faceoffs = [f for f in faceoffs if f.game_id in kept_games]

    if game_id is not None:
        shots = for_game(shots, game_id)
        goals = for_game(goals, game_id)
        faceoffs = for_game(faceoffs, game_id)
        games = [g for g in games if g.game_id == game_id]
        periods = [p for p in periods if p.game_id == game_id]

    if player_id is not None:
        shots = for_player(shots, player_id)
        faceoffs = [f for f in faceoffs if f.player_id == player_id]
        players = [p for p in players if p.player_id == player_id]

    logger.info(
        "Prepared %s: %d games, %d players, %d shots, %d goals, %d faceoff rows",
        data.team.name,
        len(games),
        len(players),
        len(shots),
        len(goals),
        len(faceoffs),
    )

    return TeamData(
        team=data.team,
        games=games,
        periods=periods,
        players=players,
        shots=shots,
        goals=goals,
        faceoffs=faceoffs,
    )
