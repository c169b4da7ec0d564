"""Parse tracker API JSON responses into dataclass instances."""

import logging

from src.extract.utils import optional_id, parse_timestamp
from src.models.events import FaceoffRecord, GoalRecord, ShotRecord
from src.models.game import Game, Period
from src.models.player import Player
from src.models.team import Team
from src.transform.clean import clean_label, normalize_direction, to_bool, to_float, to_int

logger = logging.getLogger(__name__)


def parse_team(team_response: dict) -> Team:
    """Parse /teams/{teamId} response into a Team."""
    t = team_response.get("team", team_response)
    return Team(
        team_id=str(t["id"]),
        name=clean_label(t.get("name")) or "",
        description=t.get("description"),
    )


def parse_games(games_response: dict, team_id: str | None = None) -> list[Game]:
    """Parse /games/teams/{teamId} response into Game dataclasses.

    Args:
        games_response: Raw JSON from the team games endpoint.
        team_id: Team to assign when the payload omits teamId.

    Returns:
        List of Game dataclass instances, in response order.
    """
    games: list[Game] = []
    for g in games_response.get("games", []):
        games.append(
            Game(
                game_id=str(g["id"]),
                team_id=str(g.get("teamId") or team_id or ""),
                opponent=clean_label(g.get("opponent")),
                location=clean_label(g.get("location")),
                start_time=parse_timestamp(g.get("startTime")),
                created_at=parse_timestamp(g.get("createdAt")),
            )
        )

    logger.info("Parsed %d games", len(games))
    return games


def parse_periods(game_payload: dict) -> list[Period]:
    """Parse the periods nested in a game payload."""
    game_id = str(game_payload.get("id", ""))
    periods: list[Period] = []
    for p in game_payload.get("periods", []):
        periods.append(
            Period(
                period_id=str(p.get("id", "")),
                game_id=str(p.get("gameId") or game_id),
                period_number=to_int(p.get("periodNumber")),
                attacking_direction=normalize_direction(p.get("attackingDirection")) or "right",
            )
        )
    return periods


def parse_players(players_response: dict) -> list[Player]:
    """Parse /players/teams/{teamId} response into Player dataclasses."""
    players: list[Player] = []
    for p in players_response.get("players", []):
        number = p.get("number")
        players.append(
            Player(
                player_id=str(p["id"]),
                team_id=str(p.get("teamId", "")),
                name=clean_label(p.get("name")) or "",
                number=int(number) if number is not None else None,
            )
        )

    logger.info("Parsed %d players", len(players))
    return players


def parse_shots(shots_response: dict, game: Game | None = None) -> list[ShotRecord]:
    """Parse /shots/games/{gameId} response into ShotRecords.

    The shots endpoint nests the period but not the game, so the opponent
    and start time come from ``game`` when it's supplied.

    Args:
        shots_response: Raw JSON from the game shots endpoint.
        game: The game the shots belong to.

    Returns:
        List of ShotRecord instances, in response order.
    """
    shots: list[ShotRecord] = []
    for s in shots_response.get("shots", []):
        period = s.get("period") or {}
        shots.append(
            ShotRecord(
                id=str(s["id"]),
                game_id=str(s.get("gameId") or (game.game_id if game else "")),
                period_number=to_int(period.get("periodNumber", s.get("periodNumber"))),
                player_id=optional_id(s.get("shooterPlayerId")),
                scored=to_bool(s.get("scored")),
                scored_against=to_bool(s.get("scoredAgainst")),
                taken_at=parse_timestamp(s.get("takenAt")),
                opponent=game.opponent if game else None,
                attacking_direction=normalize_direction(period.get("attackingDirection")),
                x_coord=to_float(s.get("xCoord")),
                y_coord=to_float(s.get("yCoord")),
                game_started_at=game.start_time if game else None,
            )
        )

    logger.info("Parsed %d shots", len(shots))
    return shots


def parse_goals(goals_response: dict, game_id: str | None = None) -> list[GoalRecord]:
    """Parse /goals/games/{gameId} response into GoalRecords."""
    goals: list[GoalRecord] = []
    for g in goals_response.get("goals", []):
        goals.append(
            GoalRecord(
                id=str(g["id"]),
                game_id=str(g.get("gameId") or game_id or ""),
                scorer_player_id=str(g["scorerPlayerId"]),
                period_number=to_int(g.get("period")),
                assister1_player_id=optional_id(g.get("assister1PlayerId")),
                assister2_player_id=optional_id(g.get("assister2PlayerId")),
            )
        )

    logger.info("Parsed %d goals", len(goals))
    return goals


def parse_faceoffs(
    faceoffs_response: dict,
    game_id: str | None = None,
) -> list[FaceoffRecord]:
    """Parse /faceoffs/games/{gameId} response into FaceoffRecords."""
    faceoffs: list[FaceoffRecord] = []
    for f in faceoffs_response.get("faceoffs", []):
        faceoffs.append(
            FaceoffRecord(
                player_id=str(f["playerId"]),
                taken=to_int(f.get("taken")),
                won=to_int(f.get("won")),
                game_id=optional_id(f.get("gameId")) or game_id,
            )
        )

    logger.info("Parsed %d faceoff rows", len(faceoffs))
    return faceoffs
