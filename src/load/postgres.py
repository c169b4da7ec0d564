"""PostgreSQL reader for the tracker database.

Reads the tables the tracker backend writes and returns dataclasses with the
game and period context already joined in. Nothing here writes to the
database.
"""

import logging
import os
from datetime import datetime

import pandas as pd
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from src.extract.utils import optional_id, parse_timestamp
from src.models.events import FaceoffRecord, GoalRecord, ShotRecord
from src.models.game import Game, Period
from src.models.player import Player
from src.models.team import Team, TeamData
from src.transform.clean import clean_label, normalize_direction, to_bool, to_float, to_int

logger = logging.getLogger(__name__)

# Tracker table names (quoted: the tracker's ORM keeps model casing)
TABLES: dict[str, str] = {
    "team": '"Team"',
    "game": '"Game"',
    "period": '"Period"',
    "player": '"Player"',
    "shot": '"Shot"',
    "goal": '"Goal"',
    "faceoff": '"Faceoff"',
}


def _build_connection_string() -> str:
    """Build a PostgreSQL connection string from environment variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host = os.getenv("POSTGRES_HOST", "localhost")
    port = os.getenv("POSTGRES_PORT", "5432")
    db = os.getenv("POSTGRES_DB", "hockey")
    user = os.getenv("POSTGRES_USER", "hockey")
    password = os.getenv("POSTGRES_PASSWORD", "hockey")
    return f"postgresql://{user}:{password}@{host}:{port}/{db}"


def get_engine(connection_string: str | None = None) -> Engine:
    """Create a SQLAlchemy engine."""
    return create_engine(connection_string or _build_connection_string())


def _where(filters: dict[str, object]) -> tuple[str, dict[str, object]]:
    """Build a WHERE clause from column -> value, skipping None values."""
    clauses: list[str] = []
    params: dict[str, object] = {}
    for i, (column, value) in enumerate(filters.items()):
        if value is None:
            continue
        clauses.append(f"{column} = :p{i}")
        params[f"p{i}"] = value
    if not clauses:
        return "", params
    return " WHERE " + " AND ".join(clauses), params


def _read(engine: Engine, sql: str, params: dict[str, object]) -> list[dict]:
    df = pd.read_sql(text(sql), engine, params=params)
    # Convert NaN to None so optional fields come through as missing
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def _to_datetime(value: object) -> datetime | None:
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    return parse_timestamp(value)


def load_team(engine: Engine, team_id: str) -> Team | None:
    """Load a single team, or None if it doesn't exist."""
    where, params = _where({"t.id": team_id})
    rows = _read(engine, f"SELECT t.id, t.name, t.description FROM {TABLES['team']} t{where}", params)
    if not rows:
        return None
    row = rows[0]
    return Team(team_id=str(row["id"]), name=clean_label(row["name"]) or "", description=row["description"])


def load_games(engine: Engine, team_id: str) -> list[Game]:
    """Load a team's games, newest first."""
    where, params = _where({"g.\"teamId\"": team_id})
    sql = (
        'SELECT g.id, g."teamId", g.opponent, g.location, g."startTime", g."createdAt" '
        f"FROM {TABLES['game']} g{where} "
        'ORDER BY g."createdAt" DESC'
    )
    games = [
        Game(
            game_id=str(r["id"]),
            team_id=str(r["teamId"]),
            opponent=clean_label(r["opponent"]),
            location=clean_label(r["location"]),
            start_time=_to_datetime(r["startTime"]),
            created_at=_to_datetime(r["createdAt"]),
        )
        for r in _read(engine, sql, params)
    ]
    logger.info("Loaded %d games for team %s", len(games), team_id)
    return games


def load_periods(engine: Engine, team_id: str | None = None, game_id: str | None = None) -> list[Period]:
    """Load periods with their attacking direction."""
    where, params = _where({"g.\"teamId\"": team_id, "p.\"gameId\"": game_id})
    sql = (
        'SELECT p.id, p."gameId", p."periodNumber", p."attackingDirection" '
        f"FROM {TABLES['period']} p "
        f'JOIN {TABLES["game"]} g ON g.id = p."gameId"{where} '
        'ORDER BY p."gameId", p."periodNumber"'
    )
    return [
        Period(
            period_id=str(r["id"]),
            game_id=str(r["gameId"]),
            period_number=to_int(r["periodNumber"]),
            attacking_direction=normalize_direction(r["attackingDirection"]) or "right",
        )
        for r in _read(engine, sql, params)
    ]


def load_players(engine: Engine, team_id: str) -> list[Player]:
    """Load a team's roster, ordered by number then name."""
    where, params = _where({"pl.\"teamId\"": team_id})
    sql = (
        'SELECT pl.id, pl."teamId", pl.name, pl.number '
        f"FROM {TABLES['player']} pl{where} "
        "ORDER BY pl.number, pl.name"
    )
    return [
        Player(
            player_id=str(r["id"]),
            team_id=str(r["teamId"]),
            name=clean_label(r["name"]) or "",
            number=to_int(r["number"]) if r["number"] is not None else None,
        )
        for r in _read(engine, sql, params)
    ]


def load_shots(
    engine: Engine,
    team_id: str | None = None,
    game_id: str | None = None,
    player_id: str | None = None,
) -> list[ShotRecord]:
    """Load shots joined with their game and period, oldest first.

    Args:
        engine: Database engine.
        team_id: Restrict to games of this team.
        game_id: Restrict to one game.
        player_id: Restrict to one shooter.
    """
    where, params = _where({
        "g.\"teamId\"": team_id,
        "s.\"gameId\"": game_id,
        "s.\"shooterPlayerId\"": player_id,
    })
    sql = (
        'SELECT s.id, s."gameId", s."shooterPlayerId", s.scored, s."scoredAgainst", '
        's."takenAt", s."xCoord", s."yCoord", '
        'p."periodNumber", p."attackingDirection", g.opponent, g."startTime" '
        f"FROM {TABLES['shot']} s "
        f'JOIN {TABLES["period"]} p ON p.id = s."periodId" '
        f'JOIN {TABLES["game"]} g ON g.id = s."gameId"{where} '
        'ORDER BY s."takenAt"'
    )
    shots = [
        ShotRecord(
            id=str(r["id"]),
            game_id=str(r["gameId"]),
            period_number=to_int(r["periodNumber"]),
            player_id=optional_id(r["shooterPlayerId"]),
            scored=to_bool(r["scored"]),
            scored_against=to_bool(r["scoredAgainst"]),
            taken_at=_to_datetime(r["takenAt"]),
            opponent=clean_label(r["opponent"]),
            attacking_direction=normalize_direction(r["attackingDirection"]),
            x_coord=to_float(r["xCoord"]),
            y_coord=to_float(r["yCoord"]),
            game_started_at=_to_datetime(r["startTime"]),
        )
        for r in _read(engine, sql, params)
    ]
    logger.info("Loaded %d shots", len(shots))
    return shots


def load_goals(
    engine: Engine,
    team_id: str | None = None,
    game_id: str | None = None,
) -> list[GoalRecord]:
    """Load goals from the goals & assists tracker."""
    where, params = _where({"g.\"teamId\"": team_id, "gl.\"gameId\"": game_id})
    sql = (
        'SELECT gl.id, gl."gameId", gl."scorerPlayerId", gl."assister1PlayerId", '
        'gl."assister2PlayerId", gl.period '
        f"FROM {TABLES['goal']} gl "
        f'JOIN {TABLES["game"]} g ON g.id = gl."gameId"{where}'
    )
    return [
        GoalRecord(
            id=str(r["id"]),
            game_id=str(r["gameId"]),
            scorer_player_id=str(r["scorerPlayerId"]),
            period_number=to_int(r["period"]),
            assister1_player_id=optional_id(r["assister1PlayerId"]),
            assister2_player_id=optional_id(r["assister2PlayerId"]),
        )
        for r in _read(engine, sql, params)
    ]


def load_faceoffs(
    engine: Engine,
    team_id: str | None = None,
    game_id: str | None = None,
) -> list[FaceoffRecord]:
    """Load per-player faceoff counts."""
    where, params = _where({"g.\"teamId\"": team_id, "f.\"gameId\"": game_id})
    sql = (
        'SELECT f."playerId", f."gameId", f.taken, f.won '
        f"FROM {TABLES['faceoff']} f "
        f'JOIN {TABLES["game"]} g ON g.id = f."gameId"{where}'
    )
    return [
        FaceoffRecord(
            player_id=str(r["playerId"]),
            taken=to_int(r["taken"]),
            won=to_int(r["won"]),
            game_id=optional_id(r["gameId"]),
        )
        for r in _read(engine, sql, params)
    ]


def load_team_data(engine: Engine, team_id: str) -> TeamData:
    """Load everything the aggregator needs for one team.

    Raises:
        LookupError: If the team doesn't exist.
    """
    team = load_team(engine, team_id)
    if team is None:
        raise LookupError(f"Team {team_id} not found")

    data = TeamData(
        team=team,
        games=load_games(engine, team_id),
        periods=load_periods(engine, team_id=team_id),
        players=load_players(engine, team_id),
        shots=load_shots(engine, team_id=team_id),
        goals=load_goals(engine, team_id=team_id),
        faceoffs=load_faceoffs(engine, team_id=team_id),
    )
    logger.info(
        "Loaded %s from Postgres: %d games, %d shots",
        team.name,
        len(data.games),
        len(data.shots),
    )
    return data
