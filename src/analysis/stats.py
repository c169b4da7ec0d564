"""Shot, goal and faceoff aggregation for the tracker.

Every function here is a pure fold over a flat list of already-joined facts:
nothing is looked up, cached or mutated. Callers load and validate the rows
first (see src.load / src.extract and src.transform.validate) and format the
results afterwards (see src.dashboard.format).

Percentages are stored with two decimals using half-up rounding (ties away
from zero), so 1 goal on 3 shots is 33.33 and 33.335 becomes 33.34. Display
rounding is a presentation concern and happens elsewhere.

Team vs opponent split:
    A shot with scored_against=False is ours, scored_against=True is theirs.
    scored and scored_against are independent flags; a shot marked both is
    counted as an opponent goal.
"""

from collections.abc import Iterable, Mapping, Sequence
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.models.events import FaceoffRecord, GoalRecord, ShotRecord
from src.models.game import Game
from src.models.stats import (
    FaceoffSummary,
    GameBreakdown,
    GameGoals,
    PeriodBreakdown,
    PlayerLine,
    PlayerSummary,
    RecentGame,
    ShotPoint,
    TeamOverview,
)

PERIOD_NUMBERS = (1, 2, 3)
DEFAULT_ATTACKING_DIRECTION = "right"
RECENT_GAMES_LIMIT = 10

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to two decimal places, ties away from zero.

    Examples:
        >>> round_half_up(100 / 3)
        33.33
        >>> round_half_up(33.335)
        33.34
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(str(value))
    # Quantizing needs every integer digit plus two decimals in the context
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        return float(exact.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> float:
    """part / whole as a rounded percentage, 0 when whole is 0."""
    if whole > 0:
        return round_half_up(part / whole * 100)
    return 0.0


def compute_player_stats(
    shots: Sequence[ShotRecord],
    player_id: str | None = None,
) -> PlayerSummary:
    """Summarize one player's shots.

    Args:
        shots: Every shot attributed to the player, in any order.
        player_id: Player the summary is for. Defaults to the first
            attributed shooter in ``shots``.

    Returns:
        PlayerSummary with totals, shooting percentage, and goals broken
        down by period and by game (games in first-seen order).
    """
    if player_id is None:
        player_id = next((s.player_id for s in shots if s.player_id is not None), None)

    goals_by_period: dict[int, int] = {}
    goals_by_game: dict[str, GameGoals] = {}
    goals = 0

    for shot in shots:
        if not shot.scored:
            continue
        goals += 1
        goals_by_period[shot.period_number] = goals_by_period.get(shot.period_number, 0) + 1
        if shot.game_id not in goals_by_game:
            goals_by_game[shot.game_id] = GameGoals(game_id=shot.game_id, opponent=shot.opponent)
        goals_by_game[shot.game_id].goals += 1

    total_shots = len(shots)
    return PlayerSummary(
        player_id=player_id,
        total_shots=total_shots,
        goals=goals,
        shooting_percentage=percentage(goals, total_shots),
        goals_by_period=goals_by_period,
        goals_by_game=list(goals_by_game.values()),
    )


def compute_team_overview(shots: Iterable[ShotRecord]) -> TeamOverview:
    """Split shots into ours and theirs and total them up."""
    team_shots = team_goals = opponent_shots = opponent_goals = 0

    for shot in shots:
        if shot.is_team_shot:
            team_shots += 1
            if shot.is_team_goal:
                team_goals += 1
        else:
            opponent_shots += 1
            if shot.is_opponent_goal:
                opponent_goals += 1

    return TeamOverview(
        team_shots=team_shots,
        team_goals=team_goals,
        opponent_shots=opponent_shots,
        opponent_goals=opponent_goals,
        goal_difference=team_goals - opponent_goals,
        shooting_percentage=percentage(team_goals, team_shots),
    )


def compute_faceoff_stats(faceoffs: Iterable[FaceoffRecord]) -> FaceoffSummary:
    """Sum taken/won across faceoff rows and compute the win rate."""
    taken = 0
    won = 0
    for faceoff in faceoffs:
        taken += faceoff.taken
        won += faceoff.won
    return FaceoffSummary(taken=taken, won=won, percentage=percentage(won, taken))


def compute_period_breakdown(
    shots: Sequence[ShotRecord],
    periods: Iterable[int] = PERIOD_NUMBERS,
    directions: Mapping[int, str] | None = None,
) -> list[PeriodBreakdown]:
    """Team overview for each period.

    Args:
        shots: Shots across one or more games.
        periods: Period numbers to report, in output order.
        directions: Known attacking direction per period number. Periods not
            listed take the direction of their first shot, or "right".
    """
    breakdowns: list[PeriodBreakdown] = []
    for period_number in periods:
        period_shots = [s for s in shots if s.period_number == period_number]

        direction = (directions or {}).get(period_number)
        if direction is None:
            direction = next(
                (s.attacking_direction for s in period_shots if s.attacking_direction),
                DEFAULT_ATTACKING_DIRECTION,
            )

        breakdowns.append(
            PeriodBreakdown(
                period_number=period_number,
                attacking_direction=direction,
                overview=compute_team_overview(period_shots),
            )
        )
    return breakdowns


def compute_game_breakdowns(
    shots: Sequence[ShotRecord],
    games: Sequence[Game] | None = None,
) -> list[GameBreakdown]:
    """Team overview for each game.

    When ``games`` is given the output follows its order and includes games
    without any shots. Otherwise games appear in first-seen shot order.
    """
    by_game: dict[str, list[ShotRecord]] = {}
    for shot in shots:
        by_game.setdefault(shot.game_id, []).append(shot)

    if games is None:
        game_ids = list(by_game)
        opponents = {gid: by_game[gid][0].opponent for gid in game_ids}
    else:
        game_ids = [g.game_id for g in games]
        opponents = {g.game_id: g.opponent for g in games}

    return [
        GameBreakdown(
            game_id=game_id,
            opponent=opponents.get(game_id),
            overview=compute_team_overview(by_game.get(game_id, [])),
        )
        for game_id in game_ids
    ]


def compute_recent_performance(
    shots: Sequence[ShotRecord],
    limit: int = RECENT_GAMES_LIMIT,
) -> list[RecentGame]:
    """Per-game lines for a player's most recent games.

    ``shots`` should be ordered newest first; the first ``limit`` distinct
    games encountered are reported.
    """
    by_game: dict[str, list[ShotRecord]] = {}
    for shot in shots:
        by_game.setdefault(shot.game_id, []).append(shot)

    recent: list[RecentGame] = []
    for game_id, game_shots in list(by_game.items())[:limit]:
        goals = sum(1 for s in game_shots if s.scored)
        recent.append(
            RecentGame(
                game_id=game_id,
                opponent=game_shots[0].opponent,
                shots=len(game_shots),
                goals=goals,
                shooting_percentage=percentage(goals, len(game_shots)),
            )
        )
    return recent


def compute_player_lines(
    shots: Iterable[ShotRecord],
    goals: Iterable[GoalRecord],
    faceoffs: Iterable[FaceoffRecord],
    player_ids: Iterable[str],
) -> list[PlayerLine]:
    """Build one stat-sheet line per player, best goal scorers first.

    Goals can be entered twice: as scored shots and through the goals tracker.
    The larger of the two counts is used. Every requested player gets a line,
    including players with no recorded events.
    """
    lines: dict[str, PlayerLine] = {pid: PlayerLine(player_id=pid) for pid in player_ids}
    goals_from_shots: dict[str, int] = {}
    goals_from_tracker: dict[str, int] = {}

    for shot in shots:
        if shot.player_id not in lines:
            continue
        lines[shot.player_id].shots += 1
        if shot.scored:
            goals_from_shots[shot.player_id] = goals_from_shots.get(shot.player_id, 0) + 1

    for goal in goals:
        if goal.scorer_player_id in lines:
            scorer = goal.scorer_player_id
            goals_from_tracker[scorer] = goals_from_tracker.get(scorer, 0) + 1
        for assister in goal.assister_ids:
            if assister in lines:
                lines[assister].assists += 1

    for faceoff in faceoffs:
        if faceoff.player_id in lines:
            lines[faceoff.player_id].faceoffs_taken += faceoff.taken
            lines[faceoff.player_id].faceoffs_won += faceoff.won

    for pid, line in lines.items():
        line.goals = max(goals_from_shots.get(pid, 0), goals_from_tracker.get(pid, 0))
        line.shooting_percentage = percentage(line.goals, line.shots)
        line.faceoff_percentage = percentage(line.faceoffs_won, line.faceoffs_taken)

    return sorted(lines.values(), key=lambda line: line.goals, reverse=True)


def rank_players(summaries: Iterable[PlayerSummary]) -> list[PlayerSummary]:
    """Order player summaries by goals, most first. Ties keep input order."""
    return sorted(summaries, key=lambda s: s.goals, reverse=True)


def compute_shot_timeline(shots: Iterable[ShotRecord]) -> list[ShotPoint]:
    """Every shot as a rink point, oldest first.

    Shots without a timestamp keep their input order and go last. A shot
    with no known attacking direction is drawn as attacking right.
    """
    points = [
        ShotPoint(
            shot_id=shot.id,
            period_number=shot.period_number,
            x_coord=shot.x_coord,
            y_coord=shot.y_coord,
            scored=shot.scored,
            scored_against=shot.scored_against,
            player_id=shot.player_id,
            attacking_direction=shot.attacking_direction or DEFAULT_ATTACKING_DIRECTION,
            taken_at=shot.taken_at,
        )
        for shot in shots
    ]
    return sorted(points, key=lambda p: (p.taken_at is None, p.taken_at.timestamp() if p.taken_at else 0.0))
