"""Assemble team, game and player reports from loaded tracker data.

These are the three analytics views the tracker exposes. Each one is a
composition of the pure aggregations in src.analysis.stats.
"""

from src.analysis.stats import (
    compute_faceoff_stats,
    compute_game_breakdowns,
    compute_period_breakdown,
    compute_player_lines,
    compute_player_stats,
    compute_recent_performance,
    compute_shot_timeline,
    compute_team_overview,
    rank_players,
)
from src.models.stats import GameReport, PlayerReport, TeamReport
from src.models.team import TeamData
from src.transform.scope import for_game, for_player, group_by_player


def build_team_report(data: TeamData) -> TeamReport:
    """Season view: overview, every player, every game, and each period."""
    player_ids = [p.player_id for p in data.players]
    by_player = group_by_player(data.shots)
    summaries = [
        compute_player_stats(by_player.get(pid, []), player_id=pid)
        for pid in player_ids
    ]

    # Newest game first, matching the tracker's game list
    games = sorted(
        data.games,
        key=lambda g: g.created_at.timestamp() if g.created_at else float("-inf"),
        reverse=True,
    )

    return TeamReport(
        team_id=data.team.team_id,
        team_name=data.team.name,
        total_games=len(data.games),
        overview=compute_team_overview(data.shots),
        faceoffs=compute_faceoff_stats(data.faceoffs),
        players=rank_players(summaries),
        player_lines=compute_player_lines(data.shots, data.goals, data.faceoffs, player_ids),
        games=compute_game_breakdowns(data.shots, games),
        periods=compute_period_breakdown(data.shots),
        shot_timeline=compute_shot_timeline(data.shots),
    )


def build_game_report(data: TeamData, game_id: str) -> GameReport:
    """Single-game view with per-period splits and the game's stat sheet.

    Raises:
        LookupError: If the game isn't part of ``data``.
    """
    game = data.game_by_id(game_id)
    if game is None:
        raise LookupError(f"Game {game_id} not found for team {data.team.name}")

    shots = for_game(data.shots, game_id)
    directions = data.directions_for(game_id)
    periods = sorted(directions) if directions else None

    return GameReport(
        game_id=game_id,
        opponent=game.opponent,
        overview=compute_team_overview(shots),
        periods=(
            compute_period_breakdown(shots, periods, directions)
            if periods
            else compute_period_breakdown(shots)
        ),
        player_lines=compute_player_lines(
            shots,
            for_game(data.goals, game_id),
            for_game(data.faceoffs, game_id),
            [p.player_id for p in data.players],
        ),
        shot_timeline=compute_shot_timeline(shots),
    )


def build_player_report(data: TeamData, player_id: str) -> PlayerReport:
    """Single-player view: totals, splits, faceoffs and recent form."""
    shots = for_player(data.shots, player_id)
    newest_first = sorted(
        shots,
        key=lambda s: s.taken_at.timestamp() if s.taken_at else float("-inf"),
        reverse=True,
    )
    return PlayerReport(
        summary=compute_player_stats(shots, player_id=player_id),
        faceoffs=compute_faceoff_stats(f for f in data.faceoffs if f.player_id == player_id),
        recent_games=compute_recent_performance(newest_first),
        shot_timeline=compute_shot_timeline(shots),
    )
