"""Report runner. Ties together load, transform and aggregation stages.

Examples:
    python -m src.pipeline.run --team TEAM_ID
    python -m src.pipeline.run --team TEAM_ID --game GAME_ID --csv game.csv
    python -m src.pipeline.run --team TEAM_ID --player PLAYER_ID --json player.json
    python -m src.pipeline.run --team TEAM_ID --start 2026-01-01 --end 2026-02-28 --source api
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from datetime import date
from pathlib import Path

import pandas as pd

from src.analysis.report import build_game_report, build_player_report, build_team_report
from src.dashboard.format import (
    format_goal_difference,
    format_pct,
    overview_rows,
    player_label,
    player_lines_frame,
)
from src.load.base import SOURCES, load_team_data
from src.models.stats import GameReport, PlayerReport, TeamReport
from src.models.team import TeamData
from src.transform.pipeline import prepare_team_data

logger = logging.getLogger(__name__)


def run_report(
    team_id: str,
    game_id: str | None = None,
    player_id: str | None = None,
    start: date | None = None,
    end: date | None = None,
    source: str | None = None,
) -> tuple[TeamData, TeamReport | GameReport | PlayerReport]:
    """Load, validate, scope and aggregate.

    Returns:
        The prepared data and the report for the requested scope: a player
        report if ``player_id`` is given, else a game report if ``game_id``
        is given, else the team report.
    """
    logger.info("Loading team %s", team_id)
    raw = load_team_data(team_id, source=source)

    if player_id is not None:
        data = prepare_team_data(raw, game_id=game_id, start=start, end=end)
        report: TeamReport | GameReport | PlayerReport = build_player_report(data, player_id)
    elif game_id is not None:
        data = prepare_team_data(raw, game_id=game_id, start=start, end=end)
        report = build_game_report(data, game_id)
    else:
        data = prepare_team_data(raw, start=start, end=end)
        report = build_team_report(data)

    logger.info("Built %s for %s", type(report).__name__, data.team.name)
    return data, report


def render_text(data: TeamData, report: TeamReport | GameReport | PlayerReport) -> str:
    """Plain-text summary of a report for the terminal."""
    lines: list[str] = [data.team.name, ""]

    if isinstance(report, PlayerReport):
        s = report.summary
        lines.append(player_label(data.player_by_id(s.player_id or ""), fallback=s.player_id or ""))
        lines.append(f"Shots: {s.total_shots}  Goals: {s.goals}  Shooting: {format_pct(s.shooting_percentage)}")
        lines.append(
            f"Faceoffs: {report.faceoffs.won}/{report.faceoffs.taken} "
            f"({format_pct(report.faceoffs.percentage)})"
        )
        if s.goals_by_period:
            periods = ", ".join(f"P{k}: {v}" for k, v in sorted(s.goals_by_period.items()))
            lines.append(f"Goals by period: {periods}")
        for g in s.goals_by_game:
            lines.append(f"  vs {g.opponent or 'Game'}: {g.goals}")
        return "\n".join(lines)

    for label, value in overview_rows(report.overview):
        lines.append(f"{label}: {value}")

    lines.append("")
    lines.append("PERIODS")
    for p in report.periods:
        o = p.overview
        lines.append(
            f"P{p.period_number} ({p.attacking_direction}): "
            f"{o.team_goals}-{o.opponent_goals} goals, {o.team_shots}-{o.opponent_shots} shots"
        )

    if isinstance(report, TeamReport) and report.games:
        lines.append("")
        lines.append("GAMES")
        for g in report.games:
            o = g.overview
            lines.append(
                f"vs {g.opponent or 'Game'}: {o.team_goals}-{o.opponent_goals} "
                f"({format_goal_difference(o.goal_difference)})"
            )

    lines.append("")
    lines.append("PLAYERS")
    for line in report.player_lines:
        label = player_label(data.player_by_id(line.player_id), fallback=line.player_id)
        lines.append(
            f"{label}: Shots: {line.shots}, Goals: {line.goals}, Assists: {line.assists}, "
            f"FO: {line.faceoffs_won}/{line.faceoffs_taken} ({format_pct(line.faceoff_percentage)})"
        )
    return "\n".join(lines)


def write_csv(data: TeamData, report: TeamReport | GameReport | PlayerReport, path: Path) -> int:
    """Write the report's stat sheet to CSV. Returns the number of rows written."""
    if isinstance(report, PlayerReport):
        df = pd.DataFrame([asdict(g) for g in report.recent_games])
    else:
        df = player_lines_frame(report.player_lines, data.players)

    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("Wrote %d rows to %s", len(df), path)
    return len(df)


def write_json(report: TeamReport | GameReport | PlayerReport, path: Path) -> None:
    """Write the full report as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(report), indent=2, default=str))
    logger.info("Wrote report to %s", path)


def main(argv: list[str] | None = None) -> None:
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Hockey shot tracker stats")
    parser.add_argument("--team", required=True, help="Team ID to report on.")
    parser.add_argument("--game", help="Restrict to a single game ID.")
    parser.add_argument("--player", help="Report on a single player ID.")
    parser.add_argument(
        "--start",
        type=date.fromisoformat,
        help="Earliest game date to include (YYYY-MM-DD).",
    )
    parser.add_argument(
        "--end",
        type=date.fromisoformat,
        help="Latest game date to include (YYYY-MM-DD).",
    )
    parser.add_argument(
        "--source",
        choices=SOURCES,
        default=None,
        help="Where to read tracker data from (default: STATS_SOURCE or postgres).",
    )
    parser.add_argument("--csv", type=Path, help="Write the stat sheet to this CSV file.")
    parser.add_argument("--json", type=Path, help="Write the full report to this JSON file.")
    args = parser.parse_args(argv)

    data, report = run_report(
        args.team,
        game_id=args.game,
        player_id=args.player,
        start=args.start,
        end=args.end,
        source=args.source,
    )

    print(render_text(data, report))

    if args.csv:
        write_csv(data, report, args.csv)
    if args.json:
        write_json(report, args.json)


if __name__ == "__main__":
    main()
