"""Source selector for loading tracker data."""

import os

from src.models.team import TeamData

SOURCES = ("postgres", "api")


def get_source(source: str | None = None) -> str:
    """Return the data source to read from.

    Args:
        source: 'postgres' or 'api'. Falls back to the STATS_SOURCE env var,
                then defaults to 'postgres'.

    Raises:
        ValueError: If the source isn't one of SOURCES.
    """
    if source is None:
        source = os.environ.get("STATS_SOURCE", "postgres")
    source = source.lower()
    if source not in SOURCES:
        raise ValueError(f"Unknown stats source {source!r}, expected one of {SOURCES}")
    return source


def load_team_data(team_id: str, source: str | None = None) -> TeamData:
    """Load a team's games, roster and events from the configured source."""
    if get_source(source) == "api":
        from src.extract.tracker_api import TrackerAPIClient

        with TrackerAPIClient() as client:
            return client.load_team_data(team_id)

    from src.load import postgres

    engine = postgres.get_engine()
    try:
        return postgres.load_team_data(engine, team_id)
    finally:
        engine.dispose()
