"""Client for the shot tracker's REST API.

Reads teams, games, players, shots, goals and faceoffs through the same
endpoints the web frontend uses. Every route sits behind bearer-token auth
and a team-membership check, so the token must belong to a member of the
team being read.
"""

import logging
import os
import time

import httpx

from src.extract.parse import (
    parse_faceoffs,
    parse_games,
    parse_goals,
    parse_periods,
    parse_players,
    parse_shots,
    parse_team,
)
from src.models.team import TeamData

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"

# Retry configuration
MAX_RETRIES = 3
RETRY_BACKOFF_SECONDS = 2


class TrackerAPIClient:
    """Client for the tracker backend."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or os.environ.get("TRACKER_API_URL", DEFAULT_BASE_URL)
        self.token = token or os.environ.get("TRACKER_API_TOKEN", "")
        if not self.token:
            raise ValueError(
                "TRACKER_API_TOKEN is required. Log in to the tracker and copy "
                "the access token from the /auth/login response."
            )
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/json",
                "Authorization": f"Bearer {self.token}",
            },
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "TrackerAPIClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _get(self, endpoint: str) -> dict:
        """Make a GET request with retry logic.

        4xx responses (not found, access denied) are raised immediately;
        they won't change on retry.
        """
        last_exception: Exception | None = None

        for attempt in range(MAX_RETRIES):
            try:
                response = self.client.get(endpoint)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                if e.response.status_code < 500:
                    raise
                last_exception = e
            except httpx.TransportError as e:
                last_exception = e

            wait = RETRY_BACKOFF_SECONDS * (2**attempt)
            logger.warning(
                "Request to %s failed (attempt %d/%d): %s. Retrying in %ds.",
                endpoint,
                attempt + 1,
                MAX_RETRIES,
                last_exception,
                wait,
            )
            time.sleep(wait)

        raise last_exception  # type: ignore[misc]

    def get_team(self, team_id: str) -> dict:
        """Get team details."""
        return self._get(f"/teams/{team_id}")

    def get_games(self, team_id: str) -> dict:
        """Get a team's games, newest first, with their periods."""
        return self._get(f"/games/teams/{team_id}")

    def get_players(self, team_id: str) -> dict:
        """Get a team's roster."""
        return self._get(f"/players/teams/{team_id}")

    def get_shots(self, game_id: str) -> dict:
        """Get every shot recorded for a game, oldest first."""
        return self._get(f"/shots/games/{game_id}")

    def get_goals(self, game_id: str) -> dict:
        """Get goals entered through the goals & assists tracker for a game."""
        return self._get(f"/goals/games/{game_id}")

    def get_faceoffs(self, game_id: str) -> dict:
        """Get per-player faceoff counts for a game."""
        return self._get(f"/faceoffs/games/{game_id}")

    def load_team_data(self, team_id: str) -> TeamData:
        """Fetch and parse everything the aggregator needs for one team.

        The API has no team-wide shot endpoint, so shots, goals and faceoffs
        are fetched game by game.
        """
        team = parse_team(self.get_team(team_id))
        games_response = self.get_games(team_id)
        games = parse_games(games_response, team_id=team_id)
        periods = [p for g in games_response.get("games", []) for p in parse_periods(g)]
        players = parse_players(self.get_players(team_id))

        data = TeamData(team=team, games=games, periods=periods, players=players)
        for game in games:
            data.shots.extend(parse_shots(self.get_shots(game.game_id), game))
            data.goals.extend(parse_goals(self.get_goals(game.game_id), game.game_id))
            data.faceoffs.extend(parse_faceoffs(self.get_faceoffs(game.game_id), game.game_id))

        logger.info(
            "Loaded %s from API: %d games, %d shots",
            team.name,
            len(games),
            len(data.shots),
        )
        return data
