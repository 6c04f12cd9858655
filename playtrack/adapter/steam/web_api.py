"""Steam Web API client.

Covers the two endpoints Playtrack reads:
- ISteamUser/GetPlayerSummaries (profile claims after sign-in)
- IPlayerService/GetRecentlyPlayedGames (activity refresh)
"""

from typing import Any

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from playtrack.adapter.error import SteamResponseError
from playtrack.domain.error import ProviderUnavailableError
from playtrack.domain.service.activity_service import ActivityClient
from playtrack.domain.value import (
    RecentlyPlayedGame,
    RecentlyPlayedGames,
    SteamId,
    SteamProfile,
)


class SteamWebApiClient(ActivityClient):
    """Base class for Steam Web API clients.

    Provides type distinction for dependency injection.
    """

    async def get_player_summary(self, steam_id: SteamId) -> SteamProfile:
        """Fetch the public profile of a Steam account.

        Args:
            steam_id: Steam account to query

        Returns:
            Profile claims; fields Steam did not return are None

        Raises:
            ProviderUnavailableError: If Steam cannot be reached
        """
        raise NotImplementedError


class RealSteamWebApiClient(SteamWebApiClient):
    """Steam Web API client over HTTPS."""

    def __init__(self, api_key: str, base_url: str, timeout: float = 30.0) -> None:
        """Initialize Steam Web API client.

        Args:
            api_key: Steam Web API key
            base_url: API root, e.g. https://api.steampowered.com
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_player_summary(self, steam_id: SteamId) -> SteamProfile:
        """Fetch the public profile of a Steam account."""
        body = await self._get(
            "/ISteamUser/GetPlayerSummaries/v0002/",
            {"steamids": steam_id.root},
            operation="get_player_summaries",
        )

        players = body.get("response", {}).get("players") or []
        if not players:
            logfire.warn("Steam returned no player summary", steam_id=str(steam_id))
            return SteamProfile()

        player = players[0]
        return SteamProfile(
            steam_id=player.get("steamid"),
            persona_name=player.get("personaname"),
            profile_url=player.get("profileurl"),
            avatar_url=player.get("avatarfull"),
            game_now_playing=player.get("gameextrainfo"),
        )

    async def get_recently_played_games(self, steam_id: SteamId) -> RecentlyPlayedGames:
        """Fetch the recently played games of a Steam account."""
        body = await self._get(
            "/IPlayerService/GetRecentlyPlayedGames/v0001/",
            {"steamid": steam_id.root},
            operation="get_recently_played_games",
        )

        try:
            return RecentlyPlayedGames.model_validate(body.get("response") or {})
        except PydanticValidationError as e:
            logfire.error(
                "Unexpected GetRecentlyPlayedGames payload",
                steam_id=str(steam_id),
                error=str(e),
            )
            raise ProviderUnavailableError("get_recently_played_games") from e

    async def _get(
        self, path: str, params: dict[str, str], operation: str
    ) -> dict[str, Any]:
        """GET a Web API method and return its decoded JSON body.

        Raises:
            ProviderUnavailableError: On transport errors, non-200 answers
                or undecodable bodies
        """
        query = {"key": self.api_key, "format": "json", **params}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}{path}", params=query, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Steam Web API HTTP error", operation=operation, error=str(e))
            raise ProviderUnavailableError(operation) from e

        if response.status_code != 200:
            logfire.error(
                "Steam Web API request failed",
                operation=operation,
                status_code=response.status_code,
                error=response.text[:500],
            )
            raise ProviderUnavailableError(operation)

        try:
            body = response.json()
            if not isinstance(body, dict):
                raise SteamResponseError("Expected a JSON object")
            return body
        except (ValueError, SteamResponseError) as e:
            logfire.error(
                "Steam Web API returned an unreadable body",
                operation=operation,
                error=str(e),
            )
            raise ProviderUnavailableError(operation) from e


class MockSteamWebApiClient(SteamWebApiClient):
    """Mock Steam Web API client for testing.

    Returns deterministic data without network calls. Tests may replace
    ``recently_played`` or ``profiles`` or set ``unavailable``.
    """

    def __init__(self) -> None:
        """Initialize mock client with one tracked and one untracked game."""
        self.recently_played = RecentlyPlayedGames(
            total_count=2,
            games=[
                RecentlyPlayedGame(
                    appid=730,
                    name="Counter-Strike 2",
                    playtime_2weeks=120,
                    playtime_forever=4200,
                    img_icon_url="8dbc71957312bbd3baea65848b545be9eae2a355",
                ),
                RecentlyPlayedGame(
                    appid=12345,
                    name="Untracked Game",
                    playtime_forever=60,
                    img_icon_url="0000000000000000000000000000000000000000",
                ),
            ],
        )
        self.profiles: dict[str, SteamProfile] = {}
        self.unavailable = False

    async def get_player_summary(self, steam_id: SteamId) -> SteamProfile:
        """Return the configured profile, or an empty one."""
        if self.unavailable:
            raise ProviderUnavailableError("get_player_summaries")
        return self.profiles.get(steam_id.root, SteamProfile())

    async def get_recently_played_games(self, steam_id: SteamId) -> RecentlyPlayedGames:
        """Return the configured recently played games."""
        if self.unavailable:
            raise ProviderUnavailableError("get_recently_played_games")
        return self.recently_played
