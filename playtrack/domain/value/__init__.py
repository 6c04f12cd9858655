"""Domain value objects for Playtrack."""

from playtrack.domain.value.identifiers import AppId, SessionId, UserId
from playtrack.domain.value.types import (
    RecentlyPlayedGame,
    RecentlyPlayedGames,
    SteamId,
    SteamProfile,
    parse_steam_id,
)

__all__ = [
    # Identifiers
    "AppId",
    "SessionId",
    "UserId",
    # Types
    "RecentlyPlayedGame",
    "RecentlyPlayedGames",
    "SteamId",
    "SteamProfile",
    "parse_steam_id",
]
