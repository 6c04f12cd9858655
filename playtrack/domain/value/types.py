"""Domain value objects for Playtrack.

Value objects are immutable and defined by their values, not identity.
"""

import re

from pydantic import field_validator

from playtrack.domain.error import ValidationError
from playtrack.domain.value.common import RootValueObject, ValueObject


class SteamId(RootValueObject[str]):
    """64-bit Steam account id, kept in its decimal string form."""

    @field_validator("root")
    @classmethod
    def validate_steam_id(cls, v: str) -> str:
        """Validate the id is a decimal number."""
        if not re.fullmatch(r"\d{1,20}", v):
            raise ValueError("Steam ID must be 1-20 decimal digits")
        return v


class SteamProfile(ValueObject):
    """Identity claims returned by a verified Steam OpenID handshake.

    Fields mirror GetPlayerSummaries; Steam may omit any of them, so the
    caller decides which are mandatory.
    """

    steam_id: str | None = None
    persona_name: str | None = None
    profile_url: str | None = None
    avatar_url: str | None = None
    game_now_playing: str | None = None


class RecentlyPlayedGame(ValueObject):
    """A single entry of GetRecentlyPlayedGames."""

    appid: int
    name: str
    playtime_2weeks: int | None = None
    playtime_forever: int
    img_icon_url: str | None = None
    img_logo_url: str | None = None


class RecentlyPlayedGames(ValueObject):
    """GetRecentlyPlayedGames response body.

    Steam omits ``games`` entirely for private or inactive profiles.
    """

    total_count: int = 0
    games: list[RecentlyPlayedGame] | None = None


def parse_steam_id(value: str | int | None) -> SteamId:
    """Parse caller-supplied input into a SteamId.

    Raises:
        ValidationError: If the value is absent or not a Steam ID
    """
    if not value:
        raise ValidationError("Steam ID is required")
    try:
        return SteamId(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid Steam ID: {value}")
