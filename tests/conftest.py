"""Test configuration and fixtures."""

from datetime import date
from uuid import uuid4

import pytest

from playtrack.config import AuthSettings
from playtrack.domain.model import User
from playtrack.domain.value import RecentlyPlayedGame, SteamId, UserId


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with the cheapest bcrypt work factor."""
    return AuthSettings(jwt_secret="test-secret", bcrypt_rounds=4)


def make_local_user(email: str = "alice@example.com", **overrides) -> User:
    """Build a local (email/password) user."""
    fields = {
        "id": UserId(uuid4()),
        "username": "alice",
        "email": email,
        "birthday": date(1990, 4, 1),
        "password_hash": "$2b$04$notarealhashnotarealhashnotarealhashnotarealhas",
    }
    fields.update(overrides)
    return User(**fields)


def make_steam_user(steam_id: str = "76561197960287930", **overrides) -> User:
    """Build a Steam user."""
    fields = {
        "id": UserId(uuid4()),
        "username": "gabe",
        "steam_id": SteamId(steam_id),
        "password_hash": "$2b$04$notarealhashnotarealhashnotarealhashnotarealhas",
        "profile_url": "https://steamcommunity.com/id/gabe/",
        "avatar_url": "https://avatars.steamstatic.com/gabe_full.jpg",
    }
    fields.update(overrides)
    return User(**fields)


def make_game(appid: int, name: str = "Game", **overrides) -> RecentlyPlayedGame:
    """Build a GetRecentlyPlayedGames entry."""
    fields = {
        "appid": appid,
        "name": name,
        "playtime_2weeks": 90,
        "playtime_forever": 1200,
        "img_icon_url": f"icon{appid}",
        "img_logo_url": f"logo{appid}",
    }
    fields.update(overrides)
    return RecentlyPlayedGame(**fields)
