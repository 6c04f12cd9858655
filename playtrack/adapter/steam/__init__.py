"""Steam OpenID and Web API adapter."""

from .openid import MockSteamOpenIDClient, RealSteamOpenIDClient, SteamOpenIDClient
from .web_api import MockSteamWebApiClient, RealSteamWebApiClient, SteamWebApiClient

__all__ = [
    "MockSteamOpenIDClient",
    "MockSteamWebApiClient",
    "RealSteamOpenIDClient",
    "RealSteamWebApiClient",
    "SteamOpenIDClient",
    "SteamWebApiClient",
]
