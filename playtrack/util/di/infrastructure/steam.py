"""Steam infrastructure providers."""

from dishka import Scope, provide

from playtrack.adapter.steam import (
    RealSteamOpenIDClient,
    RealSteamWebApiClient,
    SteamOpenIDClient,
    SteamWebApiClient,
)
from playtrack.config import Settings
from playtrack.util.di.base import ProviderBase
from playtrack.util.error import ConfigurationError
from playtrack.util.observability import instrument_httpx

_PLACEHOLDER_API_KEY = "CHANGE_ME_IN_PRODUCTION"


class SteamProvider(ProviderBase):
    """Steam component base."""

    __mock_component__ = "steam"


class ProdSteamProvider(SteamProvider):
    """Production Steam provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_steam_web_api_client(self, settings: Settings) -> SteamWebApiClient:
        """Provide Steam Web API client.

        Raises:
            ConfigurationError: If no Web API key is configured in production
        """
        if (
            settings.environment == "production"
            and settings.steam.api_key == _PLACEHOLDER_API_KEY
        ):
            raise ConfigurationError("STEAM__API_KEY must be set in production")

        instrument_httpx()
        return RealSteamWebApiClient(
            api_key=settings.steam.api_key,
            base_url=settings.steam.web_api_url,
            timeout=settings.steam.request_timeout,
        )

    @provide(scope=Scope.APP)
    def get_steam_openid_client(
        self, settings: Settings, web_api: SteamWebApiClient
    ) -> SteamOpenIDClient:
        """Provide Steam OpenID client.

        Realm and return URL are derived from the API base URL.
        """
        return RealSteamOpenIDClient(
            realm=settings.steam.realm,
            return_url=settings.steam.return_url,
            discovery_url=settings.steam.openid_discovery_url,
            web_api=web_api,
            timeout=settings.steam.request_timeout,
        )
