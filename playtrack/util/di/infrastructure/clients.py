"""Binds the domain's Steam ports to the configured Steam clients."""

from dishka import Scope, provide

from playtrack.adapter.steam import SteamOpenIDClient, SteamWebApiClient
from playtrack.domain.service import ActivityClient, OpenIDClient
from playtrack.util.di.base import ProviderBase


class SteamClientBindingProvider(ProviderBase):
    """Exposes whichever Steam clients are active (real or mock) to the domain."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_openid_client(self, client: SteamOpenIDClient) -> OpenIDClient:
        """Provide the OpenID port."""
        return client

    @provide(scope=Scope.APP)
    def get_activity_client(self, client: SteamWebApiClient) -> ActivityClient:
        """Provide the recently-played port."""
        return client
