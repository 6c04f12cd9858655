"""Steam OpenID 2.0 relying party.

Steam only supports the stateless ("dumb") mode of OpenID 2.0: the user is
sent to Steam with ``checkid_setup``, comes back with a signed positive
assertion, and the assertion is verified by posting it back to Steam with
``check_authentication``. The Steam ID is the trailing number of the
claimed identifier.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from urllib.parse import urlencode

import httpx
import logfire

from playtrack.adapter.steam.web_api import SteamWebApiClient
from playtrack.domain.error import (
    InvalidCredentialsError,
    ProviderUnavailableError,
    ValidationError,
)
from playtrack.domain.service.steam_auth_service import OpenIDClient
from playtrack.domain.value import SteamId, SteamProfile

OPENID_NS = "http://specs.openid.net/auth/2.0"
IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"
CLAIMED_ID_PATTERN = re.compile(r"^https?://steamcommunity\.com/openid/id/(\d+)/?$")


def parse_key_value_form(body: str) -> dict[str, str]:
    """Parse an OpenID key-value form response (``key:value`` per line)."""
    values = {}
    for line in body.splitlines():
        key, sep, value = line.partition(":")
        if sep:
            values[key.strip()] = value.strip()
    return values


def steam_id_from_claimed_id(claimed_id: str) -> str | None:
    """Extract the Steam ID from an OpenID claimed identifier."""
    match = CLAIMED_ID_PATTERN.match(claimed_id)
    return match.group(1) if match else None


class SteamOpenIDClient(OpenIDClient):
    """Base class for Steam OpenID clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealSteamOpenIDClient(SteamOpenIDClient):
    """Steam OpenID client talking to steamcommunity.com."""

    def __init__(
        self,
        realm: str,
        return_url: str,
        discovery_url: str,
        web_api: SteamWebApiClient,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Steam OpenID client.

        Args:
            realm: OpenID realm (our site root)
            return_url: Callback URL Steam redirects back to
            discovery_url: Steam OpenID identifier for XRDS discovery
            web_api: Web API client used to load the signed-in profile
            timeout: Request timeout in seconds
        """
        self.realm = realm
        self.return_url = return_url
        self.discovery_url = discovery_url
        self.web_api = web_api
        self.timeout = timeout

        # Discovered OP endpoint, resolved on first use
        self._endpoint: str | None = None

    async def get_redirect_url(self) -> str:
        """Build the Steam sign-in URL."""
        endpoint = await self._discover_endpoint()

        params = {
            "openid.ns": OPENID_NS,
            "openid.mode": "checkid_setup",
            "openid.return_to": self.return_url,
            "openid.realm": self.realm,
            "openid.identity": IDENTIFIER_SELECT,
            "openid.claimed_id": IDENTIFIER_SELECT,
        }

        logfire.info("Steam OpenID sign-in initiated", return_to=self.return_url)
        return f"{endpoint}?{urlencode(params)}"

    async def authenticate(self, params: Mapping[str, str]) -> SteamProfile:
        """Verify the positive assertion and load the Steam profile."""
        mode = params.get("openid.mode")
        if mode == "cancel":
            raise InvalidCredentialsError("Steam sign-in was cancelled")
        if mode != "id_res":
            raise ValidationError("Missing OpenID assertion")

        if not params.get("openid.return_to", "").startswith(self.return_url):
            logfire.warn(
                "OpenID assertion for a foreign return URL",
                return_to=params.get("openid.return_to"),
            )
            raise InvalidCredentialsError()

        steam_id = steam_id_from_claimed_id(params.get("openid.claimed_id", ""))
        if not steam_id:
            raise InvalidCredentialsError()

        endpoint = await self._discover_endpoint()
        if params.get("openid.op_endpoint") != endpoint:
            logfire.warn(
                "OpenID assertion from an unexpected endpoint",
                op_endpoint=params.get("openid.op_endpoint"),
            )
            raise InvalidCredentialsError()

        await self._check_authentication(endpoint, params)

        profile = await self.web_api.get_player_summary(SteamId(steam_id))

        logfire.info("Steam OpenID sign-in verified", steam_id=steam_id)

        # The verified claimed id is authoritative for the Steam ID
        return profile.model_copy(update={"steam_id": steam_id})

    async def _discover_endpoint(self) -> str:
        """Resolve the OP endpoint from Steam's XRDS document.

        Raises:
            ProviderUnavailableError: If discovery fails
        """
        if self._endpoint:
            return self._endpoint

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.discovery_url,
                    headers={"Accept": "application/xrds+xml"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Steam OpenID discovery HTTP error", error=str(e))
            raise ProviderUnavailableError("openid_discovery") from e

        if response.status_code != 200:
            logfire.error(
                "Steam OpenID discovery failed",
                status_code=response.status_code,
                error=response.text[:500],
            )
            raise ProviderUnavailableError("openid_discovery")

        try:
            document = ET.fromstring(response.content)
        except ET.ParseError as e:
            logfire.error("Steam OpenID discovery returned invalid XRDS", error=str(e))
            raise ProviderUnavailableError("openid_discovery") from e

        for element in document.iter():
            if element.tag.endswith("URI") and element.text:
                self._endpoint = element.text.strip()
                return self._endpoint

        logfire.error("Steam OpenID discovery document has no endpoint URI")
        raise ProviderUnavailableError("openid_discovery")

    async def _check_authentication(
        self, endpoint: str, params: Mapping[str, str]
    ) -> None:
        """Ask Steam to confirm it issued the assertion.

        Raises:
            InvalidCredentialsError: If Steam reports the assertion invalid
            ProviderUnavailableError: If Steam cannot be reached
        """
        data = {k: v for k, v in params.items() if k.startswith("openid.")}
        data["openid.mode"] = "check_authentication"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    endpoint,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Steam check_authentication HTTP error", error=str(e))
            raise ProviderUnavailableError("openid_check_authentication") from e

        if response.status_code != 200:
            logfire.error(
                "Steam check_authentication failed",
                status_code=response.status_code,
                error=response.text[:500],
            )
            raise ProviderUnavailableError("openid_check_authentication")

        if parse_key_value_form(response.text).get("is_valid") != "true":
            logfire.warn("Steam rejected OpenID assertion")
            raise InvalidCredentialsError()


class MockSteamOpenIDClient(SteamOpenIDClient):
    """Mock Steam OpenID client for testing.

    Every completed handshake signs in as ``profile``; tests may replace it
    or set ``unavailable``.
    """

    def __init__(self) -> None:
        """Initialize mock client without real OpenID configuration."""
        self.profile = SteamProfile(
            steam_id="76561197960287930",
            persona_name="mockplayer",
            profile_url="https://steamcommunity.com/id/mockplayer/",
            avatar_url="https://avatars.steamstatic.com/mock_full.jpg",
            game_now_playing=None,
        )
        self.unavailable = False

    async def get_redirect_url(self) -> str:
        """Return mock sign-in URL."""
        if self.unavailable:
            raise ProviderUnavailableError("openid_discovery")
        return "https://steamcommunity.com/openid/login?openid.mode=checkid_setup&mock=true"

    async def authenticate(self, params: Mapping[str, str]) -> SteamProfile:
        """Return the configured profile unless the user cancelled."""
        if self.unavailable:
            raise ProviderUnavailableError("openid_check_authentication")
        if params.get("openid.mode") == "cancel":
            raise InvalidCredentialsError("Steam sign-in was cancelled")
        return self.profile
