"""Unit tests for the Steam OpenID relying party."""

from unittest.mock import patch
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from playtrack.adapter.steam import MockSteamWebApiClient, RealSteamOpenIDClient
from playtrack.adapter.steam.openid import (
    parse_key_value_form,
    steam_id_from_claimed_id,
)
from playtrack.domain.error import (
    InvalidCredentialsError,
    ProviderUnavailableError,
    ValidationError,
)
from playtrack.domain.value import SteamProfile

RealAsyncClient = httpx.AsyncClient

ENDPOINT = "https://steamcommunity.com/openid/login"
RETURN_URL = "http://localhost:8000/auth/steam/authenticate"
STEAM_ID = "76561197960287930"

XRDS = f"""<?xml version="1.0" encoding="UTF-8"?>
<xrds:XRDS xmlns:xrds="xri://$xrds" xmlns="xri://$xrd*($v*2.0)">
  <XRD>
    <Service priority="0">
      <Type>http://specs.openid.net/auth/2.0/server</Type>
      <URI>{ENDPOINT}</URI>
    </Service>
  </XRD>
</xrds:XRDS>
"""


def _assertion(**overrides) -> dict[str, str]:
    params = {
        "openid.ns": "http://specs.openid.net/auth/2.0",
        "openid.mode": "id_res",
        "openid.op_endpoint": ENDPOINT,
        "openid.claimed_id": f"https://steamcommunity.com/openid/id/{STEAM_ID}",
        "openid.identity": f"https://steamcommunity.com/openid/id/{STEAM_ID}",
        "openid.return_to": RETURN_URL,
        "openid.response_nonce": "2026-10-19T10:00:00Zabc",
        "openid.assoc_handle": "1234567890",
        "openid.signed": "signed,op_endpoint,claimed_id,identity,return_to,response_nonce,assoc_handle",
        "openid.sig": "c2lnbmF0dXJl",
    }
    params.update(overrides)
    return params


class SteamStub:
    """Answers discovery and check_authentication like steamcommunity.com."""

    def __init__(self, is_valid: bool = True, discovery_status: int = 200):
        self.is_valid = is_valid
        self.discovery_status = discovery_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            return httpx.Response(
                self.discovery_status,
                text=XRDS,
                headers={"Content-Type": "application/xrds+xml"},
            )
        verdict = "true" if self.is_valid else "false"
        return httpx.Response(
            200, text=f"ns:http://specs.openid.net/auth/2.0\nis_valid:{verdict}\n"
        )


def _serve(handler):
    return patch(
        "playtrack.adapter.steam.openid.httpx.AsyncClient",
        side_effect=lambda **kwargs: RealAsyncClient(
            transport=httpx.MockTransport(handler), **kwargs
        ),
    )


@pytest.fixture
def web_api():
    api = MockSteamWebApiClient()
    api.profiles[STEAM_ID] = SteamProfile(
        steam_id=STEAM_ID,
        persona_name="gabe",
        profile_url="https://steamcommunity.com/id/gabe/",
        avatar_url="https://avatars.steamstatic.com/gabe_full.jpg",
    )
    return api


@pytest.fixture
def client(web_api):
    return RealSteamOpenIDClient(
        realm="http://localhost:8000",
        return_url=RETURN_URL,
        discovery_url="https://steamcommunity.com/openid",
        web_api=web_api,
        timeout=5.0,
    )


class TestHelpers:
    """Tests for OpenID parsing helpers."""

    def test_parse_key_value_form(self):
        body = "ns:http://specs.openid.net/auth/2.0\nis_valid:true\n"

        assert parse_key_value_form(body) == {
            "ns": "http://specs.openid.net/auth/2.0",
            "is_valid": "true",
        }

    @pytest.mark.parametrize(
        "claimed_id,expected",
        [
            (f"https://steamcommunity.com/openid/id/{STEAM_ID}", STEAM_ID),
            (f"http://steamcommunity.com/openid/id/{STEAM_ID}/", STEAM_ID),
            (f"https://evil.example/openid/id/{STEAM_ID}", None),
            ("https://steamcommunity.com/openid/id/abc", None),
        ],
    )
    def test_steam_id_from_claimed_id(self, claimed_id, expected):
        assert steam_id_from_claimed_id(claimed_id) == expected


class TestGetRedirectUrl:
    """Tests for get_redirect_url."""

    @pytest.mark.asyncio
    async def test_builds_checkid_setup_url(self, client):
        """Should point at the discovered endpoint with identifier_select."""
        with _serve(SteamStub()):
            url = await client.get_redirect_url()

        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == ENDPOINT
        assert query["openid.mode"] == ["checkid_setup"]
        assert query["openid.return_to"] == [RETURN_URL]
        assert query["openid.realm"] == ["http://localhost:8000"]
        assert query["openid.claimed_id"] == [
            "http://specs.openid.net/auth/2.0/identifier_select"
        ]

    @pytest.mark.asyncio
    async def test_discovery_is_cached(self, client):
        """Discovery should run once per client."""
        stub = SteamStub()
        with _serve(stub):
            await client.get_redirect_url()
            await client.get_redirect_url()

        assert len(stub.requests) == 1

    @pytest.mark.asyncio
    async def test_discovery_failure(self, client):
        """Unreachable discovery surfaces as ProviderUnavailableError."""
        with _serve(SteamStub(discovery_status=502)):
            with pytest.raises(ProviderUnavailableError):
                await client.get_redirect_url()


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_verified_assertion_yields_profile(self, client):
        """Should verify with Steam and return the profile of the claimed id."""
        stub = SteamStub()
        with _serve(stub):
            profile = await client.authenticate(_assertion())

        assert profile.steam_id == STEAM_ID
        assert profile.persona_name == "gabe"

        verification = stub.requests[-1]
        assert verification.method == "POST"
        form = parse_qs(verification.content.decode())
        assert form["openid.mode"] == ["check_authentication"]
        assert form["openid.sig"] == ["c2lnbmF0dXJl"]

    @pytest.mark.asyncio
    async def test_rejected_assertion(self, client):
        """is_valid:false means the assertion was forged or replayed."""
        with _serve(SteamStub(is_valid=False)):
            with pytest.raises(InvalidCredentialsError):
                await client.authenticate(_assertion())

    @pytest.mark.asyncio
    async def test_foreign_return_url(self, client):
        """Assertions addressed to another site are refused without asking Steam."""
        stub = SteamStub()
        with _serve(stub):
            with pytest.raises(InvalidCredentialsError):
                await client.authenticate(
                    _assertion(**{"openid.return_to": "https://evil.example/cb"})
                )

        assert stub.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_endpoint(self, client):
        """Assertions from another OP endpoint are refused."""
        with _serve(SteamStub()):
            with pytest.raises(InvalidCredentialsError):
                await client.authenticate(
                    _assertion(**{"openid.op_endpoint": "https://evil.example/op"})
                )

    @pytest.mark.asyncio
    async def test_claimed_id_not_steam(self, client):
        """Claimed ids outside steamcommunity.com are refused."""
        with _serve(SteamStub()):
            with pytest.raises(InvalidCredentialsError):
                await client.authenticate(
                    _assertion(**{"openid.claimed_id": "https://evil.example/id/1"})
                )

    @pytest.mark.asyncio
    async def test_cancelled(self, client):
        with pytest.raises(InvalidCredentialsError):
            await client.authenticate({"openid.mode": "cancel"})

    @pytest.mark.asyncio
    async def test_no_assertion(self, client):
        with pytest.raises(ValidationError):
            await client.authenticate({})
