"""Steam OpenID login use cases.

The handshake spans two HTTP requests: ``BeginSteamLoginUseCase`` produces
the Steam sign-in URL, and ``CompleteSteamLoginUseCase`` handles the
callback Steam redirects the browser back to.
"""

from collections.abc import Mapping

from pydantic import BaseModel

from playtrack.application.usecase.auth.common import AuthenticatedResponse
from playtrack.domain.service import SessionService, SteamAuthService


class BeginSteamLoginResponse(BaseModel):
    """Where to send the browser to sign in with Steam."""

    redirect_url: str


class CompleteSteamLoginRequest(BaseModel):
    """OpenID callback parameters, passed through verbatim."""

    params: dict[str, str]

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "CompleteSteamLoginRequest":
        return cls(params=dict(query))


class BeginSteamLoginUseCase:
    """Use case for starting the Steam handshake."""

    def __init__(self, steam_auth_service: SteamAuthService) -> None:
        self.steam_auth_service = steam_auth_service

    async def execute(self) -> BeginSteamLoginResponse:
        """Get the Steam sign-in URL.

        Raises:
            ProviderUnavailableError: If Steam cannot be reached
        """
        redirect_url = await self.steam_auth_service.begin_login()
        return BeginSteamLoginResponse(redirect_url=redirect_url)


class CompleteSteamLoginUseCase:
    """Use case for finishing the Steam handshake."""

    def __init__(
        self, steam_auth_service: SteamAuthService, session_service: SessionService
    ) -> None:
        """Initialize complete Steam login use case.

        Args:
            steam_auth_service: Steam OpenID authentication domain service
            session_service: Session domain service
        """
        self.steam_auth_service = steam_auth_service
        self.session_service = session_service

    async def execute(
        self, request: CompleteSteamLoginRequest
    ) -> AuthenticatedResponse:
        """Verify the assertion, create or refresh the user, and sign it in.

        Steps:
        1. Verify the OpenID assertion with Steam and load the profile
        2. Upsert the Steam user (profile snapshot refreshed, username kept)
        3. Issue a token and session

        Raises:
            InvalidCredentialsError: If Steam does not vouch for the assertion
            ValidationError: If the assertion or profile is incomplete
            ProviderUnavailableError: If Steam cannot be reached
        """
        user = await self.steam_auth_service.complete_login(request.params)
        issued = await self.session_service.issue(user)
        return AuthenticatedResponse.build(user, issued)
