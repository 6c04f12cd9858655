"""Steam OpenID authentication domain service."""

import asyncio
from collections.abc import Mapping
from uuid import uuid4

import logfire

from playtrack.config import AuthSettings
from playtrack.domain.error import ValidationError
from playtrack.domain.model import User
from playtrack.domain.value import SteamProfile, UserId, parse_steam_id
from playtrack.util.password import hash_password

from .base import Service
from .user_service import UserService


class OpenIDClient:
    """OpenID relying-party interface for the Steam identity provider."""

    async def get_redirect_url(self) -> str:
        """Build the URL that sends the user to Steam to sign in.

        Returns:
            Steam sign-in URL

        Raises:
            ProviderUnavailableError: If Steam cannot be reached
        """
        raise NotImplementedError

    async def authenticate(self, params: Mapping[str, str]) -> SteamProfile:
        """Verify the callback assertion and fetch the signed-in profile.

        Args:
            params: Query parameters Steam appended to the return URL

        Returns:
            Profile claims of the verified Steam account

        Raises:
            InvalidCredentialsError: If Steam does not vouch for the assertion
            ProviderUnavailableError: If Steam cannot be reached
        """
        raise NotImplementedError


class SteamAuthService(Service):
    """Drives the Steam handshake and maps its claims onto a user."""

    def __init__(
        self,
        openid_client: OpenIDClient,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize Steam auth service.

        Args:
            openid_client: Steam OpenID client
            user_service: User domain service
            auth_settings: Authentication settings (bcrypt rounds)
        """
        self.openid_client = openid_client
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def begin_login(self) -> str:
        """Start the handshake.

        Returns:
            Steam sign-in URL to redirect the user to
        """
        with logfire.span("steam_auth_service.begin_login"):
            return await self.openid_client.get_redirect_url()

    async def complete_login(self, params: Mapping[str, str]) -> User:
        """Finish the handshake and create or refresh the Steam user.

        An unknown Steam ID gets a new user named after its persona. A known
        one only has its profile URL, avatar and current game refreshed; the
        stored username is left as it was.

        Args:
            params: Query parameters of the OpenID callback

        Returns:
            The stored user

        Raises:
            ValidationError: If Steam omitted the Steam ID or persona name
        """
        profile = await self.openid_client.authenticate(params)

        if not profile.persona_name:
            raise ValidationError("Missing persona name in Steam user data")
        if not profile.steam_id:
            raise ValidationError("Missing Steam ID in Steam user data")
        steam_id = parse_steam_id(profile.steam_id)

        with logfire.span("steam_auth_service.complete_login", steam_id=str(steam_id)):
            # Steam accounts never sign in with a password; the hash only fills
            # the column, and the upsert keeps the stored one on conflict
            existing = await self.user_service.find_by_steam_id(steam_id)
            if existing:
                placeholder_hash = existing.password_hash
            else:
                placeholder_hash = await asyncio.to_thread(
                    hash_password, steam_id.root, self.auth_settings.bcrypt_rounds
                )

            user, created = await self.user_service.upsert_steam_user(
                User(
                    id=UserId(uuid4()),
                    username=profile.persona_name,
                    steam_id=steam_id,
                    password_hash=placeholder_hash,
                    profile_url=profile.profile_url,
                    avatar_url=profile.avatar_url,
                    game_now_playing=profile.game_now_playing,
                )
            )

            if created:
                logfire.info(
                    "New Steam user created",
                    user_id=str(user.id),
                    steam_id=str(steam_id),
                )
            else:
                logfire.info(
                    "Existing Steam user logged in",
                    user_id=str(user.id),
                    steam_id=str(steam_id),
                )
            return user
