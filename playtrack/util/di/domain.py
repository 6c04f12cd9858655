"""Domain layer DI providers."""

from dishka import Scope, provide

from playtrack.config import AuthSettings, SteamSettings
from playtrack.domain.repository import (
    ActivityRepository,
    SessionStore,
    UserRepository,
)
from playtrack.domain.service import (
    ActivityClient,
    ActivityService,
    JWTService,
    OpenIDClient,
    PasswordAuthService,
    SessionService,
    SteamAuthService,
    UserService,
)
from playtrack.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_password_auth_service(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> PasswordAuthService:
        """Provide email/password authentication domain service."""
        return PasswordAuthService(
            user_service=user_service, auth_settings=auth_settings
        )

    @provide
    def get_steam_auth_service(
        self,
        openid_client: OpenIDClient,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> SteamAuthService:
        """Provide Steam OpenID authentication domain service."""
        return SteamAuthService(
            openid_client=openid_client,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_session_service(
        self,
        session_store: SessionStore,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            session_store=session_store,
            user_service=user_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_activity_service(
        self,
        activity_client: ActivityClient,
        activity_repository: ActivityRepository,
        user_service: UserService,
        steam_settings: SteamSettings,
    ) -> ActivityService:
        """Provide activity domain service.

        Only titles in ``steam.allowed_app_ids`` are stored.
        """
        return ActivityService(
            activity_client=activity_client,
            activity_repository=activity_repository,
            user_service=user_service,
            allowed_app_ids=steam_settings.allowed_app_ids,
        )
