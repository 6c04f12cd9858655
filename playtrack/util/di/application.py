"""Application layer DI providers."""

from dishka import Scope, provide

from playtrack.application.usecase.activity import (
    ListActivityUseCase,
    RefreshActivityUseCase,
)
from playtrack.application.usecase.auth import (
    BeginSteamLoginUseCase,
    CompleteSteamLoginUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterUseCase,
)
from playtrack.domain.service import (
    ActivityService,
    PasswordAuthService,
    SessionService,
    SteamAuthService,
)
from playtrack.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        password_auth_service: PasswordAuthService,
        session_service: SessionService,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            password_auth_service=password_auth_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        password_auth_service: PasswordAuthService,
        session_service: SessionService,
    ) -> LoginUseCase:
        """Provide password login use case."""
        return LoginUseCase(
            password_auth_service=password_auth_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_begin_steam_login_use_case(
        self, steam_auth_service: SteamAuthService
    ) -> BeginSteamLoginUseCase:
        """Provide begin Steam login use case."""
        return BeginSteamLoginUseCase(steam_auth_service=steam_auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_steam_login_use_case(
        self,
        steam_auth_service: SteamAuthService,
        session_service: SessionService,
    ) -> CompleteSteamLoginUseCase:
        """Provide complete Steam login use case."""
        return CompleteSteamLoginUseCase(
            steam_auth_service=steam_auth_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, session_service: SessionService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(session_service=session_service)

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, session_service: SessionService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(session_service=session_service)

    # Activity use cases
    @provide(scope=Scope.REQUEST)
    def get_refresh_activity_use_case(
        self, activity_service: ActivityService
    ) -> RefreshActivityUseCase:
        """Provide refresh activity use case."""
        return RefreshActivityUseCase(activity_service=activity_service)

    @provide(scope=Scope.REQUEST)
    def get_list_activity_use_case(
        self,
        session_service: SessionService,
        activity_service: ActivityService,
    ) -> ListActivityUseCase:
        """Provide list activity use case."""
        return ListActivityUseCase(
            session_service=session_service, activity_service=activity_service
        )
