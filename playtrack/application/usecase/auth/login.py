"""Password login use case."""

from pydantic import BaseModel

from playtrack.application.usecase.auth.common import AuthenticatedResponse
from playtrack.domain.service import PasswordAuthService, SessionService


class LoginRequest(BaseModel):
    """Email/password login form."""

    email: str | None = None
    password: str | None = None


class LoginUseCase:
    """Use case for signing in a local account."""

    def __init__(
        self, password_auth_service: PasswordAuthService, session_service: SessionService
    ) -> None:
        self.password_auth_service = password_auth_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> AuthenticatedResponse:
        """Verify the credentials, then issue a token and session.

        Raises:
            ValidationError: If a field is missing
            NotFoundError: If no account has the email
            InvalidCredentialsError: If the password does not match
        """
        user = await self.password_auth_service.login(request.email, request.password)
        issued = await self.session_service.issue(user)
        return AuthenticatedResponse.build(user, issued)
