"""Register use case."""

from datetime import date

from pydantic import BaseModel

from playtrack.application.usecase.auth.common import AuthenticatedResponse
from playtrack.domain.service import PasswordAuthService, SessionService


class RegisterRequest(BaseModel):
    """Registration form.

    Every field is required; absent values are rejected by the domain with
    a single "Please add all fields" error rather than per-field 422s.
    """

    username: str | None = None
    email: str | None = None
    birthday: date | None = None
    password: str | None = None


class RegisterUseCase:
    """Use case for creating a local account and signing it in."""

    def __init__(
        self, password_auth_service: PasswordAuthService, session_service: SessionService
    ) -> None:
        """Initialize register use case.

        Args:
            password_auth_service: Email/password authentication domain service
            session_service: Session domain service
        """
        self.password_auth_service = password_auth_service
        self.session_service = session_service

    async def execute(self, request: RegisterRequest) -> AuthenticatedResponse:
        """Register the account, then issue a token and session for it.

        Raises:
            ValidationError: If a field is missing or malformed
            DuplicateIdentityError: If the email is already registered
        """
        user = await self.password_auth_service.register(
            username=request.username,
            email=request.email,
            birthday=request.birthday,
            password=request.password,
        )
        issued = await self.session_service.issue(user)
        return AuthenticatedResponse.build(user, issued)
