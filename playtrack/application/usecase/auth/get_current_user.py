"""Get current user use case."""

from pydantic import BaseModel

from playtrack.application.usecase.auth.common import UserInfo
from playtrack.domain.service import SessionService
from playtrack.domain.value import SessionId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    session_id: str | None = None  # From the session cookie
    token: str | None = None  # Bearer token, used when no session is presented


class GetCurrentUserUseCase:
    """Use case for resolving the caller from their session or token."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: GetCurrentUserRequest) -> UserInfo:
        """Resolve the current user.

        The session marker wins when both are present.

        Raises:
            UnauthenticatedError: If neither a live session nor a valid token
                accompanies the request
            NotFoundError: If the referenced user no longer exists
        """
        if request.session_id:
            user = await self.session_service.resolve_current(
                SessionId(request.session_id)
            )
        elif request.token:
            user = await self.session_service.resolve_token(request.token)
        else:
            user = await self.session_service.resolve_current(None)
        return UserInfo.from_user(user)
