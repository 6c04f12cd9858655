"""Logout use case."""

from pydantic import BaseModel

from playtrack.domain.service import SessionService
from playtrack.domain.value import SessionId


class LogoutRequest(BaseModel):
    """Logout request."""

    session_id: str | None = None


class LogoutUseCase:
    """Use case for ending the caller's session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: LogoutRequest) -> None:
        """Destroy the session, if any. Logging out twice is harmless."""
        await self.session_service.end(
            SessionId(request.session_id) if request.session_id else None
        )
