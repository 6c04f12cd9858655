"""List activity use case."""

from pydantic import BaseModel

from playtrack.application.usecase.activity.common import ActivityInfo
from playtrack.domain.service import ActivityService, SessionService
from playtrack.domain.value import SessionId


class ListActivityRequest(BaseModel):
    """List activity request."""

    session_id: str | None = None


class ListActivityResponse(BaseModel):
    """Stored activity of the current user."""

    games: list[ActivityInfo]


class ListActivityUseCase:
    """Use case for listing the caller's stored activity records."""

    def __init__(
        self, session_service: SessionService, activity_service: ActivityService
    ) -> None:
        self.session_service = session_service
        self.activity_service = activity_service

    async def execute(self, request: ListActivityRequest) -> ListActivityResponse:
        """List stored records of the signed-in user.

        Raises:
            UnauthenticatedError: If the session is absent, unknown or expired
            NotFoundError: If the session's user no longer exists
        """
        session_id = SessionId(request.session_id) if request.session_id else None
        user = await self.session_service.resolve_current(session_id)
        records = await self.activity_service.list_for_user(user.id)
        return ListActivityResponse(
            games=[ActivityInfo.from_record(r) for r in records]
        )
