"""Refresh activity use case."""

from pydantic import BaseModel

from playtrack.application.usecase.activity.common import ActivityInfo
from playtrack.domain.service import ActivityService
from playtrack.domain.value import parse_steam_id


class RefreshActivityRequest(BaseModel):
    """Refresh activity request."""

    steam_id: str | int | None = None  # JSON clients may send the 64-bit id as a number


class RefreshActivityResponse(BaseModel):
    """Tracked titles Steam reported, whether or not they were already stored."""

    message: str
    games: list[ActivityInfo]


class RefreshActivityUseCase:
    """Use case for pulling a Steam user's recently played games."""

    def __init__(self, activity_service: ActivityService) -> None:
        """Initialize refresh activity use case.

        Args:
            activity_service: Activity domain service
        """
        self.activity_service = activity_service

    async def execute(self, request: RefreshActivityRequest) -> RefreshActivityResponse:
        """Fetch, filter and store recently played games.

        Args:
            request: Request carrying the Steam ID

        Returns:
            The allow-listed games, in the order Steam reported them

        Raises:
            ValidationError: If the Steam ID is missing or malformed
            ProviderUnavailableError: If Steam cannot be reached
            NoDataError: If Steam reports no recently played games
            NotFoundError: If no user has this Steam ID
            NoAllowedDataError: If none of the games are tracked
        """
        steam_id = parse_steam_id(request.steam_id)
        records = await self.activity_service.refresh(steam_id)
        return RefreshActivityResponse(
            message="Filtered games saved successfully",
            games=[ActivityInfo.from_record(r) for r in records],
        )
