"""Recently played activity domain service."""

import logfire

from playtrack.domain.error import NoAllowedDataError, NoDataError, NotFoundError
from playtrack.domain.model import ActivityRecord
from playtrack.domain.repository import ActivityRepository
from playtrack.domain.value import AppId, RecentlyPlayedGames, SteamId, UserId

from .base import Service
from .user_service import UserService


class ActivityClient:
    """Source of recently played games for a Steam account."""

    async def get_recently_played_games(self, steam_id: SteamId) -> RecentlyPlayedGames:
        """Fetch the recently played games of a Steam account.

        Args:
            steam_id: Steam account to query

        Returns:
            Reported games and their total count

        Raises:
            ProviderUnavailableError: If Steam cannot be reached
        """
        raise NotImplementedError


class ActivityService(Service):
    """Pulls recently played games from Steam into activity records."""

    def __init__(
        self,
        activity_client: ActivityClient,
        activity_repository: ActivityRepository,
        user_service: UserService,
        allowed_app_ids: list[int],
    ) -> None:
        """Initialize activity service.

        Args:
            activity_client: Steam recently-played source
            activity_repository: Activity record repository
            user_service: User domain service
            allowed_app_ids: Steam app ids that are tracked
        """
        self.activity_client = activity_client
        self.activity_repository = activity_repository
        self.user_service = user_service
        self.allowed_app_ids = frozenset(allowed_app_ids)

    async def refresh(self, steam_id: SteamId) -> list[ActivityRecord]:
        """Fetch, filter and store the recently played games of a Steam user.

        Games outside the allow-list are dropped. Records already stored for
        the same user and app are skipped rather than updated.

        Args:
            steam_id: Steam account whose activity to refresh

        Returns:
            Allowed games in the order Steam reported them, including any
            that were already stored

        Raises:
            NoDataError: If Steam reports no recently played games
            NotFoundError: If no user has this Steam ID
            NoAllowedDataError: If none of the games are tracked
        """
        with logfire.span("activity_service.refresh", steam_id=str(steam_id)):
            reported = await self.activity_client.get_recently_played_games(steam_id)

            if not reported.games or reported.total_count == 0:
                logfire.info("No recently played games", steam_id=str(steam_id))
                raise NoDataError(str(steam_id))

            user = await self.user_service.find_by_steam_id(steam_id)
            if not user:
                raise NotFoundError("User", str(steam_id))

            allowed = [g for g in reported.games if g.appid in self.allowed_app_ids]
            if not allowed:
                logfire.info(
                    "No allowed games in recently played games",
                    steam_id=str(steam_id),
                    reported=len(reported.games),
                )
                raise NoAllowedDataError(str(steam_id))

            records = [
                ActivityRecord(
                    user_id=user.id,
                    app_id=AppId(game.appid),
                    name=game.name,
                    playtime_2weeks=game.playtime_2weeks,
                    playtime_forever=game.playtime_forever,
                    img_icon_url=game.img_icon_url,
                    img_logo_url=game.img_logo_url,
                )
                for game in allowed
            ]

            inserted = await self.activity_repository.add_all(records)
            logfire.info(
                "Activity refreshed",
                user_id=str(user.id),
                reported=len(reported.games),
                allowed=len(records),
                inserted=inserted,
            )
            return records

    async def list_for_user(self, user_id: UserId) -> list[ActivityRecord]:
        """Get the stored activity records of a user."""
        with logfire.span("activity_service.list_for_user", user_id=str(user_id)):
            return await self.activity_repository.find_all_by_user_id(user_id)
