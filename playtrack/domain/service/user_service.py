"""User domain service.

Single entry point to user storage for the authentication services.
"""

import logfire

from playtrack.domain.error import NotFoundError
from playtrack.domain.model import User
from playtrack.domain.repository import UserRepository
from playtrack.domain.value import SteamId, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups and writes."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_email(self, email: str) -> User | None:
        """Find user by exact email."""
        return await self.user_repository.find_by_email(email)

    async def find_by_steam_id(self, steam_id: SteamId) -> User | None:
        """Find user by Steam ID."""
        with logfire.span("user_service.find_by_steam_id", steam_id=str(steam_id)):
            user = await self.user_repository.find_by_steam_id(steam_id)
            if user:
                logfire.info(
                    "User found for Steam ID",
                    steam_id=str(steam_id),
                    user_id=str(user.id),
                )
            else:
                logfire.warn("No user for Steam ID", steam_id=str(steam_id))
            return user

    async def create(self, user: User) -> User:
        """Create a user.

        Raises:
            DuplicateIdentityError: If the email or Steam ID is taken
        """
        with logfire.span("user_service.create", user_id=str(user.id)):
            created = await self.user_repository.create(user)
            logfire.info(
                "User created",
                user_id=str(created.id),
                federated=created.is_federated,
            )
            return created

    async def upsert_steam_user(self, user: User) -> tuple[User, bool]:
        """Create a Steam user or refresh its profile snapshot.

        Returns:
            The stored user and whether it was created
        """
        with logfire.span(
            "user_service.upsert_steam_user", steam_id=str(user.steam_id)
        ):
            stored, created = await self.user_repository.upsert_by_steam_id(user)
            logfire.info(
                "Steam user stored",
                user_id=str(stored.id),
                steam_id=str(stored.steam_id),
                created=created,
            )
            return stored, created
