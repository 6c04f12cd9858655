"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from playtrack.domain.model.user import User
from playtrack.domain.value import SteamId, UserId


class UserRepository(ABC):
    """Repository for the User aggregate.

    Email and Steam ID are each unique across all users. Lookups are
    exact-match on the stored value.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_steam_id(self, steam_id: SteamId) -> Optional[User]:
        """Find a user by their Steam ID.

        Args:
            steam_id: The user's Steam ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to create

        Returns:
            The created user

        Raises:
            DuplicateIdentityError: If the email or Steam ID is already taken
        """
        pass

    @abstractmethod
    async def update(self, user_id: UserId, changes: dict[str, Any]) -> User:
        """Apply field changes to an existing user.

        Args:
            user_id: The user to update
            changes: Field name to new value

        Returns:
            The updated user

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    async def upsert_by_steam_id(self, user: User) -> tuple[User, bool]:
        """Create a Steam user, or refresh the profile snapshot of the existing one.

        Atomic with respect to concurrent calls for the same Steam ID. When
        the Steam ID already exists only ``profile_url``, ``avatar_url`` and
        ``game_now_playing`` are overwritten; the username and credentials
        of the stored user are kept.

        Args:
            user: Candidate user carrying a Steam ID

        Returns:
            The stored user and whether it was newly created
        """
        pass
