"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Any, Optional

from playtrack.domain.error import DuplicateIdentityError, NotFoundError
from playtrack.domain.model.user import User
from playtrack.domain.repository.user import UserRepository
from playtrack.domain.value import SteamId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Methods never await between reading and writing ``_users``, so each
    call is atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email is not None and user.email == email:
                return user
        return None

    async def find_by_steam_id(self, steam_id: SteamId) -> Optional[User]:
        """Find a user by their Steam ID."""
        for user in self._users.values():
            if user.steam_id == steam_id:
                return user
        return None

    async def create(self, user: User) -> User:
        """Insert a new user, enforcing unique email and Steam ID."""
        for existing in self._users.values():
            if user.email is not None and existing.email == user.email:
                raise DuplicateIdentityError("email", user.email)
            if user.steam_id is not None and existing.steam_id == user.steam_id:
                raise DuplicateIdentityError("steam_id", user.steam_id.root)
        self._users[user.id] = user
        return user

    async def update(self, user_id: UserId, changes: dict[str, Any]) -> User:
        """Apply field changes to an existing user."""
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        changes = {"updated_at": datetime.now(timezone.utc), **changes}
        updated = user.model_copy(update=changes)
        self._users[user_id] = updated
        return updated

    async def upsert_by_steam_id(self, user: User) -> tuple[User, bool]:
        """Insert a Steam user or refresh the stored profile snapshot."""
        for existing in self._users.values():
            if existing.steam_id == user.steam_id:
                updated = existing.model_copy(
                    update={
                        "profile_url": user.profile_url,
                        "avatar_url": user.avatar_url,
                        "game_now_playing": user.game_now_playing,
                        "updated_at": datetime.now(timezone.utc),
                    }
                )
                self._users[existing.id] = updated
                return updated, False
        self._users[user.id] = user
        return user, True
