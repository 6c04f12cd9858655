"""PostgreSQL implementation of User repository."""

from typing import Any, Optional

from sqlalchemy import func, literal_column, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from playtrack.domain.error import DuplicateIdentityError, NotFoundError
from playtrack.domain.model import User
from playtrack.domain.repository import UserRepository
from playtrack.domain.value import SteamId, UserId
from playtrack.persistence.mappers import (
    row_to_user,
    user_changes_to_dict,
    user_to_dict,
)
from playtrack.persistence.tables import users_table

# Columns refreshed from Steam on every repeat login
_STEAM_PROFILE_COLUMNS = ("profile_url", "avatar_url", "game_now_playing")


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_steam_id(self, steam_id: SteamId) -> Optional[User]:
        """Find a user by their Steam ID."""
        stmt = select(users_table).where(users_table.c.steam_id == steam_id.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def create(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a savepoint so a unique violation leaves the
        surrounding transaction usable.

        Args:
            user: User to create

        Returns:
            Created user

        Raises:
            DuplicateIdentityError: If the email or Steam ID is taken
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if "uq_users_steam_id" in str(e.orig):
                raise DuplicateIdentityError("steam_id", user.steam_id.root)
            raise DuplicateIdentityError("email", user.email or "")
        return user

    async def update(self, user_id: UserId, changes: dict[str, Any]) -> User:
        """Apply field changes to an existing user.

        Args:
            user_id: User to update
            changes: Field name to new value

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user does not exist
        """
        values = user_changes_to_dict(changes)
        values.setdefault("updated_at", func.now())
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(**values)
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("User", str(user_id))
        return row_to_user(dict(row))

    async def upsert_by_steam_id(self, user: User) -> tuple[User, bool]:
        """Insert a Steam user or refresh the stored profile snapshot.

        Uses ``INSERT ... ON CONFLICT (steam_id) DO UPDATE`` so concurrent
        logins for one Steam ID converge on a single row. ``xmax = 0`` holds
        only for a freshly inserted tuple.

        Args:
            user: Candidate user carrying a Steam ID

        Returns:
            Stored user and whether it was inserted
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.steam_id],
            set_={
                **{name: stmt.excluded[name] for name in _STEAM_PROFILE_COLUMNS},
                "updated_at": func.now(),
            },
        ).returning(*users_table.c, literal_column("(xmax = 0)").label("inserted"))

        result = await self.session.execute(stmt)
        row = dict(result.mappings().one())
        inserted = bool(row.pop("inserted"))
        return row_to_user(row), inserted
