"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from playtrack.config import Settings
from playtrack.domain.repository import (
    ActivityRepository,
    SessionStore,
    UserRepository,
)
from playtrack.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from playtrack.persistence.repository import (
    PostgresActivityRepository,
    PostgresSessionStore,
    PostgresUserRepository,
)
from playtrack.util.di.base import ProviderBase
from playtrack.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session commits at the end of the request unless an exception
        was raised, in which case it rolls back.
        """
        async with transaction(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, session: AsyncSession) -> ActivityRepository:
        """Provide ActivityRecord repository."""
        return PostgresActivityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_session_store(self, session: AsyncSession) -> SessionStore:
        """Provide session store."""
        return PostgresSessionStore(session)
