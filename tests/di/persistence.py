"""Mock persistence providers for testing."""

from dishka import Scope, provide

from playtrack.domain.repository import (
    ActivityRepository,
    SessionStore,
    UserRepository,
)
from playtrack.persistence.repository.inmemory import (
    InMemoryActivityRepository,
    InMemorySessionStore,
    InMemoryUserRepository,
)
from playtrack.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the requests served by one
    container; every test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_activity_repository(self) -> ActivityRepository:
        """Provide in-memory activity repository."""
        return InMemoryActivityRepository()

    @provide(scope=Scope.APP)
    def get_session_store(self) -> SessionStore:
        """Provide in-memory session store."""
        return InMemorySessionStore()
