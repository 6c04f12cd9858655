"""PostgreSQL repository implementations."""

from playtrack.persistence.repository.activity import PostgresActivityRepository
from playtrack.persistence.repository.session import PostgresSessionStore
from playtrack.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresActivityRepository",
    "PostgresSessionStore",
    "PostgresUserRepository",
]
