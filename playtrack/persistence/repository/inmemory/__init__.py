"""In-memory repository implementations for testing."""

from .activity import InMemoryActivityRepository
from .session import InMemorySessionStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemorySessionStore",
    "InMemoryUserRepository",
]
