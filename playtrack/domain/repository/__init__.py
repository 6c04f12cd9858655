"""Repository interfaces."""

from .activity import ActivityRepository
from .session import SessionStore
from .user import UserRepository

__all__ = [
    "ActivityRepository",
    "SessionStore",
    "UserRepository",
]
