"""Domain models for Playtrack."""

from .activity import ActivityRecord
from .session import Session
from .user import User

__all__ = [
    "ActivityRecord",
    "Session",
    "User",
]
