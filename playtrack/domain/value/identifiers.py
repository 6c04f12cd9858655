"""Strongly typed identifiers for Playtrack entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
SessionId = NewType("SessionId", str)

# Steam application id of a game
AppId = NewType("AppId", int)
