"""User aggregate root.

A user is either a local account (email + password) or a Steam account
(Steam ID). Local accounts never carry a Steam ID and Steam accounts never
carry an email; the model itself does not forbid both.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import Field

from playtrack.domain.model.common import DomainModel
from playtrack.domain.value import SteamId, UserId


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User identity record."""

    id: UserId
    username: str
    email: Optional[str] = None
    birthday: Optional[date] = None
    steam_id: Optional[SteamId] = None

    # bcrypt hash of the password, or of the Steam ID for Steam accounts.
    # Steam accounts are never authenticated with it.
    password_hash: str

    # Snapshot of the Steam profile as of the last Steam login
    profile_url: Optional[str] = None
    avatar_url: Optional[str] = None
    game_now_playing: Optional[str] = None

    role_id: Optional[int] = None  # Opaque, not interpreted here
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @property
    def is_federated(self) -> bool:
        """Whether this account was established through Steam."""
        return self.steam_id is not None
