"""Server-side session marker."""

from datetime import datetime, timezone

from playtrack.domain.model.common import DomainModel
from playtrack.domain.value import SessionId, UserId


class Session(DomainModel):
    """Links an opaque session id (carried in a cookie) to a user."""

    id: SessionId
    user_id: UserId
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the session is past its expiry."""
        return self.expires_at <= (now or datetime.now(timezone.utc))
