"""Session store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from playtrack.domain.model.session import Session
from playtrack.domain.value import SessionId


class SessionStore(ABC):
    """Server-side session storage keyed by session id."""

    @abstractmethod
    async def get(self, session_id: SessionId) -> Optional[Session]:
        """Retrieve a session.

        Args:
            session_id: Session id from the client cookie

        Returns:
            The session if found and not expired, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, session: Session) -> None:
        """Store a session under its id.

        Args:
            session: Session to store
        """
        pass

    @abstractmethod
    async def destroy(self, session_id: SessionId) -> None:
        """Remove a session. Unknown ids are ignored.

        Args:
            session_id: Session to remove
        """
        pass
