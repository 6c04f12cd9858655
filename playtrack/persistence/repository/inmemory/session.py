"""In-memory session store for testing."""

from typing import Optional

from playtrack.domain.model.session import Session
from playtrack.domain.repository.session import SessionStore
from playtrack.domain.value import SessionId


class InMemorySessionStore(SessionStore):
    """In-memory implementation of SessionStore for testing."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, Session] = {}

    async def get(self, session_id: SessionId) -> Optional[Session]:
        """Retrieve a session, dropping it if expired."""
        session = self._sessions.get(session_id)
        if session is not None and session.is_expired():
            del self._sessions[session_id]
            return None
        return session

    async def set(self, session: Session) -> None:
        """Store a session."""
        self._sessions[session.id] = session

    async def destroy(self, session_id: SessionId) -> None:
        """Remove a session."""
        self._sessions.pop(session_id, None)
