"""Session issuing domain service."""

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

import logfire

from playtrack.domain.error import UnauthenticatedError
from playtrack.domain.model import Session, User
from playtrack.domain.repository import SessionStore
from playtrack.domain.value import SessionId, UserId
from playtrack.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService
from .user_service import UserService


@dataclass
class IssuedSession:
    """Bearer token and server-side session minted for a user."""

    token: str
    session_id: SessionId
    expires_at: datetime


class SessionService(Service):
    """Turns an authenticated user into a token plus a session marker."""

    def __init__(
        self,
        session_store: SessionStore,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize session service.

        Args:
            session_store: Server-side session storage
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.session_store = session_store
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def issue(self, user: User) -> IssuedSession:
        """Mint a signed token and record a session for the user.

        Token and session share the same expiry.
        """
        with logfire.span("session_service.issue", user_id=str(user.id)):
            now = datetime.now(timezone.utc)
            expires_at = self.jwt_service.expiry_from(now)

            token = self.jwt_service.create_token(str(user.id), expires_at)
            session = Session(
                id=SessionId(secrets.token_urlsafe(32)),
                user_id=user.id,
                created_at=now,
                expires_at=expires_at,
            )
            await self.session_store.set(session)

            logfire.info("Session issued", user_id=str(user.id))
            return IssuedSession(
                token=token, session_id=session.id, expires_at=expires_at
            )

    async def resolve_current(self, session_id: SessionId | None) -> User:
        """Resolve the user behind a session marker.

        Raises:
            UnauthenticatedError: If the marker is absent, unknown or expired
            NotFoundError: If the session's user no longer exists
        """
        if not session_id:
            raise UnauthenticatedError()

        session = await self.session_store.get(session_id)
        if not session:
            logfire.debug("Session marker not recognised")
            raise UnauthenticatedError()

        return await self.user_service.get_by_id(session.user_id)

    async def resolve_token(self, token: str | None) -> User:
        """Resolve the user behind a bearer token.

        Tokens stay valid until they expire; logout only ends the session.

        Raises:
            UnauthenticatedError: If the token is absent, invalid or expired
            NotFoundError: If the token's user no longer exists
        """
        if not token:
            raise UnauthenticatedError()

        try:
            payload = self.jwt_service.verify_token(token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            raise UnauthenticatedError("Invalid or expired token")

        return await self.user_service.get_by_id(user_id)

    async def end(self, session_id: SessionId | None) -> None:
        """Destroy a session. Absent markers are ignored."""
        if session_id:
            await self.session_store.destroy(session_id)
            logfire.info("Session ended")
