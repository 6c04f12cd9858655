"""JWT token domain service."""

from datetime import datetime

import logfire

from playtrack.config import AuthSettings
from playtrack.util.jwt import TokenPayload, create_token, token_expiry, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def expiry_from(self, now: datetime) -> datetime:
        """Expiry instant for a token issued at ``now``."""
        return token_expiry(self.auth_settings, now)

    def create_token(self, user_id: str, expires_at: datetime) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            expires_at: Token expiry

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, expires_at, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
