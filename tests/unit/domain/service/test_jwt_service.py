"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import pytest

from playtrack.config import AuthSettings
from playtrack.domain.service import JWTService
from playtrack.util.jwt import JWTError


class TestJWTService:
    """Tests for JWTService."""

    def test_round_trip(self, auth_settings):
        """A freshly created token verifies to the same user id."""
        service = JWTService(auth_settings)
        expires_at = service.expiry_from(datetime.now(timezone.utc))

        token = service.create_token("user-123", expires_at)
        payload = service.verify_token(token)

        assert payload.user_id == "user-123"
        assert payload.exp == expires_at.replace(microsecond=0)

    def test_expiry_is_thirty_days(self, auth_settings):
        """Default expiry is 30 days after issue."""
        service = JWTService(auth_settings)
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)

        assert service.expiry_from(now) == now + timedelta(days=30)

    def test_expired_token_is_rejected(self, auth_settings):
        """Tokens past their exp claim do not verify."""
        service = JWTService(auth_settings)
        token = service.create_token(
            "user-123", datetime.now(timezone.utc) - timedelta(minutes=1)
        )

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_token_signed_with_other_secret_is_rejected(self, auth_settings):
        """Tokens from another secret do not verify."""
        other = JWTService(AuthSettings(jwt_secret="someone-else"))
        token = other.create_token(
            "user-123", datetime.now(timezone.utc) + timedelta(days=1)
        )

        with pytest.raises(JWTError, match="Invalid token"):
            JWTService(auth_settings).verify_token(token)
