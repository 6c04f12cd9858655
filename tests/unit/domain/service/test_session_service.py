"""Unit tests for SessionService."""

from datetime import datetime, timedelta, timezone

import pytest

from playtrack.config import AuthSettings
from playtrack.domain.error import NotFoundError, UnauthenticatedError
from playtrack.domain.model import Session
from playtrack.domain.service import JWTService, SessionService, UserService
from playtrack.domain.value import SessionId
from playtrack.persistence.repository.inmemory import (
    InMemorySessionStore,
    InMemoryUserRepository,
)
from tests.conftest import make_local_user


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(auth_settings)


@pytest.fixture
def service(session_store, user_repo, jwt_service):
    return SessionService(session_store, UserService(user_repo), jwt_service)


class TestIssue:
    """Tests for SessionService.issue()."""

    @pytest.mark.asyncio
    async def test_issue_returns_token_for_user(self, service, user_repo, jwt_service):
        """Token should carry the user's id and a 30-day expiry."""
        user = await user_repo.create(make_local_user())
        before = datetime.now(timezone.utc)

        issued = await service.issue(user)

        payload = jwt_service.verify_token(issued.token)
        assert payload.user_id == str(user.id)
        assert issued.expires_at - before >= timedelta(days=30) - timedelta(seconds=5)
        assert issued.expires_at - before <= timedelta(days=30, seconds=5)

    @pytest.mark.asyncio
    async def test_issue_records_session_with_same_expiry(
        self, service, user_repo, session_store
    ):
        """Session marker should reference the user and expire with the token."""
        user = await user_repo.create(make_local_user())

        issued = await service.issue(user)

        session = await session_store.get(issued.session_id)
        assert session is not None
        assert session.user_id == user.id
        assert session.expires_at == issued.expires_at

    @pytest.mark.asyncio
    async def test_each_issue_gets_a_fresh_session_id(self, service, user_repo):
        """Session ids are random and never reused."""
        user = await user_repo.create(make_local_user())

        first = await service.issue(user)
        second = await service.issue(user)

        assert first.session_id != second.session_id


class TestResolveCurrent:
    """Tests for SessionService.resolve_current()."""

    @pytest.mark.asyncio
    async def test_resolves_issued_session(self, service, user_repo):
        """An issued session resolves to its user."""
        user = await user_repo.create(make_local_user())
        issued = await service.issue(user)

        current = await service.resolve_current(issued.session_id)

        assert current.id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("session_id", [None, ""])
    async def test_missing_marker(self, service, session_id):
        """No marker means unauthenticated."""
        with pytest.raises(UnauthenticatedError):
            await service.resolve_current(session_id)

    @pytest.mark.asyncio
    async def test_unknown_marker(self, service):
        """A marker the store never issued means unauthenticated."""
        with pytest.raises(UnauthenticatedError):
            await service.resolve_current(SessionId("forged"))

    @pytest.mark.asyncio
    async def test_expired_marker(self, service, user_repo, session_store):
        """An expired session resolves as absent."""
        user = await user_repo.create(make_local_user())
        now = datetime.now(timezone.utc)
        await session_store.set(
            Session(
                id=SessionId("stale"),
                user_id=user.id,
                created_at=now - timedelta(days=31),
                expires_at=now - timedelta(days=1),
            )
        )

        with pytest.raises(UnauthenticatedError):
            await service.resolve_current(SessionId("stale"))

    @pytest.mark.asyncio
    async def test_marker_for_deleted_user(self, service, user_repo):
        """A session whose user is gone fails with NotFoundError."""
        user = await user_repo.create(make_local_user())
        issued = await service.issue(user)
        del user_repo._users[user.id]

        with pytest.raises(NotFoundError):
            await service.resolve_current(issued.session_id)


class TestResolveToken:
    """Tests for SessionService.resolve_token()."""

    @pytest.mark.asyncio
    async def test_resolves_issued_token(self, service, user_repo):
        user = await user_repo.create(make_local_user())
        issued = await service.issue(user)

        resolved = await service.resolve_token(issued.token)

        assert resolved.id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    async def test_unusable_token(self, service, token):
        with pytest.raises(UnauthenticatedError):
            await service.resolve_token(token)

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, service, user_repo):
        user = await user_repo.create(make_local_user())
        other = JWTService(AuthSettings(jwt_secret="another-secret"))
        expires_at = other.expiry_from(datetime.now(timezone.utc))
        token = other.create_token(str(user.id), expires_at)

        with pytest.raises(UnauthenticatedError):
            await service.resolve_token(token)

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, service, user_repo):
        user = await user_repo.create(make_local_user())
        issued = await service.issue(user)
        del user_repo._users[user.id]

        with pytest.raises(NotFoundError):
            await service.resolve_token(issued.token)


class TestEnd:
    """Tests for SessionService.end()."""

    @pytest.mark.asyncio
    async def test_end_destroys_session(self, service, user_repo):
        """After logout the marker no longer resolves."""
        user = await user_repo.create(make_local_user())
        issued = await service.issue(user)

        await service.end(issued.session_id)

        with pytest.raises(UnauthenticatedError):
            await service.resolve_current(issued.session_id)

    @pytest.mark.asyncio
    async def test_end_without_marker_is_noop(self, service):
        """Logging out without a session is harmless."""
        await service.end(None)
        await service.end(SessionId("unknown"))
