"""Integration tests for the PostgreSQL repositories.

These tests assume a migrated PostgreSQL database (see tests/harness.py).
Every test uses fresh emails and Steam IDs so reruns never collide.
"""

import random
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from playtrack.domain.error import DuplicateIdentityError, NotFoundError
from playtrack.domain.model import ActivityRecord, Session
from playtrack.domain.repository import (
    ActivityRepository,
    SessionStore,
    UserRepository,
)
from playtrack.domain.service import SessionService
from playtrack.domain.value import AppId, SessionId
from playtrack.persistence.tables import users_table
from tests.conftest import make_local_user, make_steam_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _fresh_steam_id() -> str:
    return f"7656119{random.randint(10**9, 10**10 - 1)}"


def _fresh_email() -> str:
    return f"{uuid4().hex[:12]}@example.com"


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_email(self, integration_env):
        repo = await integration_env.get(UserRepository)
        email = _fresh_email()

        created = await repo.create(make_local_user(email=email))
        found = await repo.find_by_email(email)

        assert found is not None
        assert found.id == created.id
        assert found.steam_id is None

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, integration_env):
        repo = await integration_env.get(UserRepository)
        email = _fresh_email()
        await repo.create(make_local_user(email=email))

        with pytest.raises(DuplicateIdentityError) as exc_info:
            await repo.create(make_local_user(email=email))

        assert exc_info.value.field == "email"
        # The failed insert must not poison the surrounding transaction
        assert await repo.find_by_email(email) is not None

    @pytest.mark.asyncio
    async def test_upsert_by_steam_id(self, integration_env):
        repo = await integration_env.get(UserRepository)
        steam_id = _fresh_steam_id()

        first, created = await repo.upsert_by_steam_id(make_steam_user(steam_id))
        second, created_again = await repo.upsert_by_steam_id(
            make_steam_user(steam_id, username="renamed", game_now_playing="Dota 2")
        )

        assert created is True
        assert created_again is False
        assert second.id == first.id
        assert second.username == first.username
        assert second.game_now_playing == "Dota 2"

    @pytest.mark.asyncio
    async def test_update_changes_fields(self, integration_env):
        repo = await integration_env.get(UserRepository)
        user = await repo.create(make_steam_user(_fresh_steam_id()))

        updated = await repo.update(user.id, {"avatar_url": None})

        assert updated.avatar_url is None


class TestPostgresActivityRepository:
    """Integration tests for PostgresActivityRepository."""

    @pytest.mark.asyncio
    async def test_add_all_ignores_existing_pairs(self, integration_env):
        users = await integration_env.get(UserRepository)
        repo = await integration_env.get(ActivityRepository)
        user = await users.create(make_steam_user(_fresh_steam_id()))
        records = [
            ActivityRecord(
                user_id=user.id, app_id=AppId(app_id), name=name, playtime_forever=10
            )
            for app_id, name in [(730, "Counter-Strike 2"), (570, "Dota 2")]
        ]

        assert await repo.add_all(records) == 2
        assert await repo.add_all(records) == 0

        stored = await repo.find_all_by_user_id(user.id)
        assert sorted(r.app_id for r in stored) == [570, 730]


class TestPostgresSessionStore:
    """Integration tests for PostgresSessionStore."""

    @pytest.mark.asyncio
    async def test_set_get_destroy(self, integration_env):
        users = await integration_env.get(UserRepository)
        store = await integration_env.get(SessionStore)
        user = await users.create(make_local_user(email=_fresh_email()))
        now = datetime.now(timezone.utc)
        session = Session(
            id=SessionId(uuid4().hex),
            user_id=user.id,
            created_at=now,
            expires_at=now + timedelta(days=30),
        )

        await store.set(session)
        assert (await store.get(session.id)).user_id == user.id

        await store.destroy(session.id)
        assert await store.get(session.id) is None

    @pytest.mark.asyncio
    async def test_expired_session_is_not_returned(self, integration_env):
        users = await integration_env.get(UserRepository)
        store = await integration_env.get(SessionStore)
        user = await users.create(make_local_user(email=_fresh_email()))
        now = datetime.now(timezone.utc)

        session = Session(
            id=SessionId(uuid4().hex),
            user_id=user.id,
            created_at=now - timedelta(days=31),
            expires_at=now - timedelta(days=1),
        )
        await store.set(session)

        assert await store.get(session.id) is None

    @pytest.mark.asyncio
    async def test_session_for_deleted_user_reports_user_missing(
        self, integration_env
    ):
        users = await integration_env.get(UserRepository)
        session_service = await integration_env.get(SessionService)
        db_session = await integration_env.get(AsyncSession)
        user = await users.create(make_local_user(email=_fresh_email()))
        issued = await session_service.issue(user)

        await db_session.execute(delete(users_table).where(users_table.c.id == user.id))

        with pytest.raises(NotFoundError):
            await session_service.resolve_current(issued.session_id)
