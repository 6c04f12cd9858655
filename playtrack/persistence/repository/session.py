"""PostgreSQL implementation of the session store."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from playtrack.domain.model import Session
from playtrack.domain.repository import SessionStore
from playtrack.domain.value import SessionId
from playtrack.persistence.mappers import row_to_session, session_to_dict
from playtrack.persistence.tables import sessions_table


class PostgresSessionStore(SessionStore):
    """Sessions stored in the ``sessions`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, session_id: SessionId) -> Optional[Session]:
        """Retrieve a live session by id."""
        stmt = (
            select(sessions_table)
            .where(sessions_table.c.id == session_id)
            .where(sessions_table.c.expires_at > datetime.now(timezone.utc))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_session(dict(row)) if row else None

    async def set(self, session: Session) -> None:
        """Store a session, replacing any previous one with the same id."""
        values = session_to_dict(session)
        stmt = insert(sessions_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[sessions_table.c.id],
            set_={
                "user_id": stmt.excluded.user_id,
                "expires_at": stmt.excluded.expires_at,
            },
        )
        await self.session.execute(stmt)

    async def destroy(self, session_id: SessionId) -> None:
        """Delete a session. Unknown ids are ignored."""
        await self.session.execute(
            delete(sessions_table).where(sessions_table.c.id == session_id)
        )
