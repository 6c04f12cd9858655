"""PostgreSQL implementation of ActivityRecord repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from playtrack.domain.model import ActivityRecord
from playtrack.domain.repository import ActivityRepository
from playtrack.domain.value import UserId
from playtrack.persistence.mappers import (
    activity_record_to_dict,
    row_to_activity_record,
)
from playtrack.persistence.tables import activity_records_table


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_all(self, records: list[ActivityRecord]) -> int:
        """Batch insert records, skipping (user_id, app_id) pairs already stored.

        Args:
            records: Records to insert

        Returns:
            Number of rows inserted
        """
        if not records:
            return 0

        stmt = (
            insert(activity_records_table)
            .values([activity_record_to_dict(r) for r in records])
            .on_conflict_do_nothing(index_elements=["user_id", "app_id"])
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def find_all_by_user_id(self, user_id: UserId) -> list[ActivityRecord]:
        """Get all records for a user, oldest first."""
        stmt = (
            select(activity_records_table)
            .where(activity_records_table.c.user_id == user_id)
            .order_by(
                activity_records_table.c.created_at.asc(),
                activity_records_table.c.app_id.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_activity_record(dict(row)) for row in result.mappings()]
