"""In-memory activity repository for testing."""

from playtrack.domain.model.activity import ActivityRecord
from playtrack.domain.repository.activity import ActivityRepository
from playtrack.domain.value import AppId, UserId


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self) -> None:
        # Insertion order doubles as creation order
        self._records: dict[tuple[UserId, AppId], ActivityRecord] = {}

    async def add_all(self, records: list[ActivityRecord]) -> int:
        """Insert records, skipping keys already stored."""
        inserted = 0
        for record in records:
            key = (record.user_id, record.app_id)
            if key not in self._records:
                self._records[key] = record
                inserted += 1
        return inserted

    async def find_all_by_user_id(self, user_id: UserId) -> list[ActivityRecord]:
        """Get all records for a user."""
        return [r for r in self._records.values() if r.user_id == user_id]
