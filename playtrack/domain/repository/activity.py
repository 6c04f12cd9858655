"""Activity record repository interface."""

from abc import ABC, abstractmethod

from playtrack.domain.model.activity import ActivityRecord
from playtrack.domain.value import UserId


class ActivityRepository(ABC):
    """Repository for ActivityRecord entities.

    At most one record exists per (user_id, app_id).
    """

    @abstractmethod
    async def add_all(self, records: list[ActivityRecord]) -> int:
        """Insert records, silently skipping any (user_id, app_id) already stored.

        Args:
            records: Records to insert

        Returns:
            Number of rows actually inserted
        """
        pass

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> list[ActivityRecord]:
        """Get all stored records for a user, oldest first.

        Args:
            user_id: The owning user

        Returns:
            List of records (may be empty)
        """
        pass
