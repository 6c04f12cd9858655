"""Activity record entity.

One row per (owner, Steam app). Rows are written once and never updated.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from playtrack.domain.model.common import DomainModel
from playtrack.domain.value import AppId, UserId


class ActivityRecord(DomainModel):
    """Recently played title reported by Steam for a user."""

    user_id: UserId
    app_id: AppId
    name: str
    playtime_2weeks: Optional[int] = None  # minutes, absent if not played recently
    playtime_forever: int  # minutes
    img_icon_url: Optional[str] = None
    img_logo_url: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
