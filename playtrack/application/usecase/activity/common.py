"""Activity record view shared by the activity use cases."""

from datetime import datetime

from pydantic import BaseModel

from playtrack.domain.model import ActivityRecord


class ActivityInfo(BaseModel):
    """A recently played title."""

    app_id: int
    name: str
    playtime_2weeks: int | None
    playtime_forever: int
    img_icon_url: str | None
    img_logo_url: str | None
    created_at: datetime

    @classmethod
    def from_record(cls, record: ActivityRecord) -> "ActivityInfo":
        return cls(
            app_id=record.app_id,
            name=record.name,
            playtime_2weeks=record.playtime_2weeks,
            playtime_forever=record.playtime_forever,
            img_icon_url=record.img_icon_url,
            img_logo_url=record.img_logo_url,
            created_at=record.created_at,
        )
