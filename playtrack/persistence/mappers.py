"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
"""

from typing import Any, Dict
from uuid import UUID

from playtrack.domain.model import ActivityRecord, Session, User
from playtrack.domain.value import AppId, SessionId, SteamId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row.get("email"),
        birthday=row.get("birthday"),
        steam_id=SteamId(row["steam_id"]) if row.get("steam_id") else None,
        password_hash=row["password_hash"],
        profile_url=row.get("profile_url"),
        avatar_url=row.get("avatar_url"),
        game_now_playing=row.get("game_now_playing"),
        role_id=row.get("role_id"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Column values
    """
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "birthday": user.birthday,
        "steam_id": user.steam_id.root if user.steam_id else None,
        "password_hash": user.password_hash,
        "profile_url": user.profile_url,
        "avatar_url": user.avatar_url,
        "game_now_playing": user.game_now_playing,
        "role_id": user.role_id,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def user_changes_to_dict(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a partial User update to column values."""
    return {
        key: value.root if isinstance(value, SteamId) else value
        for key, value in changes.items()
    }


def row_to_activity_record(row: Dict[str, Any]) -> ActivityRecord:
    """Convert database row to ActivityRecord domain model."""
    return ActivityRecord(
        user_id=UserId(_uuid(row["user_id"])),
        app_id=AppId(row["app_id"]),
        name=row["name"],
        playtime_2weeks=row.get("playtime_2weeks"),
        playtime_forever=row["playtime_forever"],
        img_icon_url=row.get("img_icon_url"),
        img_logo_url=row.get("img_logo_url"),
        created_at=row["created_at"],
    )


def activity_record_to_dict(record: ActivityRecord) -> Dict[str, Any]:
    """Convert ActivityRecord domain model to database dict."""
    return {
        "user_id": record.user_id,
        "app_id": record.app_id,
        "name": record.name,
        "playtime_2weeks": record.playtime_2weeks,
        "playtime_forever": record.playtime_forever,
        "img_icon_url": record.img_icon_url,
        "img_logo_url": record.img_logo_url,
        "created_at": record.created_at,
    }


def row_to_session(row: Dict[str, Any]) -> Session:
    """Convert database row to Session domain model."""
    return Session(
        id=SessionId(row["id"]),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
    )


def session_to_dict(session: Session) -> Dict[str, Any]:
    """Convert Session domain model to database dict."""
    return {
        "id": session.id,
        "user_id": session.user_id,
        "created_at": session.created_at,
        "expires_at": session.expires_at,
    }
