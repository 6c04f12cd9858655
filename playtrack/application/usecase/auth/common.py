"""Response models shared by the authentication use cases."""

from datetime import date, datetime

from pydantic import BaseModel

from playtrack.domain.model import User
from playtrack.domain.service import IssuedSession


class UserInfo(BaseModel):
    """Public view of a user."""

    user_id: str
    username: str
    email: str | None
    birthday: date | None
    steam_id: str | None
    profile_url: str | None
    avatar_url: str | None
    game_now_playing: str | None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=str(user.id),
            username=user.username,
            email=user.email,
            birthday=user.birthday,
            steam_id=user.steam_id.root if user.steam_id else None,
            profile_url=user.profile_url,
            avatar_url=user.avatar_url,
            game_now_playing=user.game_now_playing,
        )


class AuthenticatedResponse(BaseModel):
    """A signed-in user with their bearer token and session marker.

    The session id travels in an HTTP-only cookie and is not meant to be
    rendered into response bodies.
    """

    user: UserInfo
    token: str
    expires_at: datetime
    session_id: str

    @classmethod
    def build(cls, user: User, issued: IssuedSession) -> "AuthenticatedResponse":
        return cls(
            user=UserInfo.from_user(user),
            token=issued.token,
            expires_at=issued.expires_at,
            session_id=issued.session_id,
        )
