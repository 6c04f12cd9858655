"""Domain services."""

from .activity_service import ActivityClient, ActivityService
from .base import Service
from .jwt_service import JWTService
from .password_auth_service import PasswordAuthService, canonicalize_email
from .session_service import IssuedSession, SessionService
from .steam_auth_service import OpenIDClient, SteamAuthService
from .user_service import UserService

__all__ = [
    "ActivityClient",
    "ActivityService",
    "IssuedSession",
    "JWTService",
    "OpenIDClient",
    "PasswordAuthService",
    "Service",
    "SessionService",
    "SteamAuthService",
    "UserService",
    "canonicalize_email",
]
