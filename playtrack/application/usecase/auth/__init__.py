"""Authentication use cases."""

from .common import AuthenticatedResponse, UserInfo
from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .register import RegisterRequest, RegisterUseCase
from .steam_login import (
    BeginSteamLoginResponse,
    BeginSteamLoginUseCase,
    CompleteSteamLoginRequest,
    CompleteSteamLoginUseCase,
)

__all__ = [
    "AuthenticatedResponse",
    "BeginSteamLoginResponse",
    "BeginSteamLoginUseCase",
    "CompleteSteamLoginRequest",
    "CompleteSteamLoginUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "UserInfo",
]
