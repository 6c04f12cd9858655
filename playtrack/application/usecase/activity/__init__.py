"""Activity use cases."""

from .common import ActivityInfo
from .list_activity import ListActivityRequest, ListActivityResponse, ListActivityUseCase
from .refresh_activity import (
    RefreshActivityRequest,
    RefreshActivityResponse,
    RefreshActivityUseCase,
)

__all__ = [
    "ActivityInfo",
    "ListActivityRequest",
    "ListActivityResponse",
    "ListActivityUseCase",
    "RefreshActivityRequest",
    "RefreshActivityResponse",
    "RefreshActivityUseCase",
]
