"""Activity routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from playtrack.application.usecase.activity import (
    ListActivityRequest,
    ListActivityResponse,
    ListActivityUseCase,
    RefreshActivityRequest,
    RefreshActivityResponse,
    RefreshActivityUseCase,
)
from playtrack.config import Settings

router = APIRouter(prefix="/activity", tags=["activity"], route_class=DishkaRoute)


@router.post("/recently-played", response_model=RefreshActivityResponse)
async def refresh_recently_played(
    request: RefreshActivityRequest,
    refresh_use_case: FromDishka[RefreshActivityUseCase],
) -> RefreshActivityResponse:
    """Pull a Steam user's recently played games and store the tracked ones.

    Example:
        POST /activity/recently-played
        {"steam_id": "76561197960287930"}

        Response:
        {
            "message": "Filtered games saved successfully",
            "games": [{"app_id": 730, "name": "Counter-Strike 2", ...}]
        }

    Errors: 400 bad Steam ID, 404 no games / no tracked games / unknown
    user, 503 Steam unavailable.
    """
    return await refresh_use_case.execute(request)


@router.get("/me", response_model=ListActivityResponse)
async def list_my_activity(
    request: Request,
    list_use_case: FromDishka[ListActivityUseCase],
    settings: FromDishka[Settings],
) -> ListActivityResponse:
    """List the stored activity of the signed-in user."""
    return await list_use_case.execute(
        ListActivityRequest(
            session_id=request.cookies.get(settings.auth.session_cookie_name)
        )
    )
