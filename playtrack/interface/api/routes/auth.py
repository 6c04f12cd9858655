"""Authentication routes."""

import logging
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from playtrack.application.usecase.auth import (
    AuthenticatedResponse,
    BeginSteamLoginUseCase,
    CompleteSteamLoginRequest,
    CompleteSteamLoginUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterUseCase,
    UserInfo,
)
from playtrack.config import Settings
from playtrack.domain.error import DomainError
from playtrack.interface.api.cookies import clear_auth_cookies, set_auth_cookies
from playtrack.interface.api.errors import classify_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


def _bearer_token(request: Request) -> str | None:
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/register",
    response_model=AuthenticatedResponse,
    response_model_exclude={"session_id"},
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthenticatedResponse:
    """Register a local account and sign it in.

    Example:
        POST /auth/register
        {
            "username": "alice",
            "email": "alice@example.com",
            "birthday": "1990-04-01",
            "password": "hunter22"
        }

        Response (201): user, token and expires_at; Set-Cookie for the
        token and the session id
    """
    result = await register_use_case.execute(request)
    set_auth_cookies(response, settings, result.token, result.session_id)
    logger.info(f"Registered user {result.user.user_id}")
    return result


@router.post(
    "/login",
    response_model=AuthenticatedResponse,
    response_model_exclude={"session_id"},
)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthenticatedResponse:
    """Sign in with email and password.

    Wrong passwords answer 401 without saying which field was wrong; an
    unknown email answers 404.
    """
    result = await login_use_case.execute(request)
    set_auth_cookies(response, settings, result.token, result.session_id)
    return result


@router.get("/steam")
async def steam_login(
    begin_use_case: FromDishka[BeginSteamLoginUseCase],
) -> RedirectResponse:
    """Send the browser to Steam to sign in.

    Returns:
        HTTP 302 redirect to the Steam OpenID sign-in page
    """
    result = await begin_use_case.execute()
    return RedirectResponse(url=result.redirect_url, status_code=status.HTTP_302_FOUND)


@router.get("/steam/authenticate")
async def steam_callback(
    request: Request,
    complete_use_case: FromDishka[CompleteSteamLoginUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Handle the Steam OpenID callback and complete login.

    Steam redirects the browser here with the signed assertion in the query
    string. On success the token and session cookies are set and the
    browser continues to the frontend dashboard; on failure it lands on the
    frontend error page with a machine-readable ``error`` code.

    Example:
        GET /auth/steam/authenticate?openid.mode=id_res&openid.claimed_id=...

        Redirects to: http://localhost:3000/dashboard
        Sets cookies: auth_token, session_id
    """
    frontend_url = settings.api.frontend_url

    try:
        result = await complete_use_case.execute(
            CompleteSteamLoginRequest.from_query(request.query_params)
        )
    except DomainError as e:
        _, code = classify_error(e)
        logger.warning(f"Steam login failed ({code}): {e}")
        return RedirectResponse(
            url=f"{frontend_url}/auth/error?{urlencode({'error': code})}",
            status_code=status.HTTP_302_FOUND,
        )

    redirect_response = RedirectResponse(
        url=f"{frontend_url}{settings.api.post_login_path}",
        status_code=status.HTTP_302_FOUND,
    )
    # Cookies must go on the response actually returned
    set_auth_cookies(redirect_response, settings, result.token, result.session_id)
    logger.info(f"Steam login successful for user {result.user.user_id}")
    return redirect_response


@router.get("/me", response_model=UserInfo)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> UserInfo:
    """Get the user behind the session cookie, or else the bearer token.

    The token is read from an ``Authorization: Bearer`` header or the token
    cookie. Answers 401 when neither resolves.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(
            session_id=request.cookies.get(settings.auth.session_cookie_name),
            token=_bearer_token(request)
            or request.cookies.get(settings.auth.token_cookie_name),
        )
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request,
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Destroy the session and clear the auth cookies."""
    await logout_use_case.execute(
        LogoutRequest(session_id=request.cookies.get(settings.auth.session_cookie_name))
    )
    clear_auth_cookies(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")
