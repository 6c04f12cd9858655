"""Session and token cookies."""

from fastapi import Response

from playtrack.config import Settings


def _cookie_options(settings: Settings) -> dict:
    # Production frontend and API live on different hosts; cross-site cookies
    # need samesite=none, which browsers only accept together with secure.
    is_production = settings.environment == "production"
    return {
        "httponly": True,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
        "domain": settings.auth.cookie_domain,
        "path": "/",
    }


def set_auth_cookies(
    response: Response, settings: Settings, token: str, session_id: str
) -> None:
    """Attach the bearer token and session marker to a response.

    Both cookies live as long as the token itself.

    Args:
        response: Response to set the cookies on
        settings: Application settings
        token: Signed JWT
        session_id: Server-side session id
    """
    options = _cookie_options(settings)
    max_age = settings.session_max_age
    response.set_cookie(
        key=settings.auth.token_cookie_name, value=token, max_age=max_age, **options
    )
    response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=session_id,
        max_age=max_age,
        **options,
    )


def clear_auth_cookies(response: Response, settings: Settings) -> None:
    """Delete both auth cookies with the same domain and path they were set with."""
    options = _cookie_options(settings)
    for key in (settings.auth.token_cookie_name, settings.auth.session_cookie_name):
        response.delete_cookie(
            key=key,
            path=options["path"],
            domain=options["domain"],
            secure=options["secure"],
            httponly=options["httponly"],
            samesite=options["samesite"],
        )
