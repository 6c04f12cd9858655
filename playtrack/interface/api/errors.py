"""Centralized error transformation for API routes.

Maps domain errors to JSON responses of the form ``{"code", "message"}``.
Raw provider payloads never reach this layer; only the error message does.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from playtrack.domain.error import (
    DomainError,
    DuplicateIdentityError,
    InvalidCredentialsError,
    NoAllowedDataError,
    NoDataError,
    NotFoundError,
    ProviderUnavailableError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DOMAIN_ERROR_MAP: list[tuple[type[DomainError], int, str]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST, "validation_error"),
    (DuplicateIdentityError, status.HTTP_409_CONFLICT, "duplicate_identity"),
    (NoAllowedDataError, status.HTTP_404_NOT_FOUND, "no_allowed_data"),
    (NoDataError, status.HTTP_404_NOT_FOUND, "no_data"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED, "invalid_credentials"),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED, "unauthenticated"),
    (
        ProviderUnavailableError,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "provider_unavailable",
    ),
]


def classify_error(error: DomainError) -> tuple[int, str]:
    """Get the HTTP status and machine-readable code for a domain error.

    Args:
        error: The domain error to classify

    Returns:
        (status code, error code); unknown domain errors map to 400
    """
    for error_type, status_code, code in DOMAIN_ERROR_MAP:
        if isinstance(error, error_type):
            return status_code, code
    return status.HTTP_400_BAD_REQUEST, "domain_error"


async def handle_domain_error(request: Request, error: DomainError) -> JSONResponse:
    """Render a domain error raised by a route."""
    status_code, code = classify_error(error)
    if status_code >= 500:
        logger.error(f"{code} on {request.url.path}: {error}")
    else:
        logger.info(f"{code} on {request.url.path}: {error}")
    return JSONResponse(
        status_code=status_code,
        content={"code": code, "message": str(error)},
    )


def describe_request_errors(error: RequestValidationError) -> str:
    """Summarize which request fields were rejected, without echoing input."""
    fields = []
    for detail in error.errors():
        # Drop the leading "body"/"query" segment
        loc = [str(part) for part in detail.get("loc", ())[1:]]
        fields.append(".".join(loc) or "body")
    return "Invalid request: " + ", ".join(dict.fromkeys(fields))


async def handle_request_validation_error(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies like any other ValidationError."""
    message = describe_request_errors(error)
    logger.info(f"validation_error on {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": "validation_error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain and request validation error handlers on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
