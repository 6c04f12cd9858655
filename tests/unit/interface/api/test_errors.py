"""Unit tests for domain error to HTTP mapping."""

import pytest
from fastapi.exceptions import RequestValidationError

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
from playtrack.interface.api.errors import classify_error, describe_request_errors


@pytest.mark.parametrize(
    "error, expected",
    [
        (ValidationError("Please add all fields"), (400, "validation_error")),
        (DuplicateIdentityError("email", "a@b.c"), (409, "duplicate_identity")),
        (NotFoundError("User", "a@b.c"), (404, "not_found")),
        (NoDataError("76561197960287930"), (404, "no_data")),
        (NoAllowedDataError("76561197960287930"), (404, "no_allowed_data")),
        (InvalidCredentialsError(), (401, "invalid_credentials")),
        (UnauthenticatedError(), (401, "unauthenticated")),
        (ProviderUnavailableError("get_recently_played_games"), (503, "provider_unavailable")),
    ],
)
def test_classify_error(error, expected):
    assert classify_error(error) == expected


def test_unmapped_domain_error_is_a_bad_request():
    assert classify_error(DomainError("odd")) == (400, "domain_error")


def test_request_errors_name_fields_without_echoing_input():
    error = RequestValidationError(
        [
            {
                "type": "date_from_datetime_parsing",
                "loc": ("body", "birthday"),
                "msg": "Input should be a valid date",
                "input": "not-a-date",
            },
            {
                "type": "string_type",
                "loc": ("body", "email"),
                "msg": "Input should be a valid string",
                "input": 42,
            },
        ]
    )

    message = describe_request_errors(error)

    assert message == "Invalid request: birthday, email"
    assert "not-a-date" not in message
